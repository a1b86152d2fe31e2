from datetime import datetime, timedelta


def _create(c, headers, title="A", content="B"):
    r = c.post("/notes", json={"title": title, "content": content}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_notes_require_session(client):
    assert client.get("/notes").status_code == 401
    assert client.post("/notes", json={"title": "x"}).status_code == 401
    assert client.put("/notes/abc", json={"title": "x"}).status_code == 401
    assert client.delete("/notes/abc").status_code == 401


def test_create_note_allows_empty_content(client, alice):
    note = _create(client, alice, title="Empty", content="")
    assert note["content"] == ""
    assert len(note["id"]) == 32
    assert note["created_at"]


def test_create_update_list_roundtrip(client, alice):
    note = _create(client, alice)
    r = client.put(f"/notes/{note['id']}", json={"title": "A2", "content": "B2"}, headers=alice)
    assert r.status_code == 200
    items = client.get("/notes", headers=alice).json()
    assert len(items) == 1
    assert items[0]["id"] == note["id"]
    assert (items[0]["title"], items[0]["content"]) == ("A2", "B2")


def test_partial_update_keeps_other_fields(client, alice):
    note = _create(client, alice, title="keep", content="old")
    r = client.put(f"/notes/{note['id']}", json={"content": "new"}, headers=alice)
    assert r.json()["title"] == "keep"
    assert r.json()["content"] == "new"


def test_list_is_scoped_to_owner(client, alice, bob):
    a = _create(client, alice, title="alice note")
    b = _create(client, bob, title="bob note")
    alice_ids = {n["id"] for n in client.get("/notes", headers=alice).json()}
    bob_ids = {n["id"] for n in client.get("/notes", headers=bob).json()}
    assert alice_ids == {a["id"]}
    assert bob_ids == {b["id"]}


def test_foreign_update_and_delete_do_not_mutate(client, alice, bob):
    note = _create(client, alice, title="mine", content="private")
    r = client.put(f"/notes/{note['id']}", json={"title": "hijacked"}, headers=bob)
    assert r.status_code == 404
    r = client.delete(f"/notes/{note['id']}", headers=bob)
    assert r.status_code == 404
    items = client.get("/notes", headers=alice).json()
    assert [(n["id"], n["title"], n["content"]) for n in items] == [(note["id"], "mine", "private")]


def test_missing_and_foreign_look_the_same(client, alice, bob):
    note = _create(client, alice)
    foreign = client.put(f"/notes/{note['id']}", json={"title": "x"}, headers=bob)
    missing = client.put("/notes/does-not-exist", json={"title": "x"}, headers=bob)
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json() == missing.json()


def test_delete_note(client, alice):
    note = _create(client, alice)
    r = client.delete(f"/notes/{note['id']}", headers=alice)
    assert r.status_code == 200
    assert r.json() == {"ok": True, "data": {"deleted": True, "id": note["id"]}}
    assert client.get("/notes", headers=alice).json() == []


def test_long_title_accepted(client, alice):
    note = _create(client, alice, title="t" * 500)
    assert note["title"] == "t" * 500


def test_timestamps_carry_utc_offset(client, alice):
    note = _create(client, alice)
    for value in (note["created_at"], note["updated_at"]):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert parsed.utcoffset() == timedelta(0)
    listed = client.get("/notes", headers=alice).json()[0]
    assert listed["created_at"].endswith(("Z", "+00:00"))
