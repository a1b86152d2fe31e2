def _create(c, headers, title="Buy milk"):
    r = c.post("/tasks", json={"title": title}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()


def test_tasks_require_session(client):
    assert client.get("/tasks").status_code == 401
    assert client.post("/tasks", json={"title": "x"}).status_code == 401
    assert client.put("/tasks/abc", json={"done": True}).status_code == 401
    assert client.delete("/tasks/abc").status_code == 401


def test_new_task_is_not_done(client, alice):
    task = _create(client, alice)
    assert task["done"] is False
    assert task["title"] == "Buy milk"


def test_blank_title_rejected(client, alice):
    r = client.post("/tasks", json={"title": "   "}, headers=alice)
    assert r.status_code == 400


def test_toggle_done(client, alice):
    task = _create(client, alice)
    r = client.put(f"/tasks/{task['id']}", json={"done": True}, headers=alice)
    assert r.status_code == 200
    assert r.json()["done"] is True
    assert r.json()["title"] == "Buy milk"
    r = client.put(f"/tasks/{task['id']}", json={"done": False, "title": "Buy oat milk"}, headers=alice)
    assert r.json()["done"] is False
    assert r.json()["title"] == "Buy oat milk"


def test_list_newest_first(client, alice):
    first = _create(client, alice, "first")
    second = _create(client, alice, "second")
    ids = [t["id"] for t in client.get("/tasks", headers=alice).json()]
    assert ids == [second["id"], first["id"]]


def test_ownership_isolation(client, alice, bob):
    mine = _create(client, alice, "mine")
    assert client.get("/tasks", headers=bob).json() == []
    assert client.put(f"/tasks/{mine['id']}", json={"done": True}, headers=bob).status_code == 404
    assert client.delete(f"/tasks/{mine['id']}", headers=bob).status_code == 404
    items = client.get("/tasks", headers=alice).json()
    assert len(items) == 1 and items[0]["done"] is False


def test_delete_twice(client, alice):
    task = _create(client, alice)
    assert client.delete(f"/tasks/{task['id']}", headers=alice).status_code == 200
    r = client.delete(f"/tasks/{task['id']}", headers=alice)
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "not_found"
    assert client.get("/tasks", headers=alice).json() == []


def test_blank_title_rejected_on_update(client, alice):
    task = _create(client, alice)
    r = client.put(f"/tasks/{task['id']}", json={"title": "  "}, headers=alice)
    assert r.status_code == 400
    assert client.get("/tasks", headers=alice).json()[0]["title"] == "Buy milk"


def test_long_title_and_utc_timestamps(client, alice):
    task = _create(client, alice, "x" * 300)
    assert task["title"] == "x" * 300
    assert task["created_at"].endswith(("Z", "+00:00"))
