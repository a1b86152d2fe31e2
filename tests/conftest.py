import os
import tempfile

# configure before app.* is imported
_TMP = tempfile.mkdtemp(prefix="myworkspace-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP}/test.db"
os.environ["SUMMARY_MOCK_DELAY_SEC"] = "0.05"
os.environ.pop("OPENAI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.shared.db import Base, engine


@pytest.fixture
def client():
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c


def signup(c, email="ada@example.com", password="secret1", name="Ada"):
    return c.post("/auth/signup", json={"name": name, "email": email, "password": password})


def login_headers(c, email="ada@example.com", password="secret1", name="Ada"):
    signup(c, email=email, password=password, name=name)
    r = c.post("/auth/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    c.cookies.clear()
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def alice(client):
    return login_headers(client, email="alice@example.com", name="Alice")


@pytest.fixture
def bob(client):
    return login_headers(client, email="bob@example.com", name="Bob")
