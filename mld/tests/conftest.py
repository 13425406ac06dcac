import os
import shutil
import tempfile

# Cấu hình phải được đặt trước khi import app
UPLOAD_ROOT = tempfile.mkdtemp(prefix="mld-uploads-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = UPLOAD_ROOT

import pytest
from fastapi.testclient import TestClient

from mld.main import app
from mld.core.database import Base, engine
from .helpers import register, user_payload


@pytest.fixture(autouse=True)
def reset_state():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    for entry in os.listdir(UPLOAD_ROOT):
        shutil.rmtree(os.path.join(UPLOAD_ROOT, entry), ignore_errors=True)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin(client):
    response = client.post("/api/auth/setup", json=user_payload("admin", "Site", "Admin"))
    assert response.status_code == 201, response.text
    login = client.post("/api/auth/login", json={"username": "admin", "password": "secret123"})
    assert login.status_code == 200, login.text
    return login.json()["token"], login.json()["user"]


@pytest.fixture
def user(client):
    return register(client, "alice", "Alice", "Nguyen")


@pytest.fixture
def other_user(client):
    return register(client, "bob", "Bob", "Tran")
