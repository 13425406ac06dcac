import os

from mld.core import config

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def user_payload(username, first_name="Test", last_name="User", **extra):
    payload = {
        "username": username,
        "password": "secret123",
        "firstName": first_name,
        "lastName": last_name,
        "email": f"{username}@example.com",
    }
    payload.update(extra)
    return payload


def register(client, username, first_name="Test", last_name="User"):
    response = client.post("/api/auth/register", json=user_payload(username, first_name, last_name))
    assert response.status_code == 201, response.text
    data = response.json()
    return data["token"], data["user"]


def image_file(name="photo.png", content=PNG_BYTES, content_type="image/png"):
    return {"image": (name, content, content_type)}


def uploaded_files():
    found = []
    for root, _dirs, files in os.walk(config.UPLOAD_DIR):
        found.extend(os.path.join(root, f) for f in files)
    return found
