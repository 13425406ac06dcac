from .helpers import auth_headers, image_file, register


def create_post(client, token, **form):
    data = {"title": "Grand opening", "content": "Our new store is open"}
    data.update(form)
    response = client.post("/api/news", data=data, files=image_file(), headers=auth_headers(token))
    assert response.status_code == 201, response.text
    return response.json()


def add_comment(client, token, post_id, content="Nice!"):
    response = client.post(f"/api/news/{post_id}/comment", json={"content": content}, headers=auth_headers(token))
    assert response.status_code == 200, response.text
    return response.json()


def add_reply(client, token, post_id, comment_id, content="Thanks!"):
    response = client.post(
        f"/api/news/{post_id}/comment/{comment_id}/reply", json={"content": content}, headers=auth_headers(token)
    )
    assert response.status_code == 200, response.text
    return response.json()


def test_end_to_end_comment_flow(client, admin):
    admin_token, admin_user = admin
    post = create_post(client, admin_token)
    assert post["image"].startswith("/uploads/news/")
    assert post["author"]["id"] == admin_user["id"]
    assert post["author"]["firstName"] == "Site"

    token, commenter = register(client, "jane", "Jane", "Le")
    commented = add_comment(client, token, post["id"], "Congratulations")
    assert len(commented["comments"]) == 1
    comment = commented["comments"][0]
    assert comment["content"] == "Congratulations"
    assert comment["user"]["id"] == commenter["id"]
    assert comment["user"]["firstName"] == "Jane"
    assert comment["user"]["lastName"] == "Le"

    deleted = client.delete(f"/api/news/{post['id']}/comment/{comment['id']}", headers=auth_headers(token))
    assert deleted.status_code == 200
    assert deleted.json()["comments"] == []


def test_only_admin_manages_posts(client, admin, user):
    user_token, _ = user
    response = client.post(
        "/api/news", data={"title": "x", "content": "y"}, files=image_file(), headers=auth_headers(user_token)
    )
    assert response.status_code == 403

    post = create_post(client, admin[0])
    assert client.put(f"/api/news/{post['id']}", data={"title": "z"}, headers=auth_headers(user_token)).status_code == 403
    assert client.delete(f"/api/news/{post['id']}", headers=auth_headers(user_token)).status_code == 403
    assert client.post("/api/news", data={"title": "x", "content": "y"}).status_code == 401


def test_create_post_requires_image_and_fields(client, admin):
    token, _ = admin
    no_image = client.post("/api/news", data={"title": "x", "content": "y"}, headers=auth_headers(token))
    assert no_image.status_code == 400

    no_title = client.post("/api/news", data={"content": "y"}, files=image_file(), headers=auth_headers(token))
    assert no_title.status_code == 400


def test_listing_returns_only_published_posts_newest_first(client, admin):
    token, _ = admin
    first = create_post(client, token, title="Zeta first")
    create_post(client, token, title="Draft", isPublished="false")
    second = create_post(client, token, title="Alpha second")
    third = create_post(client, token, title="Middle third")

    listing = client.get("/api/news").json()
    assert [p["id"] for p in listing] == [third["id"], second["id"], first["id"]]


def test_listing_resolves_authors_of_every_post(client, admin, user):
    token, admin_user = admin
    first = create_post(client, token, title="One")
    create_post(client, token, title="Two")
    add_comment(client, user[0], first["id"], "Hello")

    listing = client.get("/api/news").json()
    assert [p["author"]["id"] for p in listing] == [admin_user["id"], admin_user["id"]]
    commented = next(p for p in listing if p["id"] == first["id"])
    assert commented["comments"][0]["user"]["firstName"] == "Alice"


def test_get_unpublished_post_by_id(client, admin):
    token, _ = admin
    draft = create_post(client, token, isPublished="false")
    response = client.get(f"/api/news/{draft['id']}")
    assert response.status_code == 200
    assert response.json()["isPublished"] is False


def test_listing_text_lookup(client, admin):
    token, _ = admin
    create_post(client, token, title="Camera promotion", content="Discounts on domes")
    create_post(client, token, title="Holiday hours", content="Closed on Sunday")

    found = client.get("/api/news", params={"q": "DISCOUNT"}).json()
    assert [p["title"] for p in found] == ["Camera promotion"]


def test_update_post(client, admin):
    token, _ = admin
    post = create_post(client, token)
    response = client.put(
        f"/api/news/{post['id']}", data={"title": "Updated"}, files=image_file("new.png"), headers=auth_headers(token)
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Updated"
    assert response.json()["content"] == post["content"]
    assert response.json()["image"] != post["image"]


def test_missing_post(client, user):
    token, _ = user
    assert client.get("/api/news/missing").status_code == 404
    assert client.post("/api/news/missing/like", headers=auth_headers(token)).status_code == 404
    assert client.post("/api/news/missing/comment", json={"content": "hi"}, headers=auth_headers(token)).status_code == 404


def test_like_is_a_toggle(client, admin, user, other_user):
    post = create_post(client, admin[0])
    alice_token, alice = user
    bob_token, bob = other_user

    liked = client.post(f"/api/news/{post['id']}/like", headers=auth_headers(alice_token))
    assert liked.status_code == 200
    assert liked.json()["likes"] == [alice["id"]]

    both = client.post(f"/api/news/{post['id']}/like", headers=auth_headers(bob_token)).json()
    assert set(both["likes"]) == {alice["id"], bob["id"]}

    unliked = client.post(f"/api/news/{post['id']}/like", headers=auth_headers(alice_token)).json()
    assert unliked["likes"] == [bob["id"]]

    restored = client.post(f"/api/news/{post['id']}/like", headers=auth_headers(bob_token)).json()
    assert restored["likes"] == []


def test_like_requires_authentication(client, admin):
    post = create_post(client, admin[0])
    assert client.post(f"/api/news/{post['id']}/like").status_code == 401


def test_comment_requires_content(client, admin, user):
    post = create_post(client, admin[0])
    response = client.post(f"/api/news/{post['id']}/comment", json={"content": "  "}, headers=auth_headers(user[0]))
    assert response.status_code == 400


def test_comment_deletion_authorization(client, admin, user, other_user):
    post = create_post(client, admin[0])
    comment_id = add_comment(client, user[0], post["id"])["comments"][0]["id"]

    forbidden = client.delete(f"/api/news/{post['id']}/comment/{comment_id}", headers=auth_headers(other_user[0]))
    assert forbidden.status_code == 403
    assert len(client.get(f"/api/news/{post['id']}").json()["comments"]) == 1

    by_admin = client.delete(f"/api/news/{post['id']}/comment/{comment_id}", headers=auth_headers(admin[0]))
    assert by_admin.status_code == 200
    assert by_admin.json()["comments"] == []

    missing = client.delete(f"/api/news/{post['id']}/comment/{comment_id}", headers=auth_headers(admin[0]))
    assert missing.status_code == 404


def test_replies(client, admin, user, other_user):
    post = create_post(client, admin[0])
    comment_id = add_comment(client, user[0], post["id"])["comments"][0]["id"]

    replied = add_reply(client, other_user[0], post["id"], comment_id, "Agreed")
    replies = replied["comments"][0]["replies"]
    assert len(replies) == 1
    assert replies[0]["content"] == "Agreed"
    assert replies[0]["user"]["firstName"] == "Bob"

    missing_comment = client.post(
        f"/api/news/{post['id']}/comment/nope/reply", json={"content": "x"}, headers=auth_headers(user[0])
    )
    assert missing_comment.status_code == 404


def test_reply_deletion_authorization(client, admin, user, other_user):
    post = create_post(client, admin[0])
    comment_id = add_comment(client, user[0], post["id"])["comments"][0]["id"]
    reply_id = add_reply(client, other_user[0], post["id"], comment_id)["comments"][0]["replies"][0]["id"]
    url = f"/api/news/{post['id']}/comment/{comment_id}/reply/{reply_id}"

    # Chủ comment không phải chủ reply
    assert client.delete(url, headers=auth_headers(user[0])).status_code == 403

    response = client.delete(url, headers=auth_headers(other_user[0]))
    assert response.status_code == 200
    assert response.json()["comments"][0]["replies"] == []

    assert client.delete(url, headers=auth_headers(admin[0])).status_code == 404


def test_admin_can_delete_any_reply(client, admin, user):
    post = create_post(client, admin[0])
    comment_id = add_comment(client, user[0], post["id"])["comments"][0]["id"]
    reply_id = add_reply(client, user[0], post["id"], comment_id)["comments"][0]["replies"][0]["id"]

    response = client.delete(
        f"/api/news/{post['id']}/comment/{comment_id}/reply/{reply_id}", headers=auth_headers(admin[0])
    )
    assert response.status_code == 200


def test_deleting_comment_removes_its_replies(client, admin, user, other_user):
    post = create_post(client, admin[0])
    add_comment(client, other_user[0], post["id"], "Keep me")
    comment_id = add_comment(client, user[0], post["id"], "Remove me")["comments"][1]["id"]
    add_reply(client, other_user[0], post["id"], comment_id)
    add_reply(client, admin[0], post["id"], comment_id)

    response = client.delete(f"/api/news/{post['id']}/comment/{comment_id}", headers=auth_headers(user[0]))
    assert response.status_code == 200
    comments = response.json()["comments"]
    assert [c["content"] for c in comments] == ["Keep me"]
    assert comments[0]["replies"] == []


def test_deleting_post_removes_everything(client, admin, user):
    post = create_post(client, admin[0])
    comment_id = add_comment(client, user[0], post["id"])["comments"][0]["id"]
    add_reply(client, user[0], post["id"], comment_id)

    response = client.delete(f"/api/news/{post['id']}", headers=auth_headers(admin[0]))
    assert response.status_code == 200
    assert client.get(f"/api/news/{post['id']}").status_code == 404
    assert client.post(
        f"/api/news/{post['id']}/comment/{comment_id}/reply", json={"content": "late"}, headers=auth_headers(user[0])
    ).status_code == 404
