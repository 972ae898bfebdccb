"""Tests for post endpoints"""
from flask.testing import FlaskClient


def _create(client: FlaskClient, headers: dict, data: dict):
    response = client.post("/posts", json=data, headers=headers)
    assert response.status_code == 200
    return response.get_json()["post"]


def test_create_post(client: FlaskClient, auth_headers: dict, sample_post: dict):
    post = _create(client, auth_headers, sample_post)
    assert post["id"]
    assert post["title"] == sample_post["title"]
    assert post["subHeading"] == sample_post["subHeading"]
    assert post["categories"] == ["Technology", "Programming"]
    assert post["createdDate"]


def test_create_post_requires_auth(client: FlaskClient, sample_post: dict):
    assert client.post("/posts", json=sample_post).status_code == 401


def test_create_post_requires_fields(client: FlaskClient, auth_headers: dict):
    response = client.post("/posts", json={"title": "Only a title"}, headers=auth_headers)
    assert response.status_code == 422
    details = response.get_json()["details"]
    assert "subHeading" in details
    assert "username" in details


def test_create_post_duplicate_title(client: FlaskClient, auth_headers: dict, sample_post: dict):
    _create(client, auth_headers, sample_post)
    response = client.post("/posts", json=sample_post, headers=auth_headers)
    assert response.status_code == 409


def test_list_posts_with_filters(client: FlaskClient, auth_headers: dict, sample_post: dict):
    _create(client, auth_headers, sample_post)
    _create(client, auth_headers, dict(sample_post, title="Second", username="asmith", categories=["Music"]))

    assert len(client.get("/posts", headers=auth_headers).get_json()) == 2

    by_user = client.get("/posts?username=asmith", headers=auth_headers).get_json()
    assert [p["title"] for p in by_user] == ["Second"]

    by_category = client.get("/posts?category=Technology", headers=auth_headers).get_json()
    assert [p["title"] for p in by_category] == ["My First Post"]


def test_get_post(client: FlaskClient, auth_headers: dict, sample_post: dict):
    post = _create(client, auth_headers, sample_post)
    response = client.get(f"/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()["title"] == sample_post["title"]

    assert client.get("/posts/does-not-exist", headers=auth_headers).status_code == 404


def test_update_post(client: FlaskClient, auth_headers: dict, sample_post: dict):
    post = _create(client, auth_headers, sample_post)
    response = client.put(
        f"/posts/{post['id']}", json={"description": "Edited"}, headers=auth_headers
    )
    assert response.status_code == 200
    updated = response.get_json()["post"]
    assert updated["description"] == "Edited"
    assert updated["title"] == sample_post["title"]

    missing = client.put("/posts/does-not-exist", json={"description": "x"}, headers=auth_headers)
    assert missing.status_code == 404


def test_update_post_title_conflict(client: FlaskClient, auth_headers: dict, sample_post: dict):
    _create(client, auth_headers, sample_post)
    other = _create(client, auth_headers, dict(sample_post, title="Other"))
    response = client.put(
        f"/posts/{other['id']}", json={"title": sample_post["title"]}, headers=auth_headers
    )
    assert response.status_code == 409


def test_delete_post(client: FlaskClient, auth_headers: dict, sample_post: dict):
    post = _create(client, auth_headers, sample_post)
    assert client.delete(f"/posts/{post['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/posts/{post['id']}", headers=auth_headers).status_code == 404
    assert client.delete(f"/posts/{post['id']}", headers=auth_headers).status_code == 404
