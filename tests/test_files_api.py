"""Tests for image upload and retrieval"""
import io

from flask.testing import FlaskClient


def _upload(client: FlaskClient, headers: dict, name: str, data: bytes = b"\x89PNG fake"):
    return client.post(
        "/upload",
        data={"file": (io.BytesIO(data), name)},
        headers=headers,
        content_type="multipart/form-data",
    )


def test_upload_and_fetch(client: FlaskClient, auth_headers: dict):
    response = _upload(client, auth_headers, "cat picture.png")
    assert response.status_code == 200
    url = response.get_json()["url"]
    assert url.startswith("/file/")
    assert url.endswith("-cat_picture.png")

    fetched = client.get(url)
    assert fetched.status_code == 200
    assert fetched.data == b"\x89PNG fake"
    assert fetched.mimetype == "image/png"


def test_upload_requires_auth(client: FlaskClient):
    assert _upload(client, {}, "cat.png").status_code == 401


def test_upload_rejects_bad_input(client: FlaskClient, auth_headers: dict):
    assert _upload(client, auth_headers, "script.exe").status_code == 400
    response = client.post("/upload", data={}, headers=auth_headers, content_type="multipart/form-data")
    assert response.status_code == 400


def test_missing_file(client: FlaskClient):
    assert client.get("/file/nothing-here.png").status_code == 404
    assert client.get("/file/..%2Fsecret").status_code == 404
