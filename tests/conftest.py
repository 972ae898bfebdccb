"""Pytest configuration and fixtures"""
from typing import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from api import create_app
from models import storage
from utils.blob_store import LocalBlobStore


@pytest.fixture(scope="function")
def app(tmp_path) -> Generator[Flask, None, None]:
    """Fresh app per test: in-memory SQLite and a temp upload folder"""
    app = create_app("testing")
    app.extensions["blob_store"] = LocalBlobStore(str(tmp_path / "uploads"))
    with app.app_context():
        yield app
    storage.close()


@pytest.fixture(scope="function")
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture
def user_data() -> dict:
    return {"username": "jdoe", "name": "J Doe", "password": "secret123"}


@pytest.fixture
def signed_up(client: FlaskClient, user_data: dict) -> dict:
    response = client.post("/auth/signup", json=user_data)
    assert response.status_code == 200
    return user_data


@pytest.fixture
def login_tokens(client: FlaskClient, signed_up: dict) -> dict:
    response = client.post(
        "/auth/login",
        json={"username": signed_up["username"], "password": signed_up["password"]},
    )
    assert response.status_code == 200
    return response.get_json()


@pytest.fixture
def auth_headers(login_tokens: dict) -> dict:
    return {"Authorization": f"Bearer {login_tokens['accessToken']}"}


@pytest.fixture
def sample_post() -> dict:
    return {
        "title": "My First Post",
        "subHeading": "Introduction to programming",
        "description": "This is the content of the first post.",
        "username": "jdoe",
        "categories": ["Technology", "Programming"],
        "picture": "http://example.com/post-image.jpg",
    }
