"""Tests for the app factory, health and error envelope"""
import pytest

from api import create_app
from api.config import TestingConfig


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_root_and_security_headers(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_unknown_route_uses_envelope(client):
    response = client.get("/nope")
    assert response.status_code == 404
    body = response.get_json()
    assert body["error"] == "NOT_FOUND"
    assert "msg" in body


def test_equal_secrets_refuse_to_start(monkeypatch):
    monkeypatch.setattr(TestingConfig, "REFRESH_SECRET_KEY", TestingConfig.ACCESS_SECRET_KEY)
    with pytest.raises(ValueError):
        create_app("testing")
