"""Tests for the refresh-token store"""
from models import storage
from models.refresh_token import RefreshToken
from models.token_store import TokenStore


def test_save_and_find(app):
    store = TokenStore(storage)
    store.save("tok-1", username="jdoe")
    row = store.find_by_token("tok-1")
    assert row is not None
    assert row.username == "jdoe"
    assert store.find_by_token("tok-2") is None
    assert store.find_by_token("") is None


def test_delete_is_idempotent(app):
    store = TokenStore(storage)
    store.save("tok-1")
    assert store.delete_by_token("tok-1") is True
    assert store.delete_by_token("tok-1") is False
    assert store.delete_by_token("never-saved") is False
    assert store.find_by_token("tok-1") is None


def test_delete_only_touches_exact_value(app):
    store = TokenStore(storage)
    store.save("tok-a", username="jdoe")
    store.save("tok-b", username="jdoe")
    store.delete_by_token("tok-a")
    assert store.find_by_token("tok-b") is not None
    assert storage.count(RefreshToken) == 1


def test_trim_keeps_newest(app):
    store = TokenStore(storage)
    for i in range(4):
        store.save(f"tok-{i}", username="jdoe")
    store.save("other", username="someone")
    assert store.trim("jdoe", 2) == 2
    assert store.count_for("jdoe") == 2
    assert store.find_by_token("tok-3") is not None
    assert store.find_by_token("tok-0") is None
    assert store.count_for("someone") == 1


def test_long_token_round_trips(app):
    store = TokenStore(storage)
    token = "x" * 4000
    store.save(token, username="jdoe")
    row = store.find_by_token(token)
    assert row.token == token
    assert row.token_hash == RefreshToken.digest(token)
    assert len(row.token_hash) == 64
    assert store.find_by_token(token[:-1]) is None
    assert store.delete_by_token(token) is True
