"""Tests for bearer extraction and the auth outcome"""
import pytest

from utils.decorators import AuthStatus, authenticate, extract_bearer
from utils.security import IdentityClaims, TokenIssuer

ISSUER = TokenIssuer("mw-access-secret-0123456789abcdef", "mw-refresh-secret-0123456789abcdef")
CLAIMS = IdentityClaims(username="jdoe", name="J Doe")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer ", "BearerTokenWithoutSpace"])
def test_missing_token(header):
    assert extract_bearer(header) is None
    outcome = authenticate(header, ISSUER)
    assert outcome.status is AuthStatus.UNAUTHORIZED
    assert not outcome.ok


def test_second_segment_is_the_token():
    assert extract_bearer("Bearer abc.def") == "abc.def"
    assert extract_bearer("Token abc") == "abc"


def test_bad_token_is_forbidden():
    outcome = authenticate("Bearer not-a-jwt", ISSUER)
    assert outcome.status is AuthStatus.FORBIDDEN
    assert outcome.claims is None


def test_refresh_token_is_not_an_access_token():
    outcome = authenticate(f"Bearer {ISSUER.issue_refresh(CLAIMS)}", ISSUER)
    assert outcome.status is AuthStatus.FORBIDDEN


def test_valid_token_is_authorized():
    outcome = authenticate(f"Bearer {ISSUER.issue_access(CLAIMS)}", ISSUER)
    assert outcome.ok
    assert outcome.claims == CLAIMS
