"""
security helpers:
- Argon2 password hashing via argon2-cffi
- Access/refresh JWT issuance and verification via PyJWT
- JTI generation for token identifiers
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from flask import current_app

from utils.exceptions import TokenInvalid, RefreshSignatureError

ACCESS = "access"
REFRESH = "refresh"

ph = PasswordHasher()

_dummy_hash: Optional[str] = None


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """ Verify a plaintext password using argon2
    """
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def burn_verification(password: str) -> None:
    """Run one verification against a throwaway hash.

    Used when the username is unknown so that path costs the same as a
    wrong password.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = ph.hash(uuid.uuid4().hex)
    verify_password(password, _dummy_hash)


def generate_jti() -> str:
    """Generate a unique JTI (JWT ID).
    """
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class IdentityClaims:
    """The only user fields that go into a token."""
    username: str
    name: Optional[str] = None

    @classmethod
    def from_user(cls, user) -> "IdentityClaims":
        return cls(username=user.username, name=user.name)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IdentityClaims":
        return cls(username=payload["sub"], name=payload.get("name"))


class TokenIssuer:
    """
    Mints and verifies the two token classes.

    Access tokens carry an exp claim and are signed with the access secret.
    Refresh tokens have no exp and are signed with a separate secret, so a
    leaked access secret cannot forge refresh tokens and vice versa.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        access_expires: timedelta = timedelta(minutes=15),
        clock: Callable[[], datetime] | None = None,
    ):
        if not access_secret or not refresh_secret:
            raise ValueError("access and refresh secrets must both be set")
        if access_secret == refresh_secret:
            raise ValueError("access and refresh secrets must differ")
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self.algorithm = algorithm
        self.access_expires = access_expires
        self._clock = clock or _utcnow

    @classmethod
    def from_config(cls, config) -> "TokenIssuer":
        return cls(
            access_secret=config["ACCESS_SECRET_KEY"],
            refresh_secret=config["REFRESH_SECRET_KEY"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            access_expires=config.get("ACCESS_TOKEN_EXPIRES", timedelta(minutes=15)),
        )

    def _payload(self, claims: IdentityClaims, token_type: str) -> Dict[str, Any]:
        return {
            "sub": claims.username,
            "name": claims.name,
            "type": token_type,
            "iat": int(self._clock().timestamp()),
            "jti": generate_jti(),
        }

    def issue_access(self, claims: IdentityClaims) -> str:
        payload = self._payload(claims, ACCESS)
        payload["exp"] = int((self._clock() + self.access_expires).timestamp())
        return jwt.encode(payload, self._access_secret, algorithm=self.algorithm)

    def issue_refresh(self, claims: IdentityClaims) -> str:
        # no exp: refresh tokens live until their row is deleted
        payload = self._payload(claims, REFRESH)
        return jwt.encode(payload, self._refresh_secret, algorithm=self.algorithm)

    def verify_access(self, token: str) -> IdentityClaims:
        """
        Decode and validate an access token. Raises TokenInvalid on a bad
        signature, an expired token or a refresh token presented as access.
        """
        try:
            decoded = jwt.decode(
                token,
                self._access_secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise TokenInvalid("Token expired")
        except jwt.InvalidTokenError:
            raise TokenInvalid()

        if decoded.get("type") != ACCESS:
            raise TokenInvalid("Wrong token type")
        return IdentityClaims.from_payload(decoded)

    def verify_refresh(self, token: str) -> IdentityClaims:
        """Signature and type check only; refresh tokens never expire."""
        try:
            decoded = jwt.decode(
                token,
                self._refresh_secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False, "require": ["sub"]},
            )
        except jwt.InvalidTokenError:
            raise RefreshSignatureError()

        if decoded.get("type") != REFRESH:
            raise RefreshSignatureError()
        return IdentityClaims.from_payload(decoded)


def get_token_issuer() -> TokenIssuer:
    return current_app.extensions["token_issuer"]
