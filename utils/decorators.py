from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import Optional

from flask import request

from utils.exceptions import TokenInvalid, TokenMissing
from utils.security import IdentityClaims, TokenIssuer, get_token_issuer


class AuthStatus(Enum):
    AUTHORIZED = "authorized"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class AuthOutcome:
    status: AuthStatus
    claims: Optional[IdentityClaims] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.status is AuthStatus.AUTHORIZED


def extract_bearer(header: Optional[str]) -> Optional[str]:
    """Return the second space-delimited segment of the header, if any."""
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def authenticate(header: Optional[str], issuer: TokenIssuer) -> AuthOutcome:
    """
    Check an Authorization header value. Stateless: only the signature and
    expiry of the access token are looked at, never the token store.
    """
    token = extract_bearer(header)
    if token is None:
        return AuthOutcome(AuthStatus.UNAUTHORIZED, reason=TokenMissing.description)
    try:
        claims = issuer.verify_access(token)
    except TokenInvalid as exc:
        return AuthOutcome(AuthStatus.FORBIDDEN, reason=exc.description)
    return AuthOutcome(AuthStatus.AUTHORIZED, claims=claims)


def jwt_required():
    """
    Gate a view on a valid access token. The verified claims are passed to
    the view as the ``identity`` keyword argument.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            outcome = authenticate(request.headers.get("Authorization"), get_token_issuer())
            if not outcome.ok:
                if outcome.status is AuthStatus.UNAUTHORIZED:
                    raise TokenMissing(outcome.reason)
                raise TokenInvalid(outcome.reason)
            return fn(*args, identity=outcome.claims, **kwargs)

        return wrapper

    return decorator
