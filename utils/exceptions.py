"""
Typed HTTP errors for the auth/session layer.

Each class is a werkzeug HTTPException so the handlers registered in
api.errors turn it into the usual JSON envelope with the right status.
"""
from werkzeug.exceptions import (
    BadRequest,
    Unauthorized,
    Forbidden,
    NotFound,
    InternalServerError,
)


class AuthenticationError(BadRequest):
    """Username or password did not match."""
    error_code = "AUTHENTICATION_ERROR"


class TokenMissing(Unauthorized):
    error_code = "TOKEN_MISSING"
    description = "token is missing"


class TokenInvalid(Forbidden):
    error_code = "TOKEN_INVALID"
    description = "invalid token"


class RefreshSignatureError(Forbidden):
    error_code = "TOKEN_INVALID"
    description = "invalid refresh token"


class TokenNotFound(NotFound):
    error_code = "TOKEN_NOT_FOUND"
    description = "Refresh token is not valid"


class PersistenceError(InternalServerError):
    error_code = "INTERNAL_ERROR"
    description = "An unexpected error occurred"
