"""
Authentication blueprint:
- POST /auth/signup
- POST /auth/login
- POST /auth/logout

The implementation:
- Uses argon2 for password hashing (via utils.security)
- Issues a 15 minute access token and a non-expiring refresh token, each
  signed with its own secret
- Stores refresh tokens in the DB (RefreshToken rows) so logout can revoke them
"""
from __future__ import annotations

import logging

from argon2.exceptions import HashingError
from flask import Blueprint, request, jsonify, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from models import storage
from models.user import User
from models.token_store import TokenStore
from models.schemas.user import SignupSchema, LoginSchema

from utils.exceptions import AuthenticationError, PersistenceError
from utils.security import (
    IdentityClaims,
    burn_verification,
    get_token_issuer,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__, url_prefix="/auth")

signup_schema = SignupSchema()
login_schema = LoginSchema()


@bp.post("/signup")
def signup():
    """
    Register a new user. No tokens are issued; log in afterwards.
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [username, name, password]
          properties:
            username: { type: string, example: johndoe }
            name: { type: string, example: John Doe }
            password: { type: string }
    responses:
      200:
        description: Signup successful
      409:
        description: Username already taken
      422:
        description: Validation error
      500:
        description: Error while signing up user
    """
    payload = request.get_json(silent=True) or {}
    data = signup_schema.load(payload)

    session = storage.get_session()
    if session.query(User).filter(User.username == data["username"]).first():
        abort(409, description="Username already taken")

    try:
        pw_hash = hash_password(data["password"])
        user = User(username=data["username"], name=data["name"], password_hash=pw_hash)
        storage.new(user)
        storage.save()
    except (HashingError, SQLAlchemyError):
        logger.exception("signup failed for %s", data["username"])
        raise PersistenceError("Error while signing up user")

    logger.info("user %s signed up", user.username)
    return jsonify({"msg": "Signup successful"}), 200


@bp.post("/login")
def login():
    """
    Login: return accessToken and refreshToken
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           required: [username, password]
           properties:
             username: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns accessToken, refreshToken, name, username)
      400:
        description: Username or password does not match
      500:
        description: Error while logging in user
    """
    payload = request.get_json(silent=True) or {}
    data = login_schema.load(payload)

    session = storage.get_session()
    user: User | None = session.query(User).filter(User.username == data["username"]).first()
    if not user:
        burn_verification(data["password"])
        logger.info("login rejected: unknown username")
        raise AuthenticationError("Username does not match")

    if not verify_password(data["password"], user.password_hash):
        logger.info("login rejected for %s: bad password", user.username)
        raise AuthenticationError("Password does not match")

    issuer = get_token_issuer()
    claims = IdentityClaims.from_user(user)
    access_token = issuer.issue_access(claims)
    refresh_token = issuer.issue_refresh(claims)

    store = TokenStore(storage)
    try:
        store.save(refresh_token, username=user.username)
        cap = current_app.config.get("MAX_REFRESH_TOKENS_PER_USER")
        if cap and store.count_for(user.username) > cap:
            store.trim(user.username, cap)
    except SQLAlchemyError:
        logger.exception("could not persist refresh token for %s", user.username)
        raise PersistenceError("error while login the user")

    logger.info("user %s logged in", user.username)
    return jsonify(
        {
            "accessToken": access_token,
            "refreshToken": refresh_token,
            "name": user.name,
            "username": user.username,
        }
    ), 200


@bp.post("/logout")
def logout():
    """
    logout: deletes the stored refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             token: { type: string }
    responses:
      204:
        description: Logged out (also when the token was unknown)
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    token = payload.get("token")

    if isinstance(token, str) and token:
        if TokenStore(storage).delete_by_token(token):
            logger.info("refresh token revoked")
        else:
            logger.debug("logout for unknown refresh token")

    return ("", 204)
