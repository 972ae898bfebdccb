"""
POST /token: trade a stored refresh token for a new access token.

The refresh token is not rotated; the same row stays valid until logout.
"""
from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify

from models import storage
from models.token_store import TokenStore
from utils.decorators import extract_bearer
from utils.exceptions import TokenMissing, TokenNotFound
from utils.security import get_token_issuer

logger = logging.getLogger(__name__)

bp = Blueprint("token", __name__)


@bp.post("/token")
def create_new_token():
    """
    Create a new access token using the refresh token
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
           required: [token]
           properties:
             token:
               type: string
               description: "\"Bearer <refreshToken>\""
    responses:
      200:
        description: New access token
      401:
        description: Refresh token is missing
      403:
        description: Refresh token signature is invalid
      404:
        description: Refresh token is not valid (not in store)
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    raw = payload.get("token")
    refresh_token = extract_bearer(raw) if isinstance(raw, str) else None
    if not refresh_token:
        raise TokenMissing("Refresh token is missing")

    row = TokenStore(storage).find_by_token(refresh_token)
    if row is None:
        logger.info("refresh attempted with a token that is not stored")
        raise TokenNotFound()

    issuer = get_token_issuer()
    # the stored value is what gets verified; RefreshSignatureError -> 403
    claims = issuer.verify_refresh(row.token)
    access_token = issuer.issue_access(claims)

    return jsonify({"accessToken": access_token}), 200
