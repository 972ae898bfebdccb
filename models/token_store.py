"""
TokenStore: the refresh-token table as the revocation mechanism.

A refresh token is accepted only while a row with exactly its value exists.
Access tokens never come through here.
"""
from __future__ import annotations

from typing import Optional

from models.refresh_token import RefreshToken


class TokenStore:
    def __init__(self, storage):
        self.storage = storage

    def save(self, token: str, username: Optional[str] = None) -> RefreshToken:
        row = RefreshToken(token=token, username=username)
        self.storage.new(row)
        self.storage.save()
        return row

    def find_by_token(self, token: str) -> Optional[RefreshToken]:
        if not token:
            return None
        row = self.storage.get(RefreshToken, RefreshToken.digest(token))
        if row is None or row.token != token:
            return None
        return row

    def delete_by_token(self, token: str) -> bool:
        """Delete the row if present. Missing rows are not an error."""
        session = self.storage.get_session()
        deleted = (
            session.query(RefreshToken)
            .filter(RefreshToken.token_hash == RefreshToken.digest(token))
            .delete(synchronize_session=False)
        )
        self.storage.save()
        return bool(deleted)

    def count_for(self, username: str) -> int:
        session = self.storage.get_session()
        return session.query(RefreshToken).filter(RefreshToken.username == username).count()

    def trim(self, username: str, keep: int) -> int:
        """Keep only the ``keep`` newest rows for a user; returns rows removed."""
        session = self.storage.get_session()
        rows = (
            session.query(RefreshToken)
            .filter(RefreshToken.username == username)
            .order_by(RefreshToken.created_at.desc())
            .offset(keep)
            .all()
        )
        for row in rows:
            self.storage.delete(row)
        if rows:
            self.storage.save()
        return len(rows)
