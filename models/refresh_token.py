"""
RefreshToken model: one row per issued refresh token. A token is usable
for refresh only while its row exists; logout deletes the row.
Fields:
- token_hash (primary key) - SHA-256 hex digest of the token
- token - the signed refresh token itself
- username - who it was issued to (bookkeeping, not a FK)
- created_at
"""
import hashlib
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from models.base_model import Base


class RefreshToken(Base):
    __tablename__ = "refresh_tokens"

    # tokens embed username and name, so their length is unbounded for an index
    token_hash = Column(String(64), primary_key=True)
    token = Column(Text, nullable=False)
    username = Column(String(128), nullable=True, index=True)
    # set client-side so rows issued within the same second still order correctly
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    @staticmethod
    def digest(token: str) -> str:
        return hashlib.sha256(token.encode("utf-8")).hexdigest()

    def __init__(self, token: str, username=None):
        self.token = token
        self.token_hash = self.digest(token)
        self.username = username

    def __repr__(self):
        return f"<RefreshToken username={self.username}>"
