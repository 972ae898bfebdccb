from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, JSON, Index
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


def _now():
    return datetime.now(timezone.utc)


class Post(BaseModel, Base):
    __tablename__ = "posts"

    title = Column(String(255), nullable=False, unique=True)
    sub_heading = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    picture = Column(String(1024), nullable=True)
    username = Column(String(128), nullable=False, index=True)
    categories = Column(JSON, nullable=False, default=list)
    created_date = Column(DateTime(timezone=True), nullable=False, default=_now)

    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_posts_created_date", "created_date"),
    )
