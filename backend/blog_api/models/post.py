"""Post ORM — persists the post aggregate root.

Invariants:
    - id is an autoincrement 64-bit integer primary key, assigned on insert
    - title and contents are non-nullable text
    - updated_at refreshed on every ORM or Core UPDATE

Design Decisions:
    - cascade delete for comments: the database owns comment cleanup, not the handler
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.base import Base


# BIGINT on server databases; SQLite needs INTEGER for the autoincrementing rowid alias
KEY_TYPE = BigInteger().with_variant(Integer, "sqlite")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Post(Base):
    """Post entity — title and contents are always replaced together."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(
        KEY_TYPE, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    contents: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post",
        cascade="all, delete-orphan", passive_deletes=True,
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "contents": self.contents,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
