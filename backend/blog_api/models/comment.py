"""Comment ORM — text attached to a post.

Invariants:
    - Always belongs to a Post (post_id FK, ON DELETE CASCADE)
    - Read-only from the API's point of view: fetched only through the post id
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.db.base import Base
from blog_api.models.post import KEY_TYPE


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(Base):
    """Comment entity."""
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(
        KEY_TYPE, primary_key=True, autoincrement=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[int] = mapped_column(
        KEY_TYPE, ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    post: Mapped["Post"] = relationship("Post", back_populates="comments")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "post_id": self.post_id,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
