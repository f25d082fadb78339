"""SQL Post Repository — PostRepository implemented over an async SQLAlchemy session.

Invariants:
    - Keys are opaque at the boundary; only plain decimal keys in signed 64-bit range match
    - insert returns the new id (the handler re-reads the full record)
    - update returns the affected row count (0 when the post is gone)
    - remove deletes the post's comments with it, in one transaction
    - Every mutation commits before returning

Design Decisions:
    - Records leave the repository as dicts (Post.to_dict): the core never sees ORM objects
    - Core UPDATE/DELETE statements over ORM flushes: rowcount is the race signal
"""

import logging
import re

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.domain_types import (
    CommentRecord, PostFields, PostKey, PostRecord,
)
from blog_api.models.comment import Comment
from blog_api.models.post import Post

logger = logging.getLogger(__name__)


_INT_KEY = re.compile(r"-?[0-9]+")
# Signed 64-bit: the widest INTEGER both SQLite and Postgres BIGINT store
_MIN_KEY = -(2 ** 63)
_MAX_KEY = 2 ** 63 - 1


def parse_post_key(post_id: PostKey) -> int | None:
    """Integer primary key for an opaque key, or None when it cannot match."""
    if isinstance(post_id, bool):
        return None
    if isinstance(post_id, int):
        key = post_id
    elif isinstance(post_id, str) and _INT_KEY.fullmatch(post_id):
        key = int(post_id)
    else:
        return None
    return key if _MIN_KEY <= key <= _MAX_KEY else None


class SqlPostRepository:
    """Posts and comments tables behind the PostRepository contract."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[PostRecord]:
        result = await self.db.execute(select(Post).order_by(Post.id))
        return [p.to_dict() for p in result.scalars().all()]

    async def find_by_id(self, post_id: PostKey) -> PostRecord | None:
        key = parse_post_key(post_id)
        if key is None:
            return None
        post = await self.db.get(Post, key, populate_existing=True)
        return post.to_dict() if post else None

    async def insert(self, fields: PostFields) -> int:
        post = Post(title=fields["title"], contents=fields["contents"])
        self.db.add(post)
        await self.db.commit()
        logger.debug(f"Inserted post {post.id}", extra={"post_id": str(post.id)})
        return post.id

    async def update(self, post_id: PostKey, fields: PostFields) -> int:
        key = parse_post_key(post_id)
        if key is None:
            return 0
        result = await self.db.execute(
            update(Post)
            .where(Post.id == key)
            .values(title=fields["title"], contents=fields["contents"])
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount

    async def remove(self, post_id: PostKey) -> int:
        key = parse_post_key(post_id)
        if key is None:
            return 0
        await self.db.execute(delete(Comment).where(Comment.post_id == key))
        result = await self.db.execute(
            delete(Post)
            .where(Post.id == key)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        return result.rowcount

    async def find_comments_by_post_id(
        self, post_id: PostKey,
    ) -> list[CommentRecord]:
        key = parse_post_key(post_id)
        if key is None:
            return []
        result = await self.db.execute(
            select(Comment).where(Comment.post_id == key).order_by(Comment.id),
        )
        return [c.to_dict() for c in result.scalars().all()]
