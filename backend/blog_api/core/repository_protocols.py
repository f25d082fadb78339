"""Boundary Protocols — contract between the post handler and the persistence layer.

Invariants:
    - Core NEVER imports from the shell — dependency arrows point inward only
    - All persistence IO is accessed through PostRepository
    - Any method may raise; the handler wraps the exception per operation

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - insert is deliberately loose (-> object): implementations may return an id,
      a full record or a partial record; see core/insert_result.py
"""

from typing import Protocol

from blog_api.core.domain_types import (
    CommentRecord, PostFields, PostKey, PostRecord,
)


class PostRepository(Protocol):
    """Contract for post persistence — implemented by the shell."""
    async def find_all(self) -> list[PostRecord]: ...
    async def find_by_id(self, post_id: PostKey) -> PostRecord | None: ...
    async def insert(self, fields: PostFields) -> object: ...
    async def update(self, post_id: PostKey, fields: PostFields) -> object: ...
    async def remove(self, post_id: PostKey) -> object: ...
    async def find_comments_by_post_id(
        self, post_id: PostKey,
    ) -> list[CommentRecord]: ...
