"""Post Resource Handler — list, get, create, update, delete, and comments-for-post.

Invariants:
    - Input validation runs before any collaborator call
    - Existence check (find_by_id) runs before any mutating or relation call
    - Not-found raised inside a stage is never rewrapped as a collaborator failure
    - Every collaborator exception becomes exactly one PostOperationError for the
      current operation — never retried, never masked
    - Update responds with a fresh re-read; delete responds with the pre-delete snapshot
    - Holds no state between requests: one repository per handler, one handler per request

Design Decisions:
    - Stages raise typed errors (core/errors.py) to short-circuit: the global
      FastAPI handler turns them into responses, routes stay thin
    - _collaborator_failure wraps a whole operation so each failure mode maps to
      one taxonomy entry without nested branching
    - A record that vanishes between a successful update and its re-read is
      reported as not-found, same as a zero-row update
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncGenerator

from fastapi import status

from blog_api.core.domain_types import (
    CommentRecord, PostKey, PostOperation, PostRecord,
)
from blog_api.core.errors import (
    BlogApiError, ErrorContext, PostNotFoundError, PostOperationError,
)
from blog_api.core.insert_result import classify_insert_result
from blog_api.core.repository_protocols import PostRepository
from blog_api.core.validate_post import validate_post_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerResponse:
    """Successful outcome: HTTP status plus JSON-ready body."""
    status_code: int
    body: Any


@asynccontextmanager
async def _collaborator_failure(
    operation: PostOperation, post_id: PostKey | None = None,
) -> AsyncGenerator[None, None]:
    """Wrap collaborator exceptions as PostOperationError for this operation."""
    try:
        yield
    except BlogApiError:
        raise
    except Exception as e:
        logger.error(
            f"Post {operation.value} failed: {e}",
            exc_info=True,
            extra={
                "operation": operation.value,
                "post_id": None if post_id is None else str(post_id),
            },
        )
        raise PostOperationError(
            operation, e,
            ErrorContext(post_id=None if post_id is None else str(post_id)),
        ) from e


class PostHandler:
    """Request orchestration for the post resource."""

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def list_posts(self) -> HandlerResponse:
        async with _collaborator_failure(PostOperation.LIST):
            posts = await self.repository.find_all()
        return HandlerResponse(status.HTTP_200_OK, list(posts))

    async def get_post(self, post_id: PostKey) -> HandlerResponse:
        async with _collaborator_failure(PostOperation.GET, post_id):
            post = await self._require_post(post_id)
        return HandlerResponse(status.HTTP_200_OK, post)

    async def create_post(
        self, title: str | None, contents: str | None,
    ) -> HandlerResponse:
        """Validate, insert, then normalize the insert result to the stored record."""
        fields = validate_post_fields(title, contents)
        async with _collaborator_failure(PostOperation.CREATE):
            raw = await self.repository.insert(fields)
            inserted = classify_insert_result(raw)
            if inserted.needs_lookup:
                post = await self.repository.find_by_id(inserted.post_id)
                if not post:
                    raise LookupError(
                        f"Inserted post {inserted.post_id} could not be read back",
                    )
            else:
                post = inserted.record
        logger.info(
            f"Post {inserted.post_id} created ({inserted.kind.value})",
            extra={"post_id": str(inserted.post_id), "operation": "create"},
        )
        return HandlerResponse(status.HTTP_201_CREATED, post)

    async def update_post(
        self, post_id: PostKey, title: str | None, contents: str | None,
    ) -> HandlerResponse:
        """Validate, check existence, update, then respond with the re-read record."""
        fields = validate_post_fields(title, contents)
        async with _collaborator_failure(PostOperation.UPDATE, post_id):
            await self._require_post(post_id)
            affected = await self.repository.update(post_id, fields)
            if not affected:
                logger.info(
                    f"Post {post_id} vanished before update",
                    extra={"post_id": str(post_id), "operation": "update"},
                )
                raise PostNotFoundError(post_id)
            post = await self._require_post(post_id)
        return HandlerResponse(status.HTTP_200_OK, post)

    async def delete_post(self, post_id: PostKey) -> HandlerResponse:
        """Check existence, remove, respond with the pre-delete snapshot."""
        async with _collaborator_failure(PostOperation.DELETE, post_id):
            snapshot = await self._require_post(post_id)
            await self.repository.remove(post_id)
        logger.info(
            f"Post {post_id} deleted",
            extra={"post_id": str(post_id), "operation": "delete"},
        )
        return HandlerResponse(status.HTTP_200_OK, snapshot)

    async def get_post_comments(self, post_id: PostKey) -> HandlerResponse:
        async with _collaborator_failure(PostOperation.COMMENTS, post_id):
            await self._require_post(post_id)
            comments: list[CommentRecord] = list(
                await self.repository.find_comments_by_post_id(post_id),
            )
        return HandlerResponse(status.HTTP_200_OK, comments)

    async def _require_post(self, post_id: PostKey) -> PostRecord:
        """Existence check — raises PostNotFoundError when the lookup is empty."""
        post = await self.repository.find_by_id(post_id)
        if not post:
            raise PostNotFoundError(post_id)
        return post
