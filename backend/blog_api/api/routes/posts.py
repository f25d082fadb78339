"""Post Routes — HTTP surface for the post resource and its comments.

Invariants:
    - One PostHandler per request, built on the request's DB session
    - Routes only unpack the request and pack the HandlerResponse
    - Post ids are passed through as opaque strings
    - A missing body is the same as a body without title and contents

Design Decisions:
    - Mounted by main.py under settings.api_prefix (default /api/posts)
    - Errors are raised by the handler and rendered by api/error_handlers.py
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.infrastructure.database import get_db
from blog_api.infrastructure.post_repository import SqlPostRepository
from blog_api.schemas.post import PostPayload
from blog_api.services.post_handler import HandlerResponse, PostHandler

logger = logging.getLogger(__name__)
router = APIRouter(tags=["posts"])


def get_post_handler(db: AsyncSession = Depends(get_db)) -> PostHandler:
    """FastAPI dependency — handler bound to this request's session."""
    return PostHandler(SqlPostRepository(db))


def _respond(result: HandlerResponse) -> JSONResponse:
    return JSONResponse(
        status_code=result.status_code, content=jsonable_encoder(result.body),
    )


@router.get("")
async def list_posts(handler: PostHandler = Depends(get_post_handler)):
    return _respond(await handler.list_posts())


@router.get("/{post_id}")
async def get_post(
    post_id: str, handler: PostHandler = Depends(get_post_handler),
):
    return _respond(await handler.get_post(post_id))


@router.post("")
async def create_post(
    payload: PostPayload | None = None,
    handler: PostHandler = Depends(get_post_handler),
):
    """Create a post; responds 201 with the stored record."""
    payload = payload or PostPayload()
    return _respond(await handler.create_post(payload.title, payload.contents))


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    payload: PostPayload | None = None,
    handler: PostHandler = Depends(get_post_handler),
):
    """Replace title and contents; responds with the re-read record."""
    payload = payload or PostPayload()
    return _respond(
        await handler.update_post(post_id, payload.title, payload.contents),
    )


@router.delete("/{post_id}")
async def delete_post(
    post_id: str, handler: PostHandler = Depends(get_post_handler),
):
    """Delete a post; responds with the record as it was before deletion."""
    return _respond(await handler.delete_post(post_id))


@router.get("/{post_id}/comments")
async def get_post_comments(
    post_id: str, handler: PostHandler = Depends(get_post_handler),
):
    return _respond(await handler.get_post_comments(post_id))
