"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostKey is opaque to the core: only the persistence layer interprets it
    - Post and Comment records cross the boundary as plain dicts
    - Every handler operation has exactly one failure message

Design Decisions:
    - str Enums: serialize to JSON and log extras without custom encoders
    - Failure message lives on PostOperation: one source of truth per operation
"""

from collections.abc import Hashable
from enum import Enum
from typing import Any, TypedDict


# ─── Identity & Record Types ─────────────────────────────────────

PostKey = Hashable  # int, str, UUID, ... interpreted only by the repository
PostRecord = dict[str, Any]
CommentRecord = dict[str, Any]


class PostFields(TypedDict):
    """Caller-supplied post fields — always replaced together."""
    title: str
    contents: str


# ─── Enums ───────────────────────────────────────────────────────

class PostOperation(str, Enum):
    """Handler operations — maps to the 500 message for collaborator failures."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    COMMENTS = "comments"

    @property
    def failure_message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    PostOperation.LIST: "The posts information could not be retrieved",
    PostOperation.GET: "The post information could not be retrieved",
    PostOperation.CREATE: "There was an error while saving the post to the database",
    PostOperation.UPDATE: "The post information could not be modified",
    PostOperation.DELETE: "The post could not be removed",
    PostOperation.COMMENTS: "The comments information could not be retrieved",
}


class InsertResultKind(str, Enum):
    """Shapes the insert collaborator may return."""
    ID = "id"
    RECORD = "record"
    PARTIAL = "partial"
