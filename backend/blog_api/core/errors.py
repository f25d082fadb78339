"""Error Hierarchy — typed, categorized exceptions for every post-handling outcome.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) carry only a human-readable message in their response
    - PostOperationError (500) carries the underlying error's message and traceback
    - to_response() produces the REST body; the HTTP status lives on http_status

Design Decisions:
    - Single hierarchy with BlogApiError base: FastAPI global handler catches all
    - Not-found is a normal outcome, so it is logged at INFO severity, not ERROR
"""

import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from blog_api.core.domain_types import PostOperation


BAD_INPUT_MESSAGE = "Please provide title and contents for the post"
NOT_FOUND_MESSAGE = "The post with the specified ID does not exist"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error taxonomy: bad input, missing entity, collaborator failure."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for log records."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None
    operation: PostOperation | None = None


class BlogApiError(Exception):
    """Base exception for all Blog API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the logging `extra` mapping."""
        return {
            "error_code": self.code,
            "post_id": self.context.post_id,
            "operation": (
                self.context.operation.value if self.context.operation else None
            ),
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidPostError(BlogApiError):
    """Title or contents missing or empty."""
    def __init__(
        self, message: str = BAD_INPUT_MESSAGE, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "BAD_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class PostNotFoundError(BlogApiError):
    """Referenced post does not exist."""
    def __init__(self, post_id: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = str(post_id)
        super().__init__(
            NOT_FOUND_MESSAGE, "POST_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.post_id = post_id


# ─── Collaborator Errors (500-level) ────────────────────────────

class PostOperationError(BlogApiError):
    """The persistence collaborator failed during an operation."""
    def __init__(
        self,
        operation: PostOperation,
        cause: BaseException,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            operation.failure_message, "PERSISTENCE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation
        self.cause = cause

    @property
    def error(self) -> str:
        """Message text of the underlying error."""
        return str(self.cause)

    @property
    def stack(self) -> str:
        return "".join(
            traceback.format_exception(
                type(self.cause), self.cause, self.cause.__traceback__,
            ),
        )

    def to_response(self) -> dict:
        return {
            "message": self.message,
            "error": self.error,
            "stack": self.stack,
        }
