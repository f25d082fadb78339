"""Post Input Validation — title and contents presence check.

Invariants:
    - validate_post_fields is PURE and runs before any collaborator call
    - Falsy values (None, "", missing) are rejected; the values are not trimmed
"""

from blog_api.core.domain_types import PostFields
from blog_api.core.errors import InvalidPostError


def validate_post_fields(title: str | None, contents: str | None) -> PostFields:
    """Return the fields to persist, or raise InvalidPostError."""
    if not title or not contents:
        raise InvalidPostError()
    return PostFields(title=title, contents=contents)
