"""Post Payload — tests for request-body typing.

Tests cover:
    - Missing fields default to None (handler decides bad-input)
    - Unknown keys are ignored
    - Non-string values are rejected without coercion
"""

import pytest
from pydantic import ValidationError

from blog_api.schemas.post import PostPayload


def test_missing_fields_default_to_none():
    payload = PostPayload.model_validate({})
    assert payload.title is None
    assert payload.contents is None


def test_unknown_keys_are_ignored():
    payload = PostPayload.model_validate(
        {"title": "A", "contents": "B", "id": 3},
    )
    assert payload.title == "A"
    assert not hasattr(payload, "id")


@pytest.mark.parametrize("body", [
    {"title": 1, "contents": "B"},
    {"title": "A", "contents": False},
])
def test_non_string_values_are_rejected(body):
    with pytest.raises(ValidationError):
        PostPayload.model_validate(body)
