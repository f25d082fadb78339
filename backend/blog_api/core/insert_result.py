"""Insert Result Classification — tags the polymorphic return of PostRepository.insert.

Invariants:
    - classify_insert_result is PURE: no IO, no await
    - Every accepted shape yields a post_id; RECORD additionally carries the full record
    - Unrecognized shapes raise ValueError (the handler reports a creation failure)

Design Decisions:
    - One classification step right after insert, instead of type checks spread
      through the handler: the shell only asks `needs_lookup`
    - A mapping is a full RECORD only when it holds id, title and contents;
      anything less is PARTIAL and gets re-read
    - Single-element sequences are unwrapped: query builders commonly
      return `[new_id]` from an insert
"""

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass

from blog_api.core.domain_types import InsertResultKind, PostKey, PostRecord


RECORD_FIELDS = ("id", "title", "contents")


@dataclass(frozen=True)
class InsertResult:
    """Tagged insert outcome."""
    kind: InsertResultKind
    post_id: PostKey
    record: PostRecord | None = None

    @property
    def needs_lookup(self) -> bool:
        return self.kind is not InsertResultKind.RECORD


def classify_insert_result(raw: object) -> InsertResult:
    """Tag an insert return value as id, full record, or partial record."""
    if _is_key(raw):
        return InsertResult(InsertResultKind.ID, raw)

    if (
        isinstance(raw, Sequence)
        and not isinstance(raw, (str, bytes))
        and len(raw) == 1
        and _is_key(raw[0])
    ):
        return InsertResult(InsertResultKind.ID, raw[0])

    if isinstance(raw, Mapping) and _is_key(raw.get("id")):
        if all(raw.get(name) for name in RECORD_FIELDS):
            return InsertResult(InsertResultKind.RECORD, raw["id"], dict(raw))
        return InsertResult(InsertResultKind.PARTIAL, raw["id"])

    raise ValueError(
        f"Insert returned an unrecognized result: {type(raw).__name__}",
    )


def _is_key(value: object) -> bool:
    """Any scalar identifier: int, str, UUID, ... but not None, bool or empty."""
    # bool is an int subclass but never a key
    if value is None or isinstance(value, (bool, float)):
        return False
    if isinstance(value, (Mapping, Set, bytes, bytearray)):
        return False
    if isinstance(value, Sequence) and not isinstance(value, str):
        return False
    return value != ""
