"""Post Schemas — request body for create and update.

Invariants:
    - title and contents are optional at the schema level: a missing field must
      reach the handler so it answers with the bad-input message
    - Unknown keys are ignored (clients may echo id or timestamps back)

Design Decisions:
    - StrictStr: numbers or booleans for title/contents are rejected as invalid
      request data instead of being coerced
"""

from pydantic import BaseModel, ConfigDict, StrictStr


class PostPayload(BaseModel):
    """Create/update body."""
    model_config = ConfigDict(extra="ignore")

    title: StrictStr | None = None
    contents: StrictStr | None = None
