"""ORM Models — SQLAlchemy declarative models for posts and their comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the aggregate root; comments are scoped by post_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blog_api.models.post import Post  # noqa: F401
from blog_api.models.comment import Comment  # noqa: F401
