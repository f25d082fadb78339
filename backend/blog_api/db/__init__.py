"""Database Metadata — SQLAlchemy declarative base.

Invariants:
    - Every ORM model registers on db.base.Base.metadata
"""
