"""SQLAlchemy Declarative Base — shared base class for the posts and comments tables.

Invariants:
    - Every model inherits from Base and registers on Base.metadata
    - Constraint names are deterministic (naming convention), identical on SQLite and Postgres
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for Blog API ORM models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
