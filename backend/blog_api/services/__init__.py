"""Service Layer — request orchestration between routes and the persistence protocols.

Invariants:
    - Services depend on core protocols, never on SQLAlchemy sessions directly
"""
