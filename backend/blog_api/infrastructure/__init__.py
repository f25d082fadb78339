"""Infrastructure Layer — database sessions, post repository, logging setup.

Invariants:
    - Implements the boundary protocols declared in core/repository_protocols.py
"""
