"""API Schemas — Pydantic request models for the HTTP boundary.

Invariants:
    - Schemas check types only; presence/emptiness rules live in core/validate_post.py
"""
