"""Schemas Layer: pydantic models for data crossing a process boundary.

Invariants:
    - No business logic; validation of shape only
"""
