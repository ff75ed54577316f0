"""Eventboard: users, events, locations and participants over a typed graph API.

Invariants:
    - Package root contains no executable code (no import side effects)
"""
