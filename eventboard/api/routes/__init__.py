"""Route Modules: one file per REST resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
"""
