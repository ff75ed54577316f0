"""Core Layer: records, patches, the in-memory store and the error taxonomy.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No IO and no async in core/
"""
