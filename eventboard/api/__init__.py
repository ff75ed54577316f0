"""API Layer: the GraphQL gateway, REST health and record-read routes, error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Handlers delegate to services; no data access in the API layer
"""
