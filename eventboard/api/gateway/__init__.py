"""GraphQL Gateway: strawberry schema, request context and error translation.

Invariants:
    - Types hold field values only; data access goes through services/entity_resolvers
    - Served at /graphql over HTTP and websockets (subscriptions)
"""
