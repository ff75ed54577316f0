"""Services Layer: resolver logic tying the record store to the notification bus.

Invariants:
    - Services receive the store and bus as arguments; no module-level state
    - GraphQL types delegate here and hold no data-access logic
"""
