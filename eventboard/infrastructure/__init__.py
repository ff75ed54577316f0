"""Infrastructure Layer: notification transports, fixture loading and logging.

Invariants:
    - Transport failures are retried or logged here; callers only see domain errors
    - Everything a resolver needs is reached through a core/ protocol
"""
