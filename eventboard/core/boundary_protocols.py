"""Boundary Protocols: contracts between the resolvers and the notification transport.

Invariants:
    - Core NEVER imports from infrastructure; implementations are injected
    - publish() never blocks the caller and never raises for transport failures
    - subscribe() registers on entry: every payload published after entry is
      delivered to that subscriber, nothing published before it is replayed

Design Decisions:
    - Protocol over ABC: the Redis and in-memory buses share no base class
    - subscribe() is an async context manager so unsubscription is tied to
      the lifetime of the connection that opened it
"""

from contextlib import AbstractAsyncContextManager
from typing import Any, AsyncIterator, Protocol

from eventboard.core.domain_types import Topic

Payload = dict[str, Any]


class NotificationBus(Protocol):
    """Fire-and-forget broadcast of creation events to live subscribers."""

    def publish(self, topic: Topic, payload: Payload) -> None: ...

    def subscribe(
        self, topic: Topic,
    ) -> AbstractAsyncContextManager[AsyncIterator[Payload]]: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...
