"""In-Memory Notification Bus: single-process fan-out over asyncio queues.

Invariants:
    - Each subscriber owns one asyncio.Queue; publish() copies the payload into all of them
    - A subscriber is registered on entering subscribe() and removed on exit
    - publish() with no subscribers drops the payload
    - close() ends every open receiver
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from eventboard.core.boundary_protocols import Payload
from eventboard.core.domain_types import Topic

logger = logging.getLogger(__name__)

_CLOSED = object()


class InMemoryNotificationBus:
    """NotificationBus for development, tests and single-worker deployments."""

    def __init__(self) -> None:
        self._subscribers: dict[Topic, list[asyncio.Queue]] = {}

    def publish(self, topic: Topic, payload: Payload) -> None:
        queues = self._subscribers.get(topic, [])
        for queue in queues:
            queue.put_nowait(dict(payload))
        logger.debug(
            f"Published to {len(queues)} subscriber(s)",
            extra={"topic": topic.value},
        )

    @asynccontextmanager
    async def subscribe(self, topic: Topic) -> AsyncIterator[AsyncIterator[Payload]]:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.setdefault(topic, []).append(queue)
        try:
            yield self._drain(queue)
        finally:
            self._subscribers[topic].remove(queue)

    def subscriber_count(self, topic: Topic) -> int:
        return len(self._subscribers.get(topic, []))

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        for queues in self._subscribers.values():
            for queue in queues:
                queue.put_nowait(_CLOSED)

    @staticmethod
    async def _drain(queue: asyncio.Queue) -> AsyncIterator[Payload]:
        while True:
            payload = await queue.get()
            if payload is _CLOSED:
                return
            yield payload
