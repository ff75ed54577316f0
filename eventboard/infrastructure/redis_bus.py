"""Redis Notification Bus: pub/sub over two reconnecting Redis links.

Invariants:
    - One client publishes, one client subscribes; both share the same options
    - Both links reconnect forever with delay min(failures * step, cap) ms
    - publish() schedules the send and returns; failures are logged, never raised
    - At most max_pending sends wait on a down link; further publishes are dropped
      and logged until the backlog drains
    - Payloads travel as JSON strings

Design Decisions:
    - Backoff implemented as a redis-py AbstractBackoff so the client's own
      Retry loop applies it to every command, including pub/sub reads
    - Each subscription gets its own PubSub (own connection from the pool);
      closing it drops the server-side subscription
"""

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from functools import partial
from typing import AsyncIterator

import redis.asyncio as redis
from redis.asyncio.retry import Retry
from redis.backoff import AbstractBackoff
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    RedisError,
    TimeoutError as RedisTimeoutError,
)

from eventboard.core.boundary_protocols import Payload
from eventboard.core.domain_types import Topic
from eventboard.core.errors import NotificationBusError

logger = logging.getLogger(__name__)

READINESS_TIMEOUT_SECONDS = 1.0
DEFAULT_MAX_PENDING = 10_000


class CappedLinearBackoff(AbstractBackoff):
    """Reconnect delay of `failures * step_ms`, never above `cap_ms`."""

    def __init__(self, step_ms: int = 50, cap_ms: int = 2000):
        self.step_ms = step_ms
        self.cap_ms = cap_ms

    def delay_ms(self, failures: int) -> int:
        return min(failures * self.step_ms, self.cap_ms)

    def compute(self, failures: int) -> float:
        delay = self.delay_ms(failures)
        logger.warning(
            f"Redis link down, reconnecting in {delay}ms",
            extra={"attempt": failures},
        )
        return delay / 1000


def build_redis_client(
    host: str | None,
    port: int | None,
    password: str | None,
    backoff: AbstractBackoff,
) -> redis.Redis:
    """Redis client that retries connection errors forever using `backoff`."""
    return redis.Redis(
        host=host,
        port=port,
        password=password,
        decode_responses=True,
        retry=Retry(backoff, retries=-1),
        retry_on_error=[RedisConnectionError, RedisTimeoutError],
    )


class RedisNotificationBus:
    """NotificationBus backed by Redis PUBLISH/SUBSCRIBE."""

    def __init__(
        self,
        publisher: redis.Redis,
        subscriber: redis.Redis,
        max_pending: int = DEFAULT_MAX_PENDING,
    ):
        self._publisher = publisher
        self._subscriber = subscriber
        self._max_pending = max_pending
        self._pending: set[asyncio.Task] = set()

    @classmethod
    def connect(
        cls,
        host: str | None,
        port: int | None,
        password: str | None,
        step_ms: int = 50,
        cap_ms: int = 2000,
        max_pending: int = DEFAULT_MAX_PENDING,
    ) -> "RedisNotificationBus":
        backoff = CappedLinearBackoff(step_ms, cap_ms)
        return cls(
            publisher=build_redis_client(host, port, password, backoff),
            subscriber=build_redis_client(host, port, password, backoff),
            max_pending=max_pending,
        )

    def publish(self, topic: Topic, payload: Payload) -> None:
        if len(self._pending) >= self._max_pending:
            logger.error(
                f"Dropped notification: {len(self._pending)} publishes already waiting on Redis",
                extra={
                    "topic": topic.value,
                    "error_code": "NOTIFICATION_BUS_ERROR",
                    "count": len(self._pending),
                },
            )
            return
        message = json.dumps(payload, ensure_ascii=False)
        task = asyncio.get_running_loop().create_task(
            self._send(topic, message),
        )
        self._pending.add(task)
        task.add_done_callback(partial(self._on_sent, topic))

    async def _send(self, topic: Topic, message: str) -> int:
        try:
            receivers = await self._publisher.publish(topic.value, message)
        except RedisError as e:
            raise NotificationBusError(topic.value, str(e)) from e
        logger.debug(
            f"Published to {receivers} subscriber(s)",
            extra={"topic": topic.value},
        )
        return receivers

    def _on_sent(self, topic: Topic, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                f"Dropped notification: {exc}",
                extra={
                    "topic": topic.value,
                    "error_code": getattr(exc, "code", None),
                },
            )

    @asynccontextmanager
    async def subscribe(self, topic: Topic) -> AsyncIterator[AsyncIterator[Payload]]:
        pubsub = self._subscriber.pubsub(ignore_subscribe_messages=True)
        await pubsub.subscribe(topic.value)
        logger.info("Subscriber attached", extra={"topic": topic.value})
        try:
            yield self._messages(pubsub)
        finally:
            await pubsub.aclose()
            logger.info("Subscriber detached", extra={"topic": topic.value})

    @staticmethod
    async def _messages(pubsub) -> AsyncIterator[Payload]:
        async for message in pubsub.listen():
            if message["type"] != "message":
                continue
            yield json.loads(message["data"])

    async def ping(self) -> bool:
        """Readiness check; a link stuck in backoff counts as down."""
        try:
            return bool(await asyncio.wait_for(
                self._publisher.ping(), READINESS_TIMEOUT_SECONDS,
            ))
        except (RedisError, OSError, asyncio.TimeoutError) as e:
            logger.warning(f"Redis ping failed: {e!r}")
            return False

    async def flush(self) -> None:
        """Wait for every scheduled publish to finish (failures are already logged)."""
        await asyncio.gather(*self._pending, return_exceptions=True)

    async def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        await self._publisher.aclose()
        await self._subscriber.aclose()
