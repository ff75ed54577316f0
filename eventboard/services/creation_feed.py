"""Creation Feed: turns notification bus payloads back into records for subscribers.

Invariants:
    - One feed per subscribing connection; leaving the generator unsubscribes
    - Only payloads published after the feed starts are delivered
    - Payloads that do not rebuild into a record are logged and skipped
"""

import logging
from typing import AsyncIterator

from eventboard.core.boundary_protocols import NotificationBus
from eventboard.core.domain_types import TOPIC_KINDS, Topic
from eventboard.core.records import Record, record_from_payload

logger = logging.getLogger(__name__)


async def watch(bus: NotificationBus, topic: Topic) -> AsyncIterator[Record]:
    """Yield each record created on `topic` until the caller stops iterating."""
    kind = TOPIC_KINDS[topic]
    async with bus.subscribe(topic) as payloads:
        async for payload in payloads:
            try:
                record = record_from_payload(kind, payload)
            except (KeyError, TypeError) as e:
                logger.error(
                    f"Malformed {topic.value} payload: {e!r}",
                    extra={"topic": topic.value},
                )
                continue
            yield record
