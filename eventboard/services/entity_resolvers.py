"""Entity Resolvers: root queries, mutations and relationship lookups over the store.

Invariants:
    - Single-record lookups raise RecordNotFoundError; list lookups never raise
    - Every add inserts into its own kind's collection
    - User, Event and Participant creations are published after the insert,
      before the record is returned; Location creations are not published
    - Non-nullable relationships with a dangling foreign key raise
      RecordNotFoundError for the related kind
"""

import logging
from typing import Any, Mapping

from eventboard.core.boundary_protocols import NotificationBus
from eventboard.core.domain_types import CREATION_TOPICS, EntityKind
from eventboard.core.record_store import RecordStore
from eventboard.core.records import Patch, Record, to_payload

logger = logging.getLogger(__name__)


# ─── Root queries ────────────────────────────────────────────────

def list_records(store: RecordStore, kind: EntityKind) -> list[Record]:
    return store.list_records(kind)


def get_record(store: RecordStore, kind: EntityKind, record_id: str) -> Record:
    return store.get(kind, record_id)


# ─── Mutations ───────────────────────────────────────────────────

def add_record(
    store: RecordStore, bus: NotificationBus,
    kind: EntityKind, data: Mapping[str, Any],
) -> Record:
    record = store.insert(kind, data)
    topic = CREATION_TOPICS.get(kind)
    if topic is not None:
        bus.publish(topic, to_payload(record))
        logger.info(
            f"Queued {topic.value} notification",
            extra={"topic": topic.value, "record_id": record.id},
        )
    return record


def update_record(
    store: RecordStore, kind: EntityKind, record_id: str, patch: Patch,
) -> Record:
    return store.update_partial(kind, record_id, patch)


def delete_record(store: RecordStore, kind: EntityKind, record_id: str) -> Record:
    return store.remove(kind, record_id)


def delete_all_records(store: RecordStore, kind: EntityKind) -> int:
    return store.remove_all(kind)


# ─── Relationships ───────────────────────────────────────────────

def events_of_user(store: RecordStore, user_id: str) -> list[Record]:
    return store.filter_by(EntityKind.EVENT, "user_id", user_id)


def participations_of_user(store: RecordStore, user_id: str) -> list[Record]:
    return store.filter_by(EntityKind.PARTICIPANT, "user_id", user_id)


def participants_of_event(store: RecordStore, event_id: str) -> list[Record]:
    return store.filter_by(EntityKind.PARTICIPANT, "event_id", event_id)


def user_by_key(store: RecordStore, user_id: str) -> Record:
    """Follow a `user_id` foreign key (Event.user, Participant.user)."""
    return store.get(EntityKind.USER, user_id)


def location_by_key(store: RecordStore, location_id: str) -> Record:
    return store.get(EntityKind.LOCATION, location_id)


def event_by_key(store: RecordStore, event_id: str) -> Record:
    return store.get(EntityKind.EVENT, event_id)
