"""Domain Types: entity kinds, record identifiers and notification topics.

Invariants:
    - Every entity kind is an EntityKind member; no raw string matching on kinds
    - Exactly three topics exist, one per creation that has subscribers
    - Location creation has no topic

Design Decisions:
    - str Enums serialize to JSON and GraphQL without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", str)

RECORD_ID_LENGTH = 21


# ─── Enums ───────────────────────────────────────────────────────

class EntityKind(str, Enum):
    """The four collections held by the record store."""
    USER = "User"
    EVENT = "Event"
    LOCATION = "Location"
    PARTICIPANT = "Participant"


class Topic(str, Enum):
    """Notification bus topics. Values are the subscription field names."""
    USER_CREATED = "userCreated"
    EVENT_CREATED = "eventCreated"
    PARTICIPANT_ADDED = "participantAdded"


CREATION_TOPICS: dict[EntityKind, Topic] = {
    EntityKind.USER: Topic.USER_CREATED,
    EntityKind.EVENT: Topic.EVENT_CREATED,
    EntityKind.PARTICIPANT: Topic.PARTICIPANT_ADDED,
}

TOPIC_KINDS: dict[Topic, EntityKind] = {
    topic: kind for kind, topic in CREATION_TOPICS.items()
}
