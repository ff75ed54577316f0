"""Records and Patches: one dataclass per entity kind plus its partial-update shape.

Invariants:
    - Every record has a string `id` assigned by the store, never by callers
    - Patch fields are all optional; None means "leave the stored value alone"
    - Merging a patch never changes the record id
    - Payload dicts use the wire field names (`from`, not `from_`)

Design Decisions:
    - Explicit merge function per kind instead of a generic dict spread
    - Event.from_ carries a trailing underscore because `from` is a keyword;
      to_payload()/record_from_payload() translate at the edges
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Mapping, Union

from eventboard.core.domain_types import EntityKind, RecordId


# ─── Records ─────────────────────────────────────────────────────

@dataclass
class User:
    id: RecordId
    username: str
    email: str


@dataclass
class Event:
    id: RecordId
    title: str
    desc: str
    date: str
    from_: str
    to: str
    location_id: str
    user_id: str


@dataclass
class Location:
    id: RecordId
    name: str
    desc: str
    lat: str
    lng: str


@dataclass
class Participant:
    id: RecordId
    user_id: str
    event_id: str


Record = Union[User, Event, Location, Participant]

RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.USER: User,
    EntityKind.EVENT: Event,
    EntityKind.LOCATION: Location,
    EntityKind.PARTICIPANT: Participant,
}

# Python attribute name -> wire name, only where they differ
_WIRE_NAMES = {"from_": "from"}
_ATTR_NAMES = {wire: attr for attr, wire in _WIRE_NAMES.items()}


def creation_fields(kind: EntityKind) -> tuple[str, ...]:
    """Attribute names a caller must supply to create a record of `kind`."""
    return tuple(f.name for f in fields(RECORD_TYPES[kind]) if f.name != "id")


def build_record(kind: EntityKind, record_id: RecordId, data: Mapping[str, Any]) -> Record:
    """Build a record from attribute-named fields.

    Missing fields raise KeyError; extra keys are ignored.
    """
    values = {name: data[name] for name in creation_fields(kind)}
    return RECORD_TYPES[kind](id=record_id, **values)


def to_payload(record: Record) -> dict[str, str]:
    """Flat wire-named dict of a record (bus payloads, REST, fixtures)."""
    return {
        _WIRE_NAMES.get(f.name, f.name): getattr(record, f.name)
        for f in fields(record)
    }


def record_from_payload(kind: EntityKind, payload: Mapping[str, Any]) -> Record:
    """Inverse of to_payload()."""
    data = {_ATTR_NAMES.get(key, key): value for key, value in payload.items()}
    return build_record(kind, RecordId(data["id"]), data)


# ─── Patches ─────────────────────────────────────────────────────

@dataclass
class UserPatch:
    username: str | None = None
    email: str | None = None


@dataclass
class EventPatch:
    title: str | None = None
    desc: str | None = None
    date: str | None = None
    from_: str | None = None
    to: str | None = None
    location_id: str | None = None
    user_id: str | None = None


@dataclass
class LocationPatch:
    name: str | None = None
    desc: str | None = None
    lat: str | None = None
    lng: str | None = None


@dataclass
class ParticipantPatch:
    user_id: str | None = None
    event_id: str | None = None


Patch = Union[UserPatch, EventPatch, LocationPatch, ParticipantPatch]


def _pick(new: str | None, old: str) -> str:
    return old if new is None else new


def merge_user(user: User, patch: UserPatch) -> User:
    return replace(
        user,
        username=_pick(patch.username, user.username),
        email=_pick(patch.email, user.email),
    )


def merge_event(event: Event, patch: EventPatch) -> Event:
    return replace(
        event,
        title=_pick(patch.title, event.title),
        desc=_pick(patch.desc, event.desc),
        date=_pick(patch.date, event.date),
        from_=_pick(patch.from_, event.from_),
        to=_pick(patch.to, event.to),
        location_id=_pick(patch.location_id, event.location_id),
        user_id=_pick(patch.user_id, event.user_id),
    )


def merge_location(location: Location, patch: LocationPatch) -> Location:
    return replace(
        location,
        name=_pick(patch.name, location.name),
        desc=_pick(patch.desc, location.desc),
        lat=_pick(patch.lat, location.lat),
        lng=_pick(patch.lng, location.lng),
    )


def merge_participant(participant: Participant, patch: ParticipantPatch) -> Participant:
    return replace(
        participant,
        user_id=_pick(patch.user_id, participant.user_id),
        event_id=_pick(patch.event_id, participant.event_id),
    )


# Every merge visible in one place; adding a kind requires editing this dict
PATCH_MERGERS: dict[EntityKind, Callable[[Any, Any], Record]] = {
    EntityKind.USER: merge_user,
    EntityKind.EVENT: merge_event,
    EntityKind.LOCATION: merge_location,
    EntityKind.PARTICIPANT: merge_participant,
}

PATCH_TYPES: dict[EntityKind, type] = {
    EntityKind.USER: UserPatch,
    EntityKind.EVENT: EventPatch,
    EntityKind.LOCATION: LocationPatch,
    EntityKind.PARTICIPANT: ParticipantPatch,
}
