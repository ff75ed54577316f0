"""Graph Types: the four entities, their inputs and the delete-all output.

Invariants:
    - Foreign-key and keyword fields keep their wire names (`user_id`, `from`)
    - Relationship fields resolve lazily against the store in the request context
    - Non-nullable relationships raise RecordNotFoundError on a dangling key
    - Update inputs: every field optional; null and absent both mean "unchanged"
"""

from dataclasses import asdict
from typing import Any

import strawberry
from strawberry.types import Info

from eventboard.api.gateway.context import GatewayContext
from eventboard.core import records
from eventboard.services import entity_resolvers

GatewayInfo = Info[GatewayContext, None]


# ─── Entities ────────────────────────────────────────────────────

@strawberry.type
class User:
    id: strawberry.ID
    username: str
    email: str

    @classmethod
    def from_record(cls, record: records.User) -> "User":
        return cls(
            id=strawberry.ID(record.id),
            username=record.username,
            email=record.email,
        )

    @strawberry.field
    def events(self, info: GatewayInfo) -> list["Event"]:
        rows = entity_resolvers.events_of_user(info.context.store, self.id)
        return [Event.from_record(r) for r in rows]

    @strawberry.field
    def participations(self, info: GatewayInfo) -> list["Participant"]:
        rows = entity_resolvers.participations_of_user(info.context.store, self.id)
        return [Participant.from_record(r) for r in rows]


@strawberry.type
class Event:
    id: strawberry.ID
    title: str
    desc: str
    date: str
    from_: str = strawberry.field(name="from")
    to: str
    location_id: str = strawberry.field(name="location_id")
    user_id: str = strawberry.field(name="user_id")

    @classmethod
    def from_record(cls, record: records.Event) -> "Event":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            desc=record.desc,
            date=record.date,
            from_=record.from_,
            to=record.to,
            location_id=record.location_id,
            user_id=record.user_id,
        )

    @strawberry.field
    def user(self, info: GatewayInfo) -> User:
        return User.from_record(
            entity_resolvers.user_by_key(info.context.store, self.user_id),
        )

    @strawberry.field
    def location(self, info: GatewayInfo) -> "Location":
        return Location.from_record(
            entity_resolvers.location_by_key(info.context.store, self.location_id),
        )

    @strawberry.field
    def participants(self, info: GatewayInfo) -> list["Participant"]:
        rows = entity_resolvers.participants_of_event(info.context.store, self.id)
        return [Participant.from_record(r) for r in rows]


@strawberry.type
class Location:
    id: strawberry.ID
    name: str
    desc: str
    lat: str
    lng: str

    @classmethod
    def from_record(cls, record: records.Location) -> "Location":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            desc=record.desc,
            lat=record.lat,
            lng=record.lng,
        )


@strawberry.type
class Participant:
    id: strawberry.ID
    user_id: str = strawberry.field(name="user_id")
    event_id: str = strawberry.field(name="event_id")

    @classmethod
    def from_record(cls, record: records.Participant) -> "Participant":
        return cls(
            id=strawberry.ID(record.id),
            user_id=record.user_id,
            event_id=record.event_id,
        )

    @strawberry.field
    def user(self, info: GatewayInfo) -> User:
        return User.from_record(
            entity_resolvers.user_by_key(info.context.store, self.user_id),
        )

    @strawberry.field
    def event(self, info: GatewayInfo) -> Event:
        return Event.from_record(
            entity_resolvers.event_by_key(info.context.store, self.event_id),
        )


@strawberry.type
class DeleteAllOutput:
    count: int


# ─── Inputs ──────────────────────────────────────────────────────

def input_fields(data: Any) -> dict[str, Any]:
    """Attribute-named dict of an input object, as the store expects it."""
    return asdict(data)


@strawberry.input
class AddUserInput:
    username: str
    email: str


@strawberry.input
class UpdateUserInput:
    username: str | None = None
    email: str | None = None

    def to_patch(self) -> records.UserPatch:
        return records.UserPatch(**input_fields(self))


@strawberry.input
class AddEventInput:
    title: str
    desc: str
    date: str
    from_: str = strawberry.field(name="from")
    to: str
    location_id: str = strawberry.field(name="location_id")
    user_id: str = strawberry.field(name="user_id")


@strawberry.input
class UpdateEventInput:
    title: str | None = None
    desc: str | None = None
    date: str | None = None
    from_: str | None = strawberry.field(name="from", default=None)
    to: str | None = None
    location_id: str | None = strawberry.field(name="location_id", default=None)
    user_id: str | None = strawberry.field(name="user_id", default=None)

    def to_patch(self) -> records.EventPatch:
        return records.EventPatch(**input_fields(self))


@strawberry.input
class AddLocationInput:
    name: str
    desc: str
    lat: str
    lng: str


@strawberry.input
class UpdateLocationInput:
    name: str | None = None
    desc: str | None = None
    lat: str | None = None
    lng: str | None = None

    def to_patch(self) -> records.LocationPatch:
        return records.LocationPatch(**input_fields(self))


@strawberry.input
class AddParticipantInput:
    user_id: str = strawberry.field(name="user_id")
    event_id: str = strawberry.field(name="event_id")


@strawberry.input
class UpdateParticipantInput:
    user_id: str | None = strawberry.field(name="user_id", default=None)
    event_id: str | None = strawberry.field(name="event_id", default=None)

    def to_patch(self) -> records.ParticipantPatch:
        return records.ParticipantPatch(**input_fields(self))
