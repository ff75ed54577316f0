"""Fixture Schemas: shape of the seed JSON loaded at startup.

Invariants:
    - Every row carries an id and every non-id field of its kind, all strings
    - Unknown keys are ignored
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRow(BaseModel):
    id: str
    username: str
    email: str


class EventRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    desc: str
    date: str
    from_: str = Field(alias="from")
    to: str
    location_id: str
    user_id: str


class LocationRow(BaseModel):
    id: str
    name: str
    desc: str
    lat: str
    lng: str


class ParticipantRow(BaseModel):
    id: str
    user_id: str
    event_id: str


class SeedFixture(BaseModel):
    """Whole fixture file. Missing sections default to empty."""
    users: list[UserRow] = []
    events: list[EventRow] = []
    locations: list[LocationRow] = []
    participants: list[ParticipantRow] = []
