"""Graph Schema: root queries, mutations and subscriptions, plus the FastAPI router.

Invariants:
    - Every root operation maps to exactly one entity_resolvers call
    - Single-item queries and update/delete mutations fail the field with
      RecordNotFoundError when the id is unknown
    - deleteAll* and list queries never fail
    - Subscriptions stream creations published after the connection subscribes

Design Decisions:
    - Root names come from auto camel-casing (`delete_all_users` -> `deleteAllUsers`)
"""

from typing import AsyncGenerator

import strawberry
from strawberry.fastapi import GraphQLRouter

from eventboard.api.gateway.context import get_context
from eventboard.api.gateway.error_extension import DomainErrorExtension
from eventboard.api.gateway.types import (
    AddEventInput, AddLocationInput, AddParticipantInput, AddUserInput,
    DeleteAllOutput, Event, GatewayInfo, Location, Participant,
    UpdateEventInput, UpdateLocationInput, UpdateParticipantInput,
    UpdateUserInput, User, input_fields,
)
from eventboard.core.domain_types import EntityKind, Topic
from eventboard.services import creation_feed, entity_resolvers as er

USER, EVENT, LOCATION, PARTICIPANT = (
    EntityKind.USER, EntityKind.EVENT, EntityKind.LOCATION, EntityKind.PARTICIPANT,
)


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: GatewayInfo) -> list[User]:
        return [User.from_record(r) for r in er.list_records(info.context.store, USER)]

    @strawberry.field
    def user(self, info: GatewayInfo, id: strawberry.ID) -> User:
        return User.from_record(er.get_record(info.context.store, USER, id))

    @strawberry.field
    def events(self, info: GatewayInfo) -> list[Event]:
        return [Event.from_record(r) for r in er.list_records(info.context.store, EVENT)]

    @strawberry.field
    def event(self, info: GatewayInfo, id: strawberry.ID) -> Event:
        return Event.from_record(er.get_record(info.context.store, EVENT, id))

    @strawberry.field
    def locations(self, info: GatewayInfo) -> list[Location]:
        return [
            Location.from_record(r)
            for r in er.list_records(info.context.store, LOCATION)
        ]

    @strawberry.field
    def location(self, info: GatewayInfo, id: strawberry.ID) -> Location:
        return Location.from_record(er.get_record(info.context.store, LOCATION, id))

    @strawberry.field
    def participants(self, info: GatewayInfo) -> list[Participant]:
        return [
            Participant.from_record(r)
            for r in er.list_records(info.context.store, PARTICIPANT)
        ]

    @strawberry.field
    def participant(self, info: GatewayInfo, id: strawberry.ID) -> Participant:
        return Participant.from_record(
            er.get_record(info.context.store, PARTICIPANT, id),
        )


@strawberry.type
class Mutation:
    # User
    @strawberry.mutation
    def add_user(self, info: GatewayInfo, data: AddUserInput) -> User:
        ctx = info.context
        return User.from_record(
            er.add_record(ctx.store, ctx.bus, USER, input_fields(data)),
        )

    @strawberry.mutation
    def update_user(
        self, info: GatewayInfo, id: strawberry.ID, data: UpdateUserInput,
    ) -> User:
        return User.from_record(
            er.update_record(info.context.store, USER, id, data.to_patch()),
        )

    @strawberry.mutation
    def delete_user(self, info: GatewayInfo, id: strawberry.ID) -> User:
        return User.from_record(er.delete_record(info.context.store, USER, id))

    @strawberry.mutation
    def delete_all_users(self, info: GatewayInfo) -> DeleteAllOutput:
        return DeleteAllOutput(count=er.delete_all_records(info.context.store, USER))

    # Event
    @strawberry.mutation
    def add_event(self, info: GatewayInfo, data: AddEventInput) -> Event:
        ctx = info.context
        return Event.from_record(
            er.add_record(ctx.store, ctx.bus, EVENT, input_fields(data)),
        )

    @strawberry.mutation
    def update_event(
        self, info: GatewayInfo, id: strawberry.ID, data: UpdateEventInput,
    ) -> Event:
        return Event.from_record(
            er.update_record(info.context.store, EVENT, id, data.to_patch()),
        )

    @strawberry.mutation
    def delete_event(self, info: GatewayInfo, id: strawberry.ID) -> Event:
        return Event.from_record(er.delete_record(info.context.store, EVENT, id))

    @strawberry.mutation
    def delete_all_events(self, info: GatewayInfo) -> DeleteAllOutput:
        return DeleteAllOutput(count=er.delete_all_records(info.context.store, EVENT))

    # Location
    @strawberry.mutation
    def add_location(self, info: GatewayInfo, data: AddLocationInput) -> Location:
        ctx = info.context
        return Location.from_record(
            er.add_record(ctx.store, ctx.bus, LOCATION, input_fields(data)),
        )

    @strawberry.mutation
    def update_location(
        self, info: GatewayInfo, id: strawberry.ID, data: UpdateLocationInput,
    ) -> Location:
        return Location.from_record(
            er.update_record(info.context.store, LOCATION, id, data.to_patch()),
        )

    @strawberry.mutation
    def delete_location(self, info: GatewayInfo, id: strawberry.ID) -> Location:
        return Location.from_record(
            er.delete_record(info.context.store, LOCATION, id),
        )

    @strawberry.mutation
    def delete_all_locations(self, info: GatewayInfo) -> DeleteAllOutput:
        return DeleteAllOutput(
            count=er.delete_all_records(info.context.store, LOCATION),
        )

    # Participant
    @strawberry.mutation
    def add_participant(
        self, info: GatewayInfo, data: AddParticipantInput,
    ) -> Participant:
        ctx = info.context
        return Participant.from_record(
            er.add_record(ctx.store, ctx.bus, PARTICIPANT, input_fields(data)),
        )

    @strawberry.mutation
    def update_participant(
        self, info: GatewayInfo, id: strawberry.ID, data: UpdateParticipantInput,
    ) -> Participant:
        return Participant.from_record(
            er.update_record(info.context.store, PARTICIPANT, id, data.to_patch()),
        )

    @strawberry.mutation
    def delete_participant(self, info: GatewayInfo, id: strawberry.ID) -> Participant:
        return Participant.from_record(
            er.delete_record(info.context.store, PARTICIPANT, id),
        )

    @strawberry.mutation
    def delete_all_participants(self, info: GatewayInfo) -> DeleteAllOutput:
        return DeleteAllOutput(
            count=er.delete_all_records(info.context.store, PARTICIPANT),
        )


@strawberry.type
class Subscription:
    @strawberry.subscription
    async def user_created(self, info: GatewayInfo) -> AsyncGenerator[User, None]:
        async for record in creation_feed.watch(info.context.bus, Topic.USER_CREATED):
            yield User.from_record(record)

    @strawberry.subscription
    async def event_created(self, info: GatewayInfo) -> AsyncGenerator[Event, None]:
        async for record in creation_feed.watch(info.context.bus, Topic.EVENT_CREATED):
            yield Event.from_record(record)

    @strawberry.subscription
    async def participant_added(
        self, info: GatewayInfo,
    ) -> AsyncGenerator[Participant, None]:
        feed = creation_feed.watch(info.context.bus, Topic.PARTICIPANT_ADDED)
        async for record in feed:
            yield Participant.from_record(record)


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    subscription=Subscription,
    extensions=[DomainErrorExtension],
)


def build_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(schema, context_getter=get_context)
