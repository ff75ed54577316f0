"""Record Reads: read-only REST view of the store for scripts and debugging.

Invariants:
    - GET only; every write goes through GraphQL mutations so creations are published
    - Bodies use the wire field names (`from`, `user_id`), same as the bus payloads
    - An unknown kind is a 400 validation error; an unknown id is a 404 RESOURCE_NOT_FOUND
"""

import logging

from fastapi import APIRouter, Depends, Request

from eventboard.core.domain_types import EntityKind
from eventboard.core.record_store import RecordStore
from eventboard.core.records import to_payload
from eventboard.services import entity_resolvers

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/records", tags=["records"])


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


@router.get("/{kind}")
async def list_records(kind: EntityKind, store: RecordStore = Depends(get_store)):
    rows = entity_resolvers.list_records(store, kind)
    return {"kind": kind.value, "count": len(rows), "items": [to_payload(r) for r in rows]}


@router.get("/{kind}/{record_id}")
async def get_record(
    kind: EntityKind, record_id: str, store: RecordStore = Depends(get_store),
):
    """Single record; RecordNotFoundError is rendered by the global handler."""
    return to_payload(entity_resolvers.get_record(store, kind, record_id))
