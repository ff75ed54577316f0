"""Record Store: the four in-memory collections and their primitive operations.

Invariants:
    - One ordered dict per kind; iteration order is insertion order
    - Ids are unique within a collection and assigned only by insert()
    - update_partial() and remove() raise RecordNotFoundError for unknown ids
    - remove_all() never raises and returns the pre-removal count
    - Foreign keys are never validated; no cascading deletes

Design Decisions:
    - Constructed once per process and handed to resolvers through the request
      context (no module-level collections)
    - One RLock per collection: uncontended on the event loop, correct if the
      server is run with worker threads
    - find() is a dict lookup keyed by id
"""

import logging
import secrets
import threading
from typing import Any, Callable, Iterable, Mapping

from eventboard.core.domain_types import EntityKind, RECORD_ID_LENGTH, RecordId
from eventboard.core.errors import RecordNotFoundError
from eventboard.core.records import (
    PATCH_MERGERS, PATCH_TYPES, Patch, Record, build_record,
)

logger = logging.getLogger(__name__)

_ALPHABET = "_-0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def generate_record_id(size: int = RECORD_ID_LENGTH) -> RecordId:
    """Random URL-safe identifier (nanoid alphabet and length)."""
    return RecordId("".join(secrets.choice(_ALPHABET) for _ in range(size)))


class RecordStore:
    """Owns every record. Resolvers read and mutate only through these methods."""

    def __init__(self, id_factory: Callable[[], RecordId] = generate_record_id):
        self._id_factory = id_factory
        self._collections: dict[EntityKind, dict[str, Record]] = {
            kind: {} for kind in EntityKind
        }
        self._locks: dict[EntityKind, threading.RLock] = {
            kind: threading.RLock() for kind in EntityKind
        }

    def seed(self, kind: EntityKind, records: Iterable[Record]) -> None:
        """Load fixture records with their existing ids, preserving order."""
        with self._locks[kind]:
            collection = self._collections[kind]
            for record in records:
                collection[record.id] = record

    def list_records(self, kind: EntityKind) -> list[Record]:
        with self._locks[kind]:
            return list(self._collections[kind].values())

    def count(self, kind: EntityKind) -> int:
        with self._locks[kind]:
            return len(self._collections[kind])

    def find(self, kind: EntityKind, record_id: str) -> Record | None:
        with self._locks[kind]:
            return self._collections[kind].get(record_id)

    def get(self, kind: EntityKind, record_id: str) -> Record:
        """find() that raises RecordNotFoundError instead of returning None."""
        record = self.find(kind, record_id)
        if record is None:
            raise RecordNotFoundError(kind.value, record_id)
        return record

    def filter_by(self, kind: EntityKind, field: str, value: Any) -> list[Record]:
        """All records of `kind` whose attribute `field` equals `value`, in order."""
        with self._locks[kind]:
            return [
                r for r in self._collections[kind].values()
                if getattr(r, field) == value
            ]

    def insert(self, kind: EntityKind, data: Mapping[str, Any]) -> Record:
        """Create a record from wire-named fields under a fresh id."""
        with self._locks[kind]:
            collection = self._collections[kind]
            record_id = self._id_factory()
            while record_id in collection:
                record_id = self._id_factory()
            record = build_record(kind, record_id, data)
            collection[record_id] = record
        logger.info(
            f"{kind.value} created",
            extra={"entity_kind": kind.value, "record_id": record_id},
        )
        return record

    def update_partial(self, kind: EntityKind, record_id: str, patch: Patch) -> Record:
        if not isinstance(patch, PATCH_TYPES[kind]):
            raise TypeError(
                f"{type(patch).__name__} cannot patch a {kind.value}",
            )
        with self._locks[kind]:
            collection = self._collections[kind]
            current = collection.get(record_id)
            if current is None:
                raise RecordNotFoundError(kind.value, record_id)
            updated = PATCH_MERGERS[kind](current, patch)
            collection[record_id] = updated
        logger.info(
            f"{kind.value} updated",
            extra={"entity_kind": kind.value, "record_id": record_id},
        )
        return updated

    def remove(self, kind: EntityKind, record_id: str) -> Record:
        with self._locks[kind]:
            removed = self._collections[kind].pop(record_id, None)
        if removed is None:
            raise RecordNotFoundError(kind.value, record_id)
        logger.info(
            f"{kind.value} deleted",
            extra={"entity_kind": kind.value, "record_id": record_id},
        )
        return removed

    def remove_all(self, kind: EntityKind) -> int:
        with self._locks[kind]:
            collection = self._collections[kind]
            count = len(collection)
            collection.clear()
        logger.info(
            f"All {kind.value} records deleted",
            extra={"entity_kind": kind.value, "count": count},
        )
        return count
