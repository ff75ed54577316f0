"""Fixture Loader: reads the seed JSON and fills a RecordStore.

Invariants:
    - Malformed or unreadable fixtures raise FixtureLoadError (startup fails fast)
    - Records keep their fixture ids and file order
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from eventboard.config import DEFAULT_FIXTURE
from eventboard.core.domain_types import EntityKind
from eventboard.core.errors import FixtureLoadError
from eventboard.core.record_store import RecordStore
from eventboard.core.records import record_from_payload
from eventboard.schemas.fixture import SeedFixture

logger = logging.getLogger(__name__)


_SECTIONS = {
    EntityKind.USER: "users",
    EntityKind.EVENT: "events",
    EntityKind.LOCATION: "locations",
    EntityKind.PARTICIPANT: "participants",
}


def load_fixture(path: Path | str) -> SeedFixture:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FixtureLoadError(str(path), str(e)) from e
    try:
        return SeedFixture.model_validate(raw)
    except ValidationError as e:
        raise FixtureLoadError(
            str(path), f"{e.error_count()} invalid field(s)",
        ) from e


def seed_store(store: RecordStore, fixture: SeedFixture) -> None:
    for kind, section in _SECTIONS.items():
        rows = getattr(fixture, section)
        store.seed(kind, (
            record_from_payload(kind, row.model_dump(by_alias=True))
            for row in rows
        ))
        logger.info(
            f"Seeded {len(rows)} {section}",
            extra={"entity_kind": kind.value, "count": len(rows)},
        )


def build_seeded_store(path: Path | str = DEFAULT_FIXTURE) -> RecordStore:
    store = RecordStore()
    seed_store(store, load_fixture(path))
    return store
