"""Service test fixtures: seeded store and recording bus.

Invariants:
    - Every test gets a fresh store seeded from the bundled fixture
"""

import pytest

from eventboard.infrastructure.fixture_loader import build_seeded_store
from tests.services.recording_bus import RecordingBus


@pytest.fixture
def store():
    return build_seeded_store()


@pytest.fixture
def bus():
    return RecordingBus()
