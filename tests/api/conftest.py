"""API test fixtures: FastAPI app over httpx with store and bus injected.

Invariants:
    - The lifespan is not run; app.state is populated directly per test
    - `gql` posts a GraphQL document and returns the decoded JSON body
"""

import pytest
from httpx import ASGITransport, AsyncClient

from eventboard.infrastructure.fixture_loader import build_seeded_store
from eventboard.main import app
from tests.services.recording_bus import RecordingBus


@pytest.fixture
def store():
    return build_seeded_store()


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
async def client(store, bus):
    app.state.store = store
    app.state.bus = bus
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    del app.state.store
    del app.state.bus


@pytest.fixture
def gql(client):
    async def _post(query: str, variables: dict | None = None) -> dict:
        res = await client.post(
            "/graphql", json={"query": query, "variables": variables or {}},
        )
        assert res.status_code == 200, res.text
        return res.json()
    return _post
