"""Error Handling: REST envelopes on the real routes and GraphQL domain-error logging.

Tests cover:
    - unknown record id on /api/v1/records -> 404 RESOURCE_NOT_FOUND envelope
    - unknown kind -> 400 VALIDATION_ERROR with the offending field
    - an exception escaping a route -> 500 INTERNAL_ERROR without its message
    - log_domain_error logs EventboardError only
"""

import logging

import pytest
from graphql import GraphQLError
from httpx import ASGITransport, AsyncClient

from eventboard.api.gateway.error_extension import log_domain_error
from eventboard.core.errors import RecordNotFoundError
from eventboard.main import app


@pytest.fixture
async def lenient_client(client):
    """Same app state as `client`, but server errors come back as responses."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


async def test_unknown_record_maps_to_404_envelope(client):
    res = await client.get("/api/v1/records/Event/e404")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["message"] == "Event not found"
    assert error["context"] == {"kind": "Event", "id": "e404"}


async def test_unknown_kind_maps_to_400_with_field(client):
    res = await client.get("/api/v1/records/Venue/1")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "path.kind"


async def test_unhandled_error_hides_details(lenient_client, bus, monkeypatch):
    async def ping():
        raise RuntimeError("redis password is hunter2")
    monkeypatch.setattr(bus, "ping", ping)
    res = await lenient_client.get("/api/v1/health/ready")
    assert res.status_code == 500
    assert "hunter2" not in res.text
    assert res.json()["error"]["code"] == "INTERNAL_ERROR"


def test_log_domain_error_records_code_and_record(caplog):
    error = GraphQLError(
        "User not found", path=["event", "user"],
        original_error=RecordNotFoundError("User", "u1"),
    )
    with caplog.at_level(logging.ERROR, logger="eventboard.api.gateway.error_extension"):
        assert log_domain_error(error) is True
    record = caplog.records[0]
    assert record.error_code == "RESOURCE_NOT_FOUND"
    assert record.record_id == "u1"
    assert "event.user" in record.getMessage()


def test_log_domain_error_ignores_other_errors(caplog):
    error = GraphQLError("Syntax Error", original_error=ValueError("x"))
    with caplog.at_level(logging.ERROR, logger="eventboard.api.gateway.error_extension"):
        assert log_domain_error(error) is False
    assert caplog.records == []


def test_graphql_error_inherits_domain_extensions():
    original = RecordNotFoundError("Location", "l9")
    error = GraphQLError("Location not found", original_error=original)
    assert error.extensions == original.to_extensions()
