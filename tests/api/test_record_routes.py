"""Record Reads: GET /api/v1/records/{kind}[/{id}] over the seeded store."""


async def test_list_records_uses_wire_names(client):
    res = await client.get("/api/v1/records/Event")
    assert res.status_code == 200
    body = res.json()
    assert body["kind"] == "Event"
    assert body["count"] == 5
    assert body["items"][0]["from"] == "18:30"
    assert "from_" not in body["items"][0]


async def test_get_single_record(client):
    res = await client.get("/api/v1/records/Participant/3")
    assert res.status_code == 200
    assert res.json() == {"id": "3", "user_id": "1", "event_id": "2"}


async def test_reads_see_graphql_writes(client, gql):
    await gql('mutation { deleteAllLocations { count } }')
    res = await client.get("/api/v1/records/Location")
    assert res.json()["count"] == 0
