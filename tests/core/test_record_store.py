"""Record Store: primitive operations over the four collections.

Tests cover:
    - insert assigns a fresh id and appends in order
    - find/get on unknown ids (None vs RecordNotFoundError)
    - update_partial is a left-biased merge with read-after-write consistency
    - remove / remove_all counts and emptiness
    - collections are independent of each other
"""

import pytest

from eventboard.core.domain_types import EntityKind, RECORD_ID_LENGTH
from eventboard.core.errors import RecordNotFoundError
from eventboard.core.record_store import RecordStore, generate_record_id
from eventboard.core.records import (
    Event, EventPatch, User, UserPatch, LocationPatch,
)


def _event_fields(**overrides):
    fields = {
        "title": "Standup", "desc": "Daily sync", "date": "2026-11-02",
        "from_": "09:00", "to": "09:15", "location_id": "L1", "user_id": "U1",
    }
    fields.update(overrides)
    return fields


@pytest.fixture
def store():
    return RecordStore()


# ─── insert / find ───────────────────────────────────────────────

def test_generated_ids_are_nanoid_sized_and_url_safe():
    record_id = generate_record_id()
    assert len(record_id) == RECORD_ID_LENGTH
    assert all(c.isalnum() or c in "_-" for c in record_id)


def test_insert_then_find_returns_same_record(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "a@x.com"})
    assert store.find(EntityKind.USER, user.id) == user
    assert user == User(id=user.id, username="a", email="a@x.com")


def test_insert_ids_distinct_from_existing(store):
    ids = {
        store.insert(EntityKind.USER, {"username": f"u{i}", "email": "e"}).id
        for i in range(50)
    }
    assert len(ids) == 50


def test_insert_regenerates_colliding_id():
    factory = iter(["dup", "dup", "fresh"]).__next__
    store = RecordStore(id_factory=factory)
    first = store.insert(EntityKind.USER, {"username": "a", "email": "a"})
    second = store.insert(EntityKind.USER, {"username": "b", "email": "b"})
    assert (first.id, second.id) == ("dup", "fresh")


def test_insert_appends_in_insertion_order(store):
    for name in ("first", "second", "third"):
        store.insert(EntityKind.USER, {"username": name, "email": "e"})
    names = [u.username for u in store.list_records(EntityKind.USER)]
    assert names == ["first", "second", "third"]


def test_insert_missing_field_raises_key_error(store):
    with pytest.raises(KeyError):
        store.insert(EntityKind.USER, {"username": "only"})


def test_insert_routes_to_own_collection(store):
    store.insert(EntityKind.LOCATION, {"name": "n", "desc": "d", "lat": "1", "lng": "2"})
    store.insert(EntityKind.PARTICIPANT, {"user_id": "u", "event_id": "e"})
    assert store.count(EntityKind.LOCATION) == 1
    assert store.count(EntityKind.PARTICIPANT) == 1
    assert store.count(EntityKind.EVENT) == 0


def test_find_unknown_id_returns_none(store):
    assert store.find(EntityKind.EVENT, "nope") is None


def test_get_unknown_id_raises_not_found(store):
    with pytest.raises(RecordNotFoundError) as exc_info:
        store.get(EntityKind.EVENT, "nope")
    assert exc_info.value.message == "Event not found"
    assert exc_info.value.kind == "Event"
    assert exc_info.value.record_id == "nope"


def test_list_records_on_empty_collection(store):
    assert store.list_records(EntityKind.PARTICIPANT) == []


def test_list_records_returns_a_snapshot(store):
    store.insert(EntityKind.USER, {"username": "a", "email": "e"})
    snapshot = store.list_records(EntityKind.USER)
    store.remove_all(EntityKind.USER)
    assert len(snapshot) == 1


def test_filter_by_matches_attribute(store):
    store.insert(EntityKind.EVENT, _event_fields(user_id="U1"))
    store.insert(EntityKind.EVENT, _event_fields(user_id="U2"))
    store.insert(EntityKind.EVENT, _event_fields(user_id="U1", title="Retro"))
    titles = [e.title for e in store.filter_by(EntityKind.EVENT, "user_id", "U1")]
    assert titles == ["Standup", "Retro"]


# ─── update_partial ──────────────────────────────────────────────

def test_update_partial_leaves_unspecified_fields(store):
    event = store.insert(EntityKind.EVENT, _event_fields())
    updated = store.update_partial(EntityKind.EVENT, event.id, EventPatch(title="Planning"))
    assert updated == Event(**{**_event_fields(title="Planning"), "id": event.id})


def test_update_partial_is_read_after_write_consistent(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "a@x.com"})
    updated = store.update_partial(EntityKind.USER, user.id, UserPatch(email="b@x.com"))
    assert store.find(EntityKind.USER, user.id) == updated
    assert updated.username == "a"


def test_update_partial_empty_patch_is_noop(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "a@x.com"})
    assert store.update_partial(EntityKind.USER, user.id, UserPatch()) == user


def test_update_partial_accepts_empty_string(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "a@x.com"})
    updated = store.update_partial(EntityKind.USER, user.id, UserPatch(username=""))
    assert updated.username == ""


def test_update_partial_keeps_position(store):
    first = store.insert(EntityKind.USER, {"username": "a", "email": "e"})
    store.insert(EntityKind.USER, {"username": "b", "email": "e"})
    store.update_partial(EntityKind.USER, first.id, UserPatch(username="z"))
    assert [u.username for u in store.list_records(EntityKind.USER)] == ["z", "b"]


def test_update_partial_unknown_id_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.update_partial(EntityKind.USER, "ghost", UserPatch(username="x"))


def test_update_partial_rejects_patch_of_other_kind(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "e"})
    with pytest.raises(TypeError):
        store.update_partial(EntityKind.USER, user.id, LocationPatch(name="x"))


# ─── remove / remove_all ─────────────────────────────────────────

def test_remove_returns_removed_record(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "e"})
    assert store.remove(EntityKind.USER, user.id) == user
    assert store.find(EntityKind.USER, user.id) is None


def test_remove_unknown_id_raises(store):
    with pytest.raises(RecordNotFoundError):
        store.remove(EntityKind.LOCATION, "ghost")


def test_remove_does_not_cascade(store):
    user = store.insert(EntityKind.USER, {"username": "a", "email": "e"})
    event = store.insert(EntityKind.EVENT, _event_fields(user_id=user.id))
    store.remove(EntityKind.USER, user.id)
    assert store.find(EntityKind.EVENT, event.id).user_id == user.id


def test_remove_all_twice_returns_n_then_zero(store):
    for i in range(5):
        store.insert(EntityKind.EVENT, _event_fields(title=f"E{i}"))
    assert store.remove_all(EntityKind.EVENT) == 5
    assert store.remove_all(EntityKind.EVENT) == 0
    assert store.list_records(EntityKind.EVENT) == []


def test_remove_all_on_empty_collection_returns_zero(store):
    assert store.remove_all(EntityKind.LOCATION) == 0


def test_seed_keeps_fixture_ids(store):
    store.seed(EntityKind.USER, [User(id="7", username="s", email="e")])
    assert store.get(EntityKind.USER, "7").username == "s"
