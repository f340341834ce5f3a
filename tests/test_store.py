"""Tests for the lock-guarded coaster store and the service use-cases."""

import random
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.domain.coaster import Coaster
from app.domain.store import CoasterStore
from app.service import coaster_service
from app.service.coaster_service import CoasterNotFoundError


def _coaster(i: int = 0) -> Coaster:
    return Coaster(name=f"Coaster {i}", manufacturer="Intamin", in_park="Park", height=100 + i)


class TestInsertAndGet:
    def test_insert_assigns_fresh_id(self):
        store = CoasterStore()
        coaster_id = store.insert(_coaster().model_copy(update={"id": "client-id"}))

        assert coaster_id
        assert coaster_id != "client-id"
        stored = store.get(coaster_id)
        assert stored is not None
        assert stored.id == coaster_id
        assert stored.name == "Coaster 0"

    def test_insert_does_not_mutate_argument(self):
        store = CoasterStore()
        coaster = _coaster()
        store.insert(coaster)
        assert coaster.id == ""

    def test_get_missing_returns_none(self):
        assert CoasterStore().get("nope") is None

    def test_get_returns_copy(self):
        store = CoasterStore()
        coaster_id = store.insert(_coaster())
        fetched = store.get(coaster_id)
        fetched.name = "changed"
        assert store.get(coaster_id).name == "Coaster 0"

    def test_keys_match_record_ids(self):
        store = CoasterStore()
        ids = {store.insert(_coaster(i)) for i in range(5)}
        assert {c.id for c in store.list()} == ids
        assert len(store) == 5


class TestList:
    def test_empty(self):
        assert CoasterStore().list() == []

    def test_snapshot_is_independent(self):
        store = CoasterStore()
        store.insert(_coaster())
        snapshot = store.list()
        store.insert(_coaster(1))
        assert len(snapshot) == 1
        assert len(store.list()) == 2


class TestRandomId:
    def test_empty_store(self):
        assert CoasterStore().random_id() is None

    def test_single_record_is_deterministic(self):
        store = CoasterStore()
        coaster_id = store.insert(_coaster())
        assert all(store.random_id() == coaster_id for _ in range(10))

    def test_covers_every_record(self):
        store = CoasterStore(rng=random.Random(7))
        ids = {store.insert(_coaster(i)) for i in range(3)}
        picked = {store.random_id() for _ in range(300)}
        assert picked == ids


class TestConcurrency:
    def test_concurrent_inserts_are_not_lost(self):
        store = CoasterStore()
        with ThreadPoolExecutor(max_workers=16) as pool:
            ids = list(pool.map(lambda i: store.insert(_coaster(i)), range(500)))

        assert len(set(ids)) == 500
        assert len(store) == 500
        assert {c.id for c in store.list()} == set(ids)

    def test_reads_during_writes(self):
        store = CoasterStore()

        def work(i: int) -> None:
            store.insert(_coaster(i))
            store.list()
            store.random_id()

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(work, range(200)))

        assert len(store) == 200


class TestService:
    def test_create_returns_stored_record(self):
        store = CoasterStore()
        created = coaster_service.create_coaster(store, coaster=_coaster())
        assert created.id
        assert coaster_service.get_coaster(store, coaster_id=created.id) == created

    def test_get_missing_raises(self):
        with pytest.raises(CoasterNotFoundError):
            coaster_service.get_coaster(CoasterStore(), coaster_id="missing")

    def test_random_on_empty_raises(self):
        with pytest.raises(CoasterNotFoundError) as excinfo:
            coaster_service.pick_random_coaster_id(CoasterStore())
        assert excinfo.value.code == "coaster_not_found"
