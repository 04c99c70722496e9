"""Tests for the collection bootstrapper, the book store and init_db."""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from book_catalog.app.core.db import BookStore, get_book_store, init_db, prepare_collection
from book_catalog.app.core.errors import BootstrapError, ConflictError, StoreError
from book_catalog.app.core.seed import STARTER_BOOKS

from helpers import TEST_COLLECTION, TEST_DATABASE, make_book, make_settings


class TestPrepareCollection:
    def test_creates_missing_collection(self, mongo_client):
        assert TEST_COLLECTION not in mongo_client[TEST_DATABASE].list_collection_names()

        collection = prepare_collection(mongo_client, TEST_DATABASE, TEST_COLLECTION)

        assert collection.name == TEST_COLLECTION
        assert TEST_COLLECTION in mongo_client[TEST_DATABASE].list_collection_names()

    def test_is_idempotent(self, mongo_client):
        prepare_collection(mongo_client, TEST_DATABASE, TEST_COLLECTION)
        mongo_client[TEST_DATABASE][TEST_COLLECTION].insert_one(make_book())

        collection = prepare_collection(mongo_client, TEST_DATABASE, TEST_COLLECTION)

        names = mongo_client[TEST_DATABASE].list_collection_names()
        assert names.count(TEST_COLLECTION) == 1
        assert collection.count_documents({}) == 1

    def test_creates_at_most_once(self):
        client = MagicMock()
        db = client.__getitem__.return_value
        db.list_collection_names.return_value = [TEST_COLLECTION]

        prepare_collection(client, TEST_DATABASE, TEST_COLLECTION)

        db.create_collection.assert_not_called()

    @pytest.mark.parametrize("database, collection", [("", "books"), ("catalog", "")])
    def test_rejects_empty_names(self, mongo_client, database, collection):
        with pytest.raises(BootstrapError):
            prepare_collection(mongo_client, database, collection)

    def test_listing_failure_is_fatal(self):
        client = MagicMock()
        db = client.__getitem__.return_value
        db.list_collection_names.side_effect = ServerSelectionTimeoutError("no servers")

        with pytest.raises(BootstrapError, match="no servers"):
            prepare_collection(client, TEST_DATABASE, TEST_COLLECTION)


class TestBookStore:
    def test_insert_returns_storage_id(self, store, collection):
        storage_id = store.insert(make_book())

        stored = collection.find_one({"id": "dune"})
        assert storage_id == str(stored["_id"])

    def test_insert_does_not_mutate_document(self, store):
        document = make_book()

        store.insert(document)

        assert "_id" not in document

    def test_find_and_count_matching(self, store):
        store.insert(make_book())
        store.insert(make_book(id="other", title="Dune Messiah"))

        assert len(store.find_all()) == 2
        assert [doc["id"] for doc in store.find_matching({"title": "Dune"})] == ["dune"]
        assert store.count_matching({"author": "Herbert"}) == 2

    def test_update_fields_reports_matches(self, store, collection):
        store.insert(make_book())

        assert store.update_fields("dune", {"pages": "500"}) == 1
        assert store.update_fields("missing", {"pages": "500"}) == 0
        assert collection.find_one({"id": "dune"})["pages"] == "500"

    def test_delete_reports_deleted_count(self, store):
        store.insert(make_book())

        assert store.delete("dune") == 1
        assert store.delete("dune") == 0

    def test_driver_errors_become_store_errors(self):
        collection = MagicMock()
        collection.find.side_effect = PyMongoError("connection refused")
        collection.count_documents.side_effect = PyMongoError("connection refused")
        collection.delete_one.side_effect = PyMongoError("connection refused")
        broken = BookStore(collection, timeout=1)

        with pytest.raises(StoreError, match="connection refused"):
            broken.find_all()
        with pytest.raises(StoreError):
            broken.count_matching({})
        with pytest.raises(StoreError):
            broken.delete("dune")

    def test_unique_index_violation_is_conflict(self, store):
        store.ensure_unique_ids()
        store.insert(make_book())

        with pytest.raises(ConflictError):
            store.insert(make_book(title="Another title"))


class TestInitDb:
    def test_prepares_and_seeds(self, mongo_client):
        store = init_db(mongo_client, make_settings(seed_data=True))

        assert store.collection.name == TEST_COLLECTION
        assert store.count_matching({}) == len(STARTER_BOOKS)

    def test_running_twice_keeps_collection_unchanged(self, mongo_client):
        settings = make_settings(seed_data=True)
        first = init_db(mongo_client, settings)
        before = sorted(first.find_all(), key=lambda doc: doc["id"])

        second = init_db(mongo_client, settings)
        after = sorted(second.find_all(), key=lambda doc: doc["id"])

        assert after == before

    def test_without_seed_leaves_collection_empty(self, mongo_client):
        store = init_db(mongo_client, make_settings(seed_data=False))

        assert store.find_all() == []

    def test_uses_request_timeout_for_store(self, mongo_client):
        store = init_db(mongo_client, make_settings(request_timeout_seconds=2.5))

        assert store.timeout == 2.5


class TestGetBookStore:
    def test_raises_when_store_missing(self):
        request = MagicMock()
        request.app.state.book_store = None

        with pytest.raises(StoreError):
            get_book_store(request)

    def test_returns_store_from_app_state(self, store):
        request = MagicMock()
        request.app.state.book_store = store

        assert get_book_store(request) is store
