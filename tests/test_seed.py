"""Tests for loading the starter books."""

from unittest.mock import MagicMock

import pytest

from book_catalog.app.core.errors import BootstrapError, StoreError
from book_catalog.app.core.seed import STARTER_BOOKS, seed_books

from helpers import make_book


class TestSeedBooks:
    def test_inserts_every_starter_book_into_empty_collection(self, store):
        inserted = seed_books(store)

        assert inserted == len(STARTER_BOOKS)
        ids = {doc["id"] for doc in store.find_all()}
        assert ids == {"example1", "example2", "example3"}

    def test_second_run_is_a_no_op(self, store):
        seed_books(store)
        before = store.find_all()

        assert seed_books(store) == 0
        assert store.find_all() == before

    def test_identical_existing_record_counts_as_seeded(self, store):
        store.insert(dict(STARTER_BOOKS[1]))

        assert seed_books(store) == len(STARTER_BOOKS) - 1
        assert store.count_matching({"id": "example2"}) == 1

    def test_partially_matching_record_does_not_count(self, store):
        store.insert(dict(STARTER_BOOKS[0], pages="300"))

        seed_books(store)

        assert store.count_matching({"id": "example1"}) == 2

    def test_duplicate_seed_rows_abort(self, store):
        store.insert(dict(STARTER_BOOKS[0]))
        store.insert(dict(STARTER_BOOKS[0]))

        with pytest.raises(BootstrapError, match="example1"):
            seed_books(store)

    def test_custom_book_list(self, store):
        assert seed_books(store, [make_book()]) == 1
        assert [doc["id"] for doc in store.find_all()] == ["dune"]

    def test_store_failure_aborts(self):
        store = MagicMock()
        store.find_matching.side_effect = StoreError("timed out")

        with pytest.raises(BootstrapError, match="timed out"):
            seed_books(store)
