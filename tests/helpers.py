"""Builders shared by the test modules."""

from book_catalog.app.core.config import Settings

TEST_DATABASE = "catalog-test"
TEST_COLLECTION = "books"


def make_settings(**overrides) -> Settings:
    values = {
        "database_name": TEST_DATABASE,
        "collection_name": TEST_COLLECTION,
        "seed_data": False,
        "unique_book_ids": False,
    }
    values.update(overrides)
    return Settings(**values)


def make_book(**fields) -> dict:
    """Return a complete book document with sensible defaults."""
    book = {
        "id": "dune",
        "title": "Dune",
        "author": "Herbert",
        "edition": "1",
        "pages": "412",
        "year": "1965",
    }
    book.update(fields)
    return book
