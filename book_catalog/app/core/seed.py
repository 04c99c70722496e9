"""
Starter data loaded into an empty catalog.

``seed_books`` inserts each starter book unless a document with the
very same field values already exists.  The check compares every
field rather than the logical ``id``: a book created independently
with identical values counts as already seeded.  Finding more than one
copy of a starter book means the collection was corrupted by earlier
runs or external writes, and startup is aborted.
"""

import logging
from typing import Iterable, Mapping

from .db import BookStore
from .errors import BootstrapError, ConflictError, StoreError

logger = logging.getLogger(__name__)


STARTER_BOOKS = (
    {
        "id": "example1",
        "title": "The Vortex",
        "author": "José Eustasio Rivera",
        "edition": "958-30-0804-4",
        "pages": "292",
        "year": "1924",
    },
    {
        "id": "example2",
        "title": "Frankenstein",
        "author": "Mary Shelley",
        "edition": "978-3-649-64609-9",
        "pages": "280",
        "year": "1818",
    },
    {
        "id": "example3",
        "title": "The Black Cat",
        "author": "Edgar Allan Poe",
        "edition": "978-3-99168-238-7",
        "pages": "280",
        "year": "1843",
    },
)


def seed_books(store: BookStore, books: Iterable[Mapping[str, str]] = STARTER_BOOKS) -> int:
    """Insert the starter ``books`` that are not stored yet.

    Returns the number of inserted books.  Raises ``BootstrapError``
    when a starter book is stored more than once or the store fails.
    """
    inserted = 0
    for book in books:
        try:
            matches = store.find_matching(book)
            if len(matches) > 1:
                raise BootstrapError(
                    f"seed book {book.get('id')!r} is stored {len(matches)} times"
                )
            if matches:
                logger.info("Seed book %s already present (%s)", book.get("id"), matches[0]["_id"])
                continue
            storage_id = store.insert(book)
        except (ConflictError, StoreError) as exc:
            raise BootstrapError(f"cannot seed book {book.get('id')!r}: {exc}") from exc
        logger.info("Inserted seed book %s (%s)", book.get("id"), storage_id)
        inserted += 1
    return inserted
