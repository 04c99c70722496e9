"""
Service layer for changing books.

Books are addressed by their logical ``id``, never by the storage id.
The service offers three operations:

* ``create_book`` – insert a book unless an identical one exists.
* ``update_book`` – merge the non‑empty fields of a payload into a book.
* ``delete_book`` – remove a book.

The duplicate check on create compares all six fields, or the five
non-id fields when the caller supplies no ``id``.  Two books
sharing an ``id`` but differing in any other field are therefore both
accepted, unless the store enforces unique ids (see
``Settings.unique_book_ids``).  The check and the insert are separate
store calls, so concurrent identical creates may both succeed.
"""

from __future__ import annotations

import logging

from bson import ObjectId

from book_catalog.app.core.db import BookStore
from book_catalog.app.core.errors import ConflictError, NotFoundError
from book_catalog.app.schemas.book import Book, BookPayload

logger = logging.getLogger(__name__)


def generate_book_id() -> str:
    """Return a new logical id in ObjectId hex form."""
    return str(ObjectId())


class BookService:
    """Create, update and delete books."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def create_book(self, data: BookPayload) -> Book:
        """Insert a new book and return it.

        Raises ``ConflictError`` when a book with exactly the same six
        fields is already stored.  Without an ``id`` the other five
        fields are compared and a new id is generated afterwards.
        """
        document = data.to_document()
        if document["id"]:
            duplicate_filter = dict(document)
        else:
            duplicate_filter = {name: value for name, value in document.items() if name != "id"}

        if self.store.count_matching(duplicate_filter) > 0:
            logger.info("Rejected duplicate book %s", document["id"] or document["title"])
            raise ConflictError("duplicate")

        if not document["id"]:
            document["id"] = generate_book_id()

        storage_id = self.store.insert(document)
        logger.info("Created book %s (%s)", document["id"], storage_id)
        return Book(**document)

    def update_book(self, book_id: str, data: BookPayload) -> None:
        """Set the non‑empty fields of ``data`` on the book ``book_id``.

        An empty string leaves the field unchanged, so a field can never
        be cleared through this operation.  The ``id`` in ``data`` is
        ignored.  Raises ``NotFoundError`` for an unknown ``book_id``.
        """
        fields = data.changed_fields()
        if fields:
            matched = self.store.update_fields(book_id, fields)
        else:
            # MongoDB rejects an empty $set; only check that the book exists.
            matched = self.store.count_matching({"id": book_id})
        if not matched:
            raise NotFoundError(f"book {book_id} not found")
        logger.info("Updated book %s: %s", book_id, ", ".join(sorted(fields)) or "no changes")

    def delete_book(self, book_id: str) -> None:
        """Delete the book ``book_id``; raise ``NotFoundError`` if there is none."""
        if not self.store.delete(book_id):
            raise NotFoundError(f"book {book_id} not found")
        logger.info("Deleted book %s", book_id)
