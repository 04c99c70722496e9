"""
Service layer for reading the catalog.

All operations scan the whole collection; there is no filtering or
pagination.  Results follow the store's scan order, which MongoDB does
not guarantee to be stable, so callers must not rely on any sorting.

The authors and years views are derived on every call by grouping the
scanned books; nothing is cached.  Their ``id`` is the storage id of
the first book of each group met during the scan and is only a
best‑effort link back to a stored document.
"""

from __future__ import annotations

from typing import Dict, List

from book_catalog.app.core.db import BookStore
from book_catalog.app.schemas.book import (
    AuthorSummaryItem,
    Book,
    BookListItem,
    StoredBook,
    YearSummaryItem,
)


class BookQueryService:
    """Read‑only projections over the book collection."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def _scan(self) -> List[StoredBook]:
        return [StoredBook.from_document(doc) for doc in self.store.find_all()]

    def list_books(self) -> List[BookListItem]:
        """Return every book as shown on the books page (without ``year``)."""
        return [book.to_list_item() for book in self._scan()]

    def list_books_api(self) -> List[Book]:
        """Return every book with all of its logical fields."""
        return [book.to_book() for book in self._scan()]

    def list_authors(self) -> List[AuthorSummaryItem]:
        """Return one row per distinct author with the number of their books.

        Authors are compared with exact string equality.  Rows appear in
        the order in which each author is first met.
        """
        groups: Dict[str, AuthorSummaryItem] = {}
        for book in self._scan():
            item = groups.get(book.author)
            if item is None:
                groups[book.author] = AuthorSummaryItem(
                    id=book.storage_id, author=book.author, amountbooks=1
                )
            else:
                item.amountbooks += 1
        return list(groups.values())

    def list_years(self) -> List[YearSummaryItem]:
        """Return one row per distinct year, in first‑occurrence order."""
        years: Dict[str, YearSummaryItem] = {}
        for book in self._scan():
            if book.year not in years:
                years[book.year] = YearSummaryItem(id=book.storage_id, year=book.year)
        return list(years.values())
