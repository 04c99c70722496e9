"""
Pydantic schemas for books.

A book is stored as a single document holding the logical ``id`` and
five free‑text fields.  ``pages`` and ``year`` are kept as strings in
storage and over the wire; they are never parsed as numbers.

Each read view has its own fixed model so that pages and the JSON API
receive exactly the fields they need:

* ``BookListItem`` – page view of the book list (no ``year``).
* ``Book`` – full record returned by the JSON API.
* ``AuthorSummaryItem`` / ``YearSummaryItem`` – derived views grouped
  over the whole collection.
"""

from typing import Any, Dict, Mapping

from pydantic import BaseModel, Field

# Logical fields of a book document, in the order the API emits them.
BOOK_FIELDS = ("id", "title", "author", "pages", "edition", "year")
# Fields that a partial update may change.
UPDATABLE_FIELDS = ("title", "author", "edition", "pages", "year")


class BookPayload(BaseModel):
    """Request body for creating or updating a book.

    Every field is optional and defaults to an empty string.  Unknown
    keys are ignored; values that are not strings are rejected.
    """

    id: str = Field("", description="Logical identifier; generated on create when empty")
    title: str = ""
    author: str = ""
    edition: str = ""
    pages: str = Field("", description="Page count as free text")
    year: str = Field("", description="Publication year as free text")

    def to_document(self) -> Dict[str, str]:
        """Return the six book fields as a storage document."""
        return {name: getattr(self, name) for name in BOOK_FIELDS}

    def changed_fields(self) -> Dict[str, str]:
        """Return the updatable fields carrying a non-empty value."""
        return {name: getattr(self, name) for name in UPDATABLE_FIELDS if getattr(self, name)}


class Book(BaseModel):
    """A book as exposed by the JSON API."""

    id: str
    title: str = ""
    author: str = ""
    pages: str = ""
    edition: str = ""
    year: str = ""


class BookListItem(BaseModel):
    """A book as listed on the books page."""

    id: str
    title: str = ""
    author: str = ""
    edition: str = ""
    pages: str = ""


class AuthorSummaryItem(BaseModel):
    """One distinct author with the number of books attributed to them.

    ``id`` is the storage id of the first book by the author met while
    scanning the collection; it is not a stable key.
    """

    id: str
    author: str
    amountbooks: int


class YearSummaryItem(BaseModel):
    """One distinct publication year."""

    id: str
    year: str


class StoredBook(BaseModel):
    """A book document as read from the store, including its storage id."""

    storage_id: str
    id: str = ""
    title: str = ""
    author: str = ""
    edition: str = ""
    pages: str = ""
    year: str = ""

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "StoredBook":
        """Build a ``StoredBook`` from a raw document.

        Missing fields read as empty strings so that documents written
        by other tools do not break the listing.
        """
        values = {name: str(doc.get(name) or "") for name in BOOK_FIELDS}
        return cls(storage_id=str(doc.get("_id", "")), **values)

    def to_book(self) -> Book:
        return Book(**{name: getattr(self, name) for name in BOOK_FIELDS})

    def to_list_item(self) -> BookListItem:
        return BookListItem(
            id=self.id,
            title=self.title,
            author=self.author,
            edition=self.edition,
            pages=self.pages,
        )
