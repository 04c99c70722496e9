"""
Book endpoints of the JSON API.

These routes expose the catalog under ``/api/books``:

* ``GET /api/books`` – list every book with all fields.
* ``POST /api/books`` – create a book (201, or 409 for a duplicate).
* ``PUT /api/books/{book_id}`` – partial update (200 with empty body).
* ``DELETE /api/books/{book_id}`` – delete (200 with empty body).

Malformed bodies are answered with 400 by the handler registered in
``main``.  Handlers are plain functions; FastAPI runs them in its
thread pool because the store calls are blocking.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from book_catalog.app.api.deps import get_book_service, get_query_service
from book_catalog.app.core.errors import ConflictError, NotFoundError
from book_catalog.app.schemas.book import Book, BookPayload
from book_catalog.app.services.book_query_service import BookQueryService
from book_catalog.app.services.book_service import BookService

router = APIRouter()


@router.get("", response_model=List[Book])
def list_books(service: BookQueryService = Depends(get_query_service)) -> List[Book]:
    """Return every book in the collection, in store order."""
    return service.list_books_api()


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book_in: BookPayload,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a book.

    A missing ``id`` is generated.  Returns HTTP 409 when a book with
    identical fields already exists.
    """
    try:
        return service.create_book(book_in)
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.put("/{book_id}")
def update_book(
    book_id: str,
    book_in: BookPayload,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Update the non‑empty fields of a book; 404 if the id is unknown."""
    try:
        service.update_book(book_id, book_in)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found id")
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{book_id}")
def delete_book(
    book_id: str,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book; 404 if the id is unknown."""
    try:
        service.delete_book(book_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found id")
    return Response(status_code=status.HTTP_200_OK)
