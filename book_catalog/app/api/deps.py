"""FastAPI dependency implementations."""

from fastapi import Depends

from book_catalog.app.core.db import BookStore, get_book_store
from book_catalog.app.services.book_query_service import BookQueryService
from book_catalog.app.services.book_service import BookService


def get_query_service(store: BookStore = Depends(get_book_store)) -> BookQueryService:
    """Get a query service bound to the application's book store."""
    return BookQueryService(store)


def get_book_service(store: BookStore = Depends(get_book_store)) -> BookService:
    """Get a mutation service bound to the application's book store."""
    return BookService(store)
