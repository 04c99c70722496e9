"""
MongoDB integration for the book collection.

This module provides the collection bootstrapper
(``prepare_collection``), the startup routine that prepares the
collection and loads the starter books (``init_db``), the
``BookStore`` storage abstraction used by the services, and the
FastAPI dependency that hands the store to request handlers.

The store is created once at startup and kept on ``app.state``; no
module in the package holds a global collection handle.  Every
operation issued through ``BookStore`` runs under its own pymongo
deadline and driver failures surface as ``StoreError``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

import pymongo
from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from .config import Settings
from .errors import BootstrapError, ConflictError, StoreError

logger = logging.getLogger(__name__)


def connect(settings: Settings) -> MongoClient:
    """Create a driver client for ``settings.mongo_uri``.

    The client connects lazily; server selection is bounded by the
    startup deadline so an unreachable server fails ``init_db``
    instead of hanging.
    """
    timeout_ms = int(settings.connect_timeout_seconds * 1000)
    try:
        return MongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except PyMongoError as exc:
        raise BootstrapError(f"invalid MongoDB configuration: {exc}") from exc


def prepare_collection(client: Any, database_name: str, collection_name: str) -> Collection:
    """Make sure ``collection_name`` exists in ``database_name`` and return it.

    The collection is created only when it is missing from the
    database listing, so calling this repeatedly is harmless.  Any
    driver error is raised as ``BootstrapError``.
    """
    if not database_name or not collection_name:
        raise BootstrapError("database and collection names must be non-empty")

    db = client[database_name]
    try:
        names = db.list_collection_names()
        if collection_name not in names:
            db.create_collection(collection_name)
            logger.info("Created collection %s.%s", database_name, collection_name)
        else:
            logger.info("Using existing collection %s.%s", database_name, collection_name)
    except PyMongoError as exc:
        raise BootstrapError(f"cannot prepare collection {collection_name}: {exc}") from exc
    return db[collection_name]


class BookStore:
    """Find, insert, update, delete and count book documents.

    Parameters
    ----------
    collection : Collection
        The collection holding the books.
    timeout : float
        Deadline in seconds applied to each individual store call.
    """

    def __init__(self, collection: Collection, timeout: float = 5.0) -> None:
        self.collection = collection
        self.timeout = timeout

    def _deadline(self):
        return pymongo.timeout(self.timeout)

    def find_all(self) -> List[Dict[str, Any]]:
        """Return every document in the collection in scan order."""
        return self.find_matching({})

    def find_matching(self, filter_: Mapping[str, Any]) -> List[Dict[str, Any]]:
        """Return the documents whose fields equal the given values."""
        try:
            with self._deadline():
                return list(self.collection.find(dict(filter_)))
        except PyMongoError as exc:
            logger.error("find failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def count_matching(self, filter_: Mapping[str, Any]) -> int:
        try:
            with self._deadline():
                return self.collection.count_documents(dict(filter_))
        except PyMongoError as exc:
            logger.error("count failed: %s", exc)
            raise StoreError(str(exc)) from exc

    def insert(self, document: Mapping[str, Any]) -> str:
        """Insert a copy of ``document`` and return its storage id as hex.

        A unique index violation is reported as ``ConflictError``.
        """
        try:
            with self._deadline():
                result = self.collection.insert_one(dict(document))
        except DuplicateKeyError as exc:
            raise ConflictError("duplicate") from exc
        except PyMongoError as exc:
            logger.error("insert failed: %s", exc)
            raise StoreError(str(exc)) from exc
        return str(result.inserted_id)

    def update_fields(self, book_id: str, fields: Mapping[str, Any]) -> int:
        """Set ``fields`` on the book with logical id ``book_id``.

        Returns the number of matched documents (0 or 1).
        """
        try:
            with self._deadline():
                result = self.collection.update_one({"id": book_id}, {"$set": dict(fields)})
        except PyMongoError as exc:
            logger.error("update of %s failed: %s", book_id, exc)
            raise StoreError(str(exc)) from exc
        return result.matched_count

    def delete(self, book_id: str) -> int:
        """Delete the book with logical id ``book_id``; return the deleted count."""
        try:
            with self._deadline():
                result = self.collection.delete_one({"id": book_id})
        except PyMongoError as exc:
            logger.error("delete of %s failed: %s", book_id, exc)
            raise StoreError(str(exc)) from exc
        return result.deleted_count

    def ensure_unique_ids(self) -> None:
        """Create a unique index on the logical ``id`` field."""
        try:
            with self._deadline():
                self.collection.create_index("id", unique=True, name="unique_book_id")
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc


def init_db(client: Any, settings: Settings) -> BookStore:
    """Prepare the collection, load the starter books and return the store.

    Everything runs under the startup deadline.  Failures are raised as
    ``BootstrapError`` so the caller can abort startup.
    """
    from .seed import seed_books

    with pymongo.timeout(settings.connect_timeout_seconds):
        collection = prepare_collection(client, settings.database_name, settings.collection_name)
        store = BookStore(collection, timeout=settings.request_timeout_seconds)
        if settings.unique_book_ids:
            try:
                store.ensure_unique_ids()
            except StoreError as exc:
                raise BootstrapError(f"cannot create unique index on id: {exc}") from exc
        if settings.seed_data:
            seed_books(store)
    return store


def get_book_store(request: Request) -> BookStore:
    """FastAPI dependency returning the store created at startup."""
    store: Optional[BookStore] = getattr(request.app.state, "book_store", None)
    if store is None:
        raise StoreError("book store is not initialised")
    return store
