"""Shared fixtures: an in-memory MongoDB, a book store and app clients."""

from typing import Iterator

import mongomock
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from book_catalog.app.core.db import BookStore, prepare_collection
from book_catalog.app.main import create_app

from helpers import TEST_COLLECTION, TEST_DATABASE, make_settings


@pytest.fixture
def mongo_client() -> mongomock.MongoClient:
    return mongomock.MongoClient()


@pytest.fixture
def collection(mongo_client):
    return prepare_collection(mongo_client, TEST_DATABASE, TEST_COLLECTION)


@pytest.fixture
def store(collection) -> BookStore:
    return BookStore(collection, timeout=5)


@pytest.fixture
def app(mongo_client) -> FastAPI:
    return create_app(make_settings(), client=mongo_client)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(mongo_client) -> Iterator[TestClient]:
    app = create_app(make_settings(seed_data=True), client=mongo_client)
    with TestClient(app) as test_client:
        yield test_client
