"""
Top‑level router for the JSON API.

This router aggregates the domain routers under the ``/api`` prefix
applied in ``main``.  When new resources are added, include their
routers here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
