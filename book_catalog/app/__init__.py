"""
Application package initializer.

The service is split into a few small layers: ``core`` (settings,
logging, the MongoDB store and startup seeding), ``schemas`` (pydantic
models), ``services`` (catalog reads and mutations), ``api`` (the JSON
routes) and ``web`` (server‑rendered pages).
"""

from .main import app  # noqa: F401
