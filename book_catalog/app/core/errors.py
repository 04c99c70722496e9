"""
Exceptions raised by the storage and service layers.

Services raise these instead of ``HTTPException`` so that they stay
independent from the web framework; the API and page handlers map
them onto HTTP status codes.
"""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class ConflictError(CatalogError):
    """A book with exactly the same fields already exists."""


class NotFoundError(CatalogError):
    """No book carries the requested logical identifier."""


class StoreError(CatalogError):
    """A document store operation failed."""


class BootstrapError(CatalogError):
    """The collection could not be prepared or the seed data is inconsistent.

    Raised during startup only; the application must not start serving
    when this happens.
    """
