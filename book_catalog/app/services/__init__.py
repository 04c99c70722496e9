"""
Service layer abstraction.

Services encapsulate the catalog logic and talk to MongoDB only
through the ``BookStore`` they are constructed with, so handlers can
be tested against any store.
"""
