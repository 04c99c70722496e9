"""
API package containing the JSON routes.

``router`` aggregates the resource routers defined in ``endpoints``;
``deps`` provides the dependencies that bind services to the store.
"""
