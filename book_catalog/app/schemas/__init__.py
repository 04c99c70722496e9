"""
Pydantic schema definitions for API payloads and page views.

Schemas are separated from the stored documents to decouple the
external representation from persistence.
"""
