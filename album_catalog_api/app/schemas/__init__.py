"""
Pydantic schema definitions for API payloads.

The catalog has a single entity, the album, whose schema doubles as the
request body for create/update and as the response model.  Error
payloads have their own schemas so they show up in the OpenAPI
document.
"""
