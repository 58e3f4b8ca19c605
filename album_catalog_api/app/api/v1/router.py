"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import albums

router = APIRouter()

# The album routes declare "" and "/{album_id}" so that the collection
# is served at exactly ``/albums`` without a trailing slash.
router.include_router(albums.router, prefix="/albums", tags=["albums"])
