"""
FastAPI dependencies shared by the endpoint modules.

The album catalog lives on the application state rather than in a
module global, so every application instance built by ``create_app``
(including the ones created in tests) gets its own catalog.
"""

from fastapi import Request

from album_catalog_api.app.services.album_service import AlbumService


def get_album_service(request: Request) -> AlbumService:
    """Return the catalog attached to the running application."""
    return request.app.state.album_service
