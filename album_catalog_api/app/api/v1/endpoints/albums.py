"""
Album endpoints for API v1.

These routes expose a CRUD API over the in‑memory album catalog.  The
album identifier in the path is matched exactly (case‑sensitive)
against the ``id`` of stored albums.

A miss on ``GET /albums/{id}`` answers 404 with ``{"msg": "Album not
found"}``; misses on update and delete answer a bare 404 with an empty
body.  Malformed request bodies are turned into a 400 response by the
validation handler installed in ``main.py``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from album_catalog_api.app.core.dependencies import get_album_service
from album_catalog_api.app.schemas.album import Album, InvalidPayloadMessage, NotFoundMessage
from album_catalog_api.app.services.album_service import AlbumService

router = APIRouter()

NOT_FOUND_BODY = {"msg": "Album not found"}


@router.get("", response_model=List[Album])
async def list_albums(service: AlbumService = Depends(get_album_service)) -> List[Album]:
    """Return every album in the order it was added."""
    return service.list_albums()


@router.get(
    "/{album_id}",
    response_model=Album,
    responses={status.HTTP_404_NOT_FOUND: {"model": NotFoundMessage}},
)
async def get_album(album_id: str, service: AlbumService = Depends(get_album_service)):
    """Retrieve a single album by its identifier."""
    album = service.get_album(album_id)
    if album is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND_BODY)
    return album


@router.post(
    "",
    response_model=Album,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": InvalidPayloadMessage}},
)
async def create_album(album_in: Album, service: AlbumService = Depends(get_album_service)) -> Album:
    """Append a new album to the catalog and echo it back.

    Identifiers are not checked for uniqueness.
    """
    return service.create_album(album_in)


@router.put(
    "/{album_id}",
    response_model=Album,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": InvalidPayloadMessage},
        status.HTTP_404_NOT_FOUND: {"description": "Album not found"},
    },
)
async def update_album(
    album_id: str,
    album_in: Album,
    service: AlbumService = Depends(get_album_service),
):
    """Replace an existing album in place and echo the replacement."""
    album = service.update_album(album_id, album_in)
    if album is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return album


@router.delete(
    "/{album_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Album not found"}},
)
async def delete_album(album_id: str, service: AlbumService = Depends(get_album_service)) -> Response:
    """Delete an album by identifier."""
    if not service.delete_album(album_id):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
