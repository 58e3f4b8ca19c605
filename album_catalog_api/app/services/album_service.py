"""
Service layer for the album catalog.

``AlbumService`` owns the ordered in‑memory list of albums together
with the lock guarding it.  One instance is created per application
and handed to request handlers through a FastAPI dependency.

Lookups are linear, first match wins.  A miss is reported by returning
``None`` (or ``False`` for deletion) rather than raising, leaving it to
the caller to turn it into an HTTP response.  Duplicate ids are not
rejected on create, and the id carried by an update payload is not
compared with the id in the path.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from album_catalog_api.app.schemas.album import Album


logger = logging.getLogger(__name__)


SEED_ALBUMS: List[Album] = [
    Album(id="1", title="Taylor Allderdice", artist="Wiz Khalifa", price=10.99),
    Album(id="2", title="The College Dropout", artist="Kanye West", price=12.99),
    Album(id="3", title="Blueprint", artist="Jay-Z", price=11.99),
]


class AlbumService:
    """In‑memory album catalog with serialized access."""

    def __init__(self, albums: Optional[Iterable[Album]] = None) -> None:
        seed = SEED_ALBUMS if albums is None else albums
        self._albums: List[Album] = [album.model_copy() for album in seed]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._albums)

    def _index_of(self, album_id: str) -> int:
        # Caller must hold the lock.
        for index, album in enumerate(self._albums):
            if album.id == album_id:
                return index
        return -1

    def list_albums(self) -> List[Album]:
        """Return a snapshot of all albums in insertion order."""
        with self._lock:
            return [album.model_copy() for album in self._albums]

    def get_album(self, album_id: str) -> Optional[Album]:
        """Return the first album whose id equals ``album_id``, or ``None``."""
        with self._lock:
            index = self._index_of(album_id)
            if index < 0:
                logger.debug("Album %s not found", album_id)
                return None
            return self._albums[index].model_copy()

    def create_album(self, candidate: Album) -> Album:
        """Append ``candidate`` to the end of the catalog and return it."""
        stored = candidate.model_copy()
        with self._lock:
            self._albums.append(stored)
            size = len(self._albums)
        logger.info("Created album %s (catalog size %d)", stored.id, size)
        return stored.model_copy()

    def update_album(self, album_id: str, replacement: Album) -> Optional[Album]:
        """Replace the album matching ``album_id`` in place.

        The record keeps its position in the catalog.  Returns the stored
        replacement, or ``None`` if no album matched, in which case the
        catalog is left untouched.
        """
        stored = replacement.model_copy()
        with self._lock:
            index = self._index_of(album_id)
            if index < 0:
                logger.debug("Album %s not found for update", album_id)
                return None
            self._albums[index] = stored
        logger.info("Updated album %s", album_id)
        return stored.model_copy()

    def delete_album(self, album_id: str) -> bool:
        """Remove the album matching ``album_id``.

        The relative order of the remaining albums is preserved.  Returns
        ``True`` if an album was removed, ``False`` otherwise.
        """
        with self._lock:
            index = self._index_of(album_id)
            if index < 0:
                logger.debug("Album %s not found for deletion", album_id)
                return False
            del self._albums[index]
        logger.info("Deleted album %s", album_id)
        return True
