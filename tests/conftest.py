"""Shared fixtures for the album catalog tests."""

import pytest
from fastapi.testclient import TestClient

from album_catalog_api.app.main import create_app
from album_catalog_api.app.schemas.album import Album
from album_catalog_api.app.services.album_service import AlbumService


@pytest.fixture
def service():
    """A catalog holding the three seed albums."""
    return AlbumService()


@pytest.fixture
def client():
    """A test client bound to a freshly created application."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def new_album():
    return Album(id="4", title="4:44", artist="Jay-Z", price=9.99)
