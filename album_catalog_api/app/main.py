"""
Main entrypoint for the Album Catalog API.

This module assembles the FastAPI application, sets up logging,
attaches the in‑memory album catalog and includes versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn album_catalog_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.album_service import AlbumService


logger = logging.getLogger(__name__)


async def invalid_payload_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer unreadable or invalid request bodies with a 400.

    Only the location and message of each error are echoed back; the
    raw input and exception context are left out of the response.
    """
    errors = [{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()]
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"msg": "Invalid album payload", "errors": errors},
    )


def create_app(album_service: Optional[AlbumService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    album_service : Optional[AlbumService]
        Catalog to serve.  When omitted a new catalog holding the seed
        albums is created, so every application starts from the same
        state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.album_service = album_service if album_service is not None else AlbumService()
    app.add_exception_handler(RequestValidationError, invalid_payload_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("Album catalog ready with %d albums", len(app.state.album_service))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
