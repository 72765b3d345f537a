"""
Main entrypoint for the Announcement Board.

``create_app`` assembles the FastAPI application: logging, CORS, the
JSON error format, the API routers, the two HTML pages and the static
asset mount.  The application instance is created at import time as
``app`` so it can be served directly, e.g.::

    uvicorn announcement_board.app.main:app --port 3000

Errors are always returned as ``{"error": "<message>"}``.  Storage
failures are logged and reported as a generic 500 response; the
process keeps serving requests.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import pages
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.storage import AnnouncementStore, StorageError

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application whose store is available as
        ``app.state.store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = AnnouncementStore(settings.get_data_path())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Only a body that is not valid JSON gets here; see AnnouncementInput.
        logger.info("Rejected request body on %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    app.include_router(api_router, prefix="/api")
    app.include_router(pages.router)

    # Remaining files of the static directory are served from the site
    # root.  Mounted last so API routes and pages take precedence.
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the data directory and seed the document on first start.
        app.state.store.initialize()
        logger.info("Serving announcements from %s", app.state.store.path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
