"""
Main entrypoint for the Pokedex API.

``create_app`` configures logging, seeds the record store, registers
the routers and installs the exception handlers that keep every error
in the ``{"message": ..., "id": ...}`` shape.  The module-level
``app`` is what uvicorn serves::

    uvicorn pokedex_api.app.main:app --port 3000
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.deps import MalformedBodyError
from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import PokedexStore
from .services import responses

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map framework and decoding errors onto the service's JSON payloads."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # A known path hit with the wrong method is reported like any
        # other unmatched route.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            return responses.render(responses.not_found(), request.method)
        shaped = responses.ShapedResponse(exc.status_code, {"message": str(exc.detail), "id": "error"})
        return responses.render(shaped, request.method)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        names = [str(error["loc"][-1]) for error in exc.errors() if error.get("loc")]
        return responses.render(responses.invalid_fields(names), request.method)

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return responses.render(responses.malformed_body(), request.method)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error while serving %s %s", request.method, request.url.path)
        return responses.render(responses.internal_error(), request.method)


def create_app(store: Optional[PokedexStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[PokedexStore]
        Record store to serve.  When omitted, a store is seeded from
        ``settings.data_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    # ``/docs`` is the hand-written reference page, so FastAPI's
    # interactive docs are switched off.
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=None,
        redoc_url=None,
    )
    app.state.store = store if store is not None else PokedexStore.from_file(settings.data_path)

    app.include_router(router)
    register_exception_handlers(app)
    return app


# Create the application instance at import time so that uvicorn can
# discover it without calling create_app manually.
app = create_app()
