"""
Main entrypoint for the Office Admin API.

This module assembles the FastAPI application: it sets up logging,
builds the entity store, installs the error handlers and includes the
versioned routers.  ``create_app`` builds and configures the app, which
is then instantiated at module import time as ``app``, so it can be run
with uvicorn or another ASGI server, e.g.::

    uvicorn office_admin_api.app.main:app --reload

Errors reach clients in one of three shapes:

* 400 ``{"detail": "Validation error", "errors": [...]}`` for request
  bodies or query parameters that do not match their schema;
* 404 ``{"detail": "... not found"}`` for unknown ids, including path ids
  that are not integers at all;
* 500 ``{"detail": "Internal server error"}`` for anything unexpected,
  which is logged with its traceback.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import Store
from .services.user_service import UserService


logger = logging.getLogger(__name__)


def _format_errors(exc: RequestValidationError) -> list:
    return [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors and all(error.get("loc", ("",))[0] == "path" for error in errors):
        # A path id that is not a number cannot match any record.
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Not found"})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": "Validation error", "errors": _format_errors(exc)}),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds a new, independent ``Store``, seeded with the
    default manager and ``admin`` user unless ``seed_data`` is off.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived module
        defaults.  Tests pass their own to redirect uploads.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )

    store = Store()
    if app_settings.seed_data:
        UserService.seed_defaults(store)
    app.state.store = store
    app.state.settings = app_settings

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(v1_router, prefix="/api")

    logger.info("%s %s ready", app_settings.project_name, app_settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
