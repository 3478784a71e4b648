"""
Main entrypoint for the Jokes API.

This module assembles the FastAPI application: logging, CORS and
access log middleware, the error handler for ``JokesAPIError`` and
the routers.  The ``create_app`` function builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn jokes_api.app.main:app --port 4000

Interactive documentation is served at ``/api-docs`` and the OpenAPI
document at ``/api-docs/api.json``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import AccessLogMiddleware, setup_logging
from .services.joke_service import JokeStore

OPENAPI_TAGS = [
    {"name": "Jokes", "description": "The joke-management API"},
    {"name": "Misc", "description": "An assortment of other end-points for testing and exploration"},
]


def create_app(store: Optional[JokeStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[JokeStore]
        Store to serve.  When omitted a store is seeded from
        ``settings.seed_file``.
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        openapi_tags=OPENAPI_TAGS,
        docs_url="/api-docs",
        openapi_url="/api-docs/api.json",
        redoc_url=None,
    )

    # One store per application; handlers reach it through get_joke_store.
    app.state.joke_store = store if store is not None else JokeStore.from_file(settings.seed_file)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AccessLogMiddleware)
    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "%s listening on port %s with %d jokes",
            settings.project_name,
            settings.port,
            len(app.state.joke_store),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
