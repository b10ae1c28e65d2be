"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application: it sets up logging,
attaches the record store, registers the error handlers and includes
the API router.  The application is instantiated at import time as
``app`` so it can be served directly::

    uvicorn user_registry_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.cache import InMemoryObjectCache, ObjectCache
from .core.config import Settings, settings as default_settings
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging


def create_app(
    settings: Optional[Settings] = None,
    user_cache: Optional[ObjectCache] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    user_cache : Optional[ObjectCache]
        Record store for users.  A fresh ``InMemoryObjectCache`` is
        created when omitted, so every app gets its own store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.user_cache = user_cache if user_cache is not None else InMemoryObjectCache()

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
