"""
Main entrypoint for the ERP API.

This module assembles the FastAPI application, sets up logging, error
handlers and the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn erp_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from typing import Any, Dict

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging first so that everything below can log, then
    installs the JSON error handlers and mounts the domain routers
    under ``/api``.
    """
    setup_logging(settings.log_level, settings.log_file or None, debug=settings.debug)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api")

    @app.get("/api/health", tags=["health"])
    async def health() -> Dict[str, Any]:
        return {"status": "ok", "name": settings.project_name, "version": settings.api_version}

    return app


app = create_app()
