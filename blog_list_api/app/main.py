"""
Main entrypoint for the Blog List API.

This module assembles the FastAPI application, sets up logging and
includes the API router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn blog_list_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request

from .api.router import router as api_router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.blog_service import BlogService
from .stores import BlogStore, build_store


def create_app(store: Optional[BlogStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[BlogStore]
        Document store the blog service works against.  When omitted,
        the backend named by ``settings.blog_store`` is used.  Tests
        pass an isolated store here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    if store is None:
        store = build_store(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.blog_service = BlogService(store)

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception("%s %s 500 %.1fms", request.method, request.url.path, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s %s %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.on_event("startup")
    async def startup_event() -> None:
        store.init()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
