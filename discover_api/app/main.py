"""
Main entrypoint for the discover server application.

This module assembles the FastAPI application.  ``create_app`` builds
a configured app owning exactly one ``DiscoveryStore``; a module level
``app`` is created at import time so that uvicorn can serve it
directly, e.g.::

    uvicorn discover_api.app.main:app --port 65001
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.http import RequestError, no_cache_http_exception_handler, request_error_handler
from .core.logging_config import setup_logging
from .services.discovery_store import DiscoveryStore


logger = logging.getLogger(__name__)


async def heartbeat(interval: float) -> None:
    """Log a liveness line every ``interval`` seconds until cancelled."""
    while True:
        await asyncio.sleep(interval)
        logger.info("Still running...")


def create_app(
    store: Optional[DiscoveryStore] = None,
    max_request_size: Optional[int] = None,
    heartbeat_interval: Optional[float] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[DiscoveryStore]
        Store served by the application.  A new empty store is created
        when omitted.
    max_request_size : Optional[int]
        Request body limit in bytes; defaults to
        ``settings.max_request_size``.
    heartbeat_interval : Optional[float]
        Seconds between liveness log lines; defaults to
        ``settings.heartbeat_interval``.  Zero disables them.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    if heartbeat_interval is None:
        heartbeat_interval = settings.heartbeat_interval

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        task = None
        if heartbeat_interval > 0:
            task = asyncio.create_task(heartbeat(heartbeat_interval))
        try:
            yield
        finally:
            if task is not None:
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    app.state.store = store if store is not None else DiscoveryStore()
    app.state.max_request_size = (
        max_request_size if max_request_size is not None else settings.max_request_size
    )

    app.include_router(router)
    app.add_exception_handler(RequestError, request_error_handler)
    app.add_exception_handler(StarletteHTTPException, no_cache_http_exception_handler)

    return app


app = create_app()
