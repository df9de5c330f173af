# =============================================================================
# app/middleware.py - Request Middleware
# =============================================================================
# - log_requests: logs method and path of every incoming request
# - time_requests: measures handling time and logs it with the status code
# =============================================================================

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    """Log each request as it arrives."""
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


async def time_requests(request: Request, call_next):
    """Log how long the request took once a response is produced."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)"
    )
    return response


def register_middleware(app: FastAPI) -> None:
    """
    Attach the request middleware to an app.

    Starlette runs the last registered middleware first, so the timer is
    added before the logger to make the logger run outermost.
    """
    app.middleware("http")(time_requests)
    app.middleware("http")(log_requests)
