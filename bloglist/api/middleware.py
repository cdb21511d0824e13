# Standard library imports
import logging
import time

# External package imports
from fastapi import FastAPI, Request

logger = logging.getLogger("bloglist.requests")


def register_request_logger(app: FastAPI) -> None:
    """Log method, path, status and duration of every request (never the body)"""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
        )
        return response
