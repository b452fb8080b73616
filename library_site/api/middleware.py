"""
FastAPI Middleware

Request ID propagation and request logging.
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from library_site.core.logger import clear_request_id, get_logger, set_request_id

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every API request with its status and duration.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.time()
        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        request_id = getattr(request.state, "request_id", "unknown")

        logger.debug("Request: %s %s from %s [%s]", method, path, client_ip, request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed: %s %s - %s (%.3fs) [%s]",
                method,
                path,
                str(e),
                time.time() - start_time,
                request_id,
                exc_info=True,
            )
            raise

        duration = time.time() - start_time
        if response.status_code >= 500:
            log = logger.error
        elif response.status_code >= 400:
            log = logger.warning
        else:
            log = logger.info
        log(
            "%s %s - %d (%.3fs) [%s]",
            method,
            path,
            response.status_code,
            duration,
            request_id,
        )
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle request ID generation and propagation.

    Reads X-Request-ID from request headers or generates a new UUID, stores
    it in request.state and the logging context, and echoes it back.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_id()

        response.headers["X-Request-ID"] = request_id
        return response
