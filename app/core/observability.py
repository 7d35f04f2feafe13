# app/core/observability.py
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.logging import get_logger

log = get_logger("obs")

REQUEST_ID_HEADER = "X-Request-ID"


class ObservabilityMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id and writes one access line per request.
    Bodies are never logged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        req_id = str(uuid.uuid4())
        start = time.perf_counter()

        # Make request id accessible downstream
        request.state.request_id = req_id

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "-"

        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers[REQUEST_ID_HEADER] = req_id
            return response
        except Exception:
            log.exception(
                "unhandled_error %s %s",
                method,
                path,
                extra={"req_id": req_id, "method": method, "path": path, "client_ip": client_ip},
            )
            raise
        finally:
            dur_ms = round((time.perf_counter() - start) * 1000, 2)
            log.info(
                "http_request %s %s -> %s (%sms)",
                method,
                path,
                status,
                dur_ms,
                extra={
                    "req_id": req_id,
                    "method": method,
                    "path": path,
                    "status": status,
                    "duration_ms": dur_ms,
                    "client_ip": client_ip,
                },
            )
