"""
Request logging

One access-log line per request with a correlation id echoed back as
X-Request-Id. Headers and bodies are never logged: they carry the session
cookie and passwords.
"""

import logging
import time
from uuid import uuid4

from fastapi import FastAPI, Request

access_logger = logging.getLogger("xenia.access")

SKIP_PATHS = {"/health"}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="[%(asctime)s] %(levelname)s in %(name)s: %(message)s",
    )


def install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if request.url.path in SKIP_PATHS:
            return await call_next(request)

        request_id = request.headers.get("X-Request-Id") or uuid4().hex
        request.state.request_id = request_id
        start = time.perf_counter()

        response = None
        try:
            response = await call_next(request)
            response.headers["X-Request-Id"] = request_id
            return response
        finally:
            # An exception escaping the app is answered with a 500 further out
            status_code = response.status_code if response is not None else 500
            latency_ms = (time.perf_counter() - start) * 1000
            client_ip = request.headers.get("X-Forwarded-For")
            if not client_ip and request.client is not None:
                client_ip = request.client.host

            access_logger.info(
                "%s %s %s %.2fms ip=%s request_id=%s",
                request.method,
                request.url.path,
                status_code,
                latency_ms,
                client_ip,
                request_id,
            )
