"""
HTTP Middleware

Request tracing and Prometheus metrics for the JSON-RPC HTTP binding.
"""

import time
import uuid
from collections.abc import Callable

import structlog
from fastapi import FastAPI, Request, Response
from prometheus_client import Counter, Histogram

logger = structlog.get_logger()

# Prometheus metrics
REQUEST_COUNT = Counter(
    "jrpc_http_requests_total",
    "Total number of HTTP requests",
    ["method", "endpoint", "status_code"],
)

REQUEST_DURATION = Histogram(
    "jrpc_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
)

RESPONSE_COUNT = Counter(
    "jrpc_responses_total",
    "JSON-RPC responses by outcome",
    ["outcome"],
)


def setup_middleware(app: FastAPI, enable_metrics: bool = True) -> None:
    """Setup all middleware for the application."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next: Callable) -> Response:
        """Add structured logging and request tracing."""
        trace_id = str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            trace_id=trace_id,
            http_method=request.method,
            path=request.url.path,
        )

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                error=str(exc),
                duration=time.time() - start_time,
                exc_info=True,
            )
            raise

        logger.info(
            "Request completed",
            status_code=response.status_code,
            duration=time.time() - start_time,
        )
        response.headers["X-Trace-ID"] = trace_id
        return response

    if enable_metrics:

        @app.middleware("http")
        async def metrics_middleware(request: Request, call_next: Callable) -> Response:
            """Collect Prometheus metrics."""
            start_time = time.time()
            status_code = 500

            try:
                response = await call_next(request)
                status_code = response.status_code
                return response
            finally:
                REQUEST_COUNT.labels(
                    method=request.method,
                    endpoint=request.url.path,
                    status_code=status_code,
                ).inc()
                REQUEST_DURATION.labels(
                    method=request.method, endpoint=request.url.path
                ).observe(time.time() - start_time)
