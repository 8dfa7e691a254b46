"""
JSON-RPC Service - FastAPI Application

Application factory wiring the JSON-RPC router, middleware, health and
metrics endpoints around an application dispatch callable.
"""

import structlog
from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from jrpc_core import __version__
from jrpc_core.config import Settings, settings
from jrpc_core.logging import configure_logging
from jrpc_core.middleware import setup_middleware
from jrpc_core.models.jsonrpc import JsonRpcResponse
from jrpc_core.routers import health
from jrpc_core.routers.jsonrpc import Dispatcher, create_router, install_exception_handlers
from jrpc_core.services.extractor import JsonRpcExtractor

logger = structlog.get_logger()


def default_dispatch(req: JsonRpcExtractor) -> JsonRpcResponse:
    """Built-in methods: ``add`` sums two integers, ``ping`` answers "pong"."""
    request_id = req.get_answer_id()
    method = req.method

    if method == "add":
        params = req.parse_params(tuple[int, int])
        if isinstance(params, JsonRpcResponse):
            return params
        return JsonRpcResponse.success(request_id, params[0] + params[1])

    if method == "ping":
        return JsonRpcResponse.success(request_id, "pong")

    return req.method_not_found(method)


def create_app(
    dispatch: Dispatcher = default_dispatch,
    app_settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL, app_settings.LOG_JSON)

    app = FastAPI(
        title="JSON-RPC 2.0 Service",
        description="JSON-RPC 2.0 request validation and response envelopes over HTTP",
        version=__version__,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
    )

    setup_middleware(app, enable_metrics=app_settings.ENABLE_METRICS)
    install_exception_handlers(app)

    app.include_router(health.router, prefix=app_settings.API_PREFIX, tags=["health"])
    app.include_router(
        create_router(dispatch, app_settings.JSONRPC_PATH),
        prefix=app_settings.API_PREFIX,
        tags=["jsonrpc"],
    )

    if app_settings.ENABLE_METRICS:

        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    logger.info(
        "JSON-RPC service configured",
        endpoint=f"{app_settings.API_PREFIX}{app_settings.JSONRPC_PATH}",
        metrics=app_settings.ENABLE_METRICS,
    )
    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        create_app(),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=True,
    )
