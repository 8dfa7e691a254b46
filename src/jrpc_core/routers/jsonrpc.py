"""
JSON-RPC 2.0 API Router

FastAPI binding for the JSON-RPC extractor: a dependency that turns the
request body into a JsonRpcExtractor, an exception handler that answers
rejected envelopes, and a router factory that runs a dispatch callable.
"""

import inspect
from collections.abc import Awaitable, Callable
from typing import Union

import structlog
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from jrpc_core.middleware import RESPONSE_COUNT
from jrpc_core.models.errors import JsonRpcError, JsonRpcErrorReason
from jrpc_core.models.jsonrpc import DEFAULT_ID, JsonRpcResponse
from jrpc_core.services.extractor import JsonRpcExtractor

logger = structlog.get_logger()

# Application dispatch: maps a request handle to its response, sync or async
Dispatcher = Callable[
    [JsonRpcExtractor],
    Union[JsonRpcResponse, Awaitable[JsonRpcResponse]],
]


class JsonRpcRejection(Exception):
    """Raised by the request dependency when the envelope is rejected."""

    def __init__(self, response: JsonRpcResponse) -> None:
        super().__init__(str(response.answer.error))
        self.response = response


def render_response(response: JsonRpcResponse) -> JSONResponse:
    """Render a JSON-RPC response as an HTTP 200 JSON body."""
    RESPONSE_COUNT.labels(outcome="success" if response.is_success else "error").inc()
    return JSONResponse(content=response.to_wire())


def is_json_content_type(content_type: str) -> bool:
    """Accept application/json and application/*+json media types."""
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or (
        mime.startswith("application/") and mime.endswith("+json")
    )


async def jsonrpc_request(request: Request) -> JsonRpcExtractor:
    """
    FastAPI dependency extracting a JSON-RPC request from the body.

    Raises:
        JsonRpcRejection: If the body is not a valid JSON-RPC 2.0 request
    """
    if not is_json_content_type(request.headers.get("content-type", "")):
        logger.warning(
            "Request rejected for content type",
            content_type=request.headers.get("content-type"),
        )
        raise JsonRpcRejection(
            JsonRpcResponse.error(
                DEFAULT_ID,
                JsonRpcError.new(
                    JsonRpcErrorReason.INVALID_REQUEST,
                    "Expected request with `Content-Type: application/json`",
                ),
            )
        )

    body = await request.body()
    handle = JsonRpcExtractor.from_raw(body)
    if isinstance(handle, JsonRpcResponse):
        raise JsonRpcRejection(handle)
    return handle


async def jsonrpc_rejection_handler(request: Request, exc: JsonRpcRejection) -> JSONResponse:
    return render_response(exc.response)


def install_exception_handlers(app: FastAPI) -> None:
    """Answer rejected envelopes with their error response."""
    app.add_exception_handler(JsonRpcRejection, jsonrpc_rejection_handler)


def create_router(dispatch: Dispatcher, path: str = "/jsonrpc") -> APIRouter:
    """
    Create a router serving one JSON-RPC endpoint.

    Args:
        dispatch: Application dispatch callable, sync or async
        path: Endpoint path

    Returns:
        Router with a POST endpoint at ``path``
    """
    router = APIRouter()

    @router.post(path, summary="JSON-RPC 2.0 Endpoint")
    async def jsonrpc_endpoint(
        handle: JsonRpcExtractor = Depends(jsonrpc_request),
    ) -> JSONResponse:
        request_id = handle.get_answer_id()
        logger.info("Processing JSON-RPC request", method=handle.method, request_id=request_id)

        try:
            response = dispatch(handle)
            if inspect.isawaitable(response):
                response = await response
            if not isinstance(response, JsonRpcResponse):
                raise TypeError(
                    f"Dispatch returned {type(response).__name__}, expected JsonRpcResponse"
                )
        except Exception as e:
            logger.error(
                "Method execution failed",
                method=handle.method,
                request_id=request_id,
                error=str(e),
                exc_info=True,
            )
            response = JsonRpcResponse.error(
                request_id,
                JsonRpcError.new(JsonRpcErrorReason.INTERNAL_ERROR, str(e)),
            )

        return render_response(response)

    return router
