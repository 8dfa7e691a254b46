"""JSON-RPC 2.0 protocol models."""

from jrpc_core.models.errors import (
    ErrorReason,
    JsonRpcError,
    JsonRpcErrorReason,
    ServerError,
    error_code,
    reason_from_code,
)
from jrpc_core.models.jsonrpc import (
    DEFAULT_ID,
    JSONRPC_VERSION,
    JsonRpcAnswer,
    JsonRpcFailure,
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcSuccess,
    describe_validation_error,
)

__all__ = [
    "DEFAULT_ID",
    "JSONRPC_VERSION",
    "ErrorReason",
    "JsonRpcAnswer",
    "JsonRpcError",
    "JsonRpcErrorReason",
    "JsonRpcFailure",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcSuccess",
    "ServerError",
    "describe_validation_error",
    "error_code",
    "reason_from_code",
]
