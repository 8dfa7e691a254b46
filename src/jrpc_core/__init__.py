"""
JSON-RPC 2.0 request validation and response envelopes.

Parse an inbound request into a JsonRpcExtractor, decode its params into the
shape a method expects, and answer with a JsonRpcResponse.
"""

__version__ = "0.1.0"

from jrpc_core.models.errors import (  # noqa: E402
    ErrorReason,
    JsonRpcError,
    JsonRpcErrorReason,
    ServerError,
)
from jrpc_core.models.jsonrpc import JsonRpcRequest, JsonRpcResponse  # noqa: E402
from jrpc_core.services.extractor import JsonRpcExtractor  # noqa: E402

__all__ = [
    "ErrorReason",
    "JsonRpcError",
    "JsonRpcErrorReason",
    "JsonRpcExtractor",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "ServerError",
    "__version__",
]
