"""JSON-RPC request handling services."""

from jrpc_core.services.extractor import JsonRpcExtractor

__all__ = ["JsonRpcExtractor"]
