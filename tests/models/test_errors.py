"""
Tests for the JSON-RPC error taxonomy.

Validates the fixed code mapping, application-defined reasons and the error
object shape.
"""

import pytest

from jrpc_core.models.errors import (
    JsonRpcError,
    JsonRpcErrorReason,
    ServerError,
    error_code,
    reason_from_code,
)


class TestErrorCodes:
    """Test reason to code mapping."""

    @pytest.mark.parametrize(
        "reason,code",
        [
            (JsonRpcErrorReason.INVALID_REQUEST, -32600),
            (JsonRpcErrorReason.METHOD_NOT_FOUND, -32601),
            (JsonRpcErrorReason.INVALID_PARAMS, -32602),
            (JsonRpcErrorReason.INTERNAL_ERROR, -32603),
            (JsonRpcErrorReason.PARSE_ERROR, -32700),
        ],
    )
    def test_standard_codes(self, reason, code):
        assert error_code(reason) == code
        assert reason_from_code(code) is reason

    def test_every_reason_has_a_code(self):
        codes = [error_code(reason) for reason in JsonRpcErrorReason]
        assert len(set(codes)) == len(JsonRpcErrorReason)

    def test_server_error_uses_own_code(self):
        assert error_code(ServerError(-32001)) == -32001

    def test_unknown_code_resolves_to_server_error(self):
        assert reason_from_code(-32050) == ServerError(-32050)

    def test_server_error_rejects_reserved_code(self):
        with pytest.raises(ValueError, match="reserved"):
            ServerError(-32601)


class TestJsonRpcError:
    """Test the error object."""

    def test_new_standard_reason(self):
        error = JsonRpcError.new(JsonRpcErrorReason.INVALID_PARAMS, "bad params")
        assert error.model_dump() == {"code": -32602, "message": "bad params", "data": None}
        assert error.reason is JsonRpcErrorReason.INVALID_PARAMS

    def test_new_application_reason_with_data(self):
        error = JsonRpcError.new(ServerError(-32010), "Quota exceeded", {"limit": 10})
        assert error.code == -32010
        assert error.data == {"limit": 10}
        assert error.reason == ServerError(-32010)

    def test_data_accepts_any_value(self):
        error = JsonRpcError.new(JsonRpcErrorReason.INTERNAL_ERROR, "boom", ["a", 1])
        assert error.data == ["a", 1]

    def test_str(self):
        error = JsonRpcError.new(JsonRpcErrorReason.METHOD_NOT_FOUND, "Method not found")
        assert str(error) == "[-32601] Method not found"
