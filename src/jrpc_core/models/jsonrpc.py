"""
JSON-RPC 2.0 Envelope Models

Strict request envelope and the untagged response envelope. The response
carries exactly one of ``result`` or ``error`` on the wire.
"""

from typing import Any, Dict, Literal, Union

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from jrpc_core.models.errors import (  # noqa: F401
    JsonRpcError,
    JsonRpcErrorReason,
    describe_validation_error,
    to_json_value,
)

logger = structlog.get_logger()

JSONRPC_VERSION = "2.0"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Id used when a request could not be decoded far enough to recover its own
DEFAULT_ID = 0


class JsonRpcRequest(BaseModel):
    """
    JSON-RPC 2.0 request envelope.

    All four members are required and nothing else is accepted. The protocol
    version is decoded as a plain string so a wrong version can still be
    answered with the request's own id.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    id: int = Field(..., ge=INT64_MIN, le=INT64_MAX, description="Request identifier")
    jsonrpc: str = Field(..., description="JSON-RPC version")
    method: str = Field(..., description="Method name to invoke")
    params: Any = Field(..., description="Method parameters, decoded lazily")

    @classmethod
    def parse(cls, raw: Union[str, bytes, Any]) -> "JsonRpcRequest":
        """
        Decode a request envelope.

        Args:
            raw: JSON text (str or bytes) or an already decoded value

        Raises:
            ValidationError: If the input is not a well-formed envelope
        """
        if isinstance(raw, (str, bytes, bytearray)):
            return cls.model_validate_json(raw)
        return cls.model_validate(raw)

    @property
    def has_valid_version(self) -> bool:
        return self.jsonrpc == JSONRPC_VERSION


class JsonRpcSuccess(BaseModel):
    """Success branch of a response."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    result: Any


class JsonRpcFailure(BaseModel):
    """Error branch of a response."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    error: JsonRpcError


JsonRpcAnswer = Union[JsonRpcSuccess, JsonRpcFailure]


class JsonRpcResponse(BaseModel):
    """
    JSON-RPC 2.0 response envelope.

    The answer is serialized untagged: its single key (``result`` or
    ``error``) is merged into the top level next to ``jsonrpc`` and ``id``.
    Parsing a wire response branches on which of the two keys is present.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    jsonrpc: Literal["2.0"] = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    id: int = Field(..., description="Request identifier")
    answer: JsonRpcAnswer = Field(..., description="Result or error")

    @model_validator(mode="before")
    @classmethod
    def lift_answer(cls, data: Any) -> Any:
        """Move a wire-level ``result``/``error`` member under ``answer``."""
        if not isinstance(data, dict) or "answer" in data:
            return data
        has_result = "result" in data
        if has_result == ("error" in data):
            raise ValueError("Response must have exactly one of result or error")
        data = dict(data)
        key = "result" if has_result else "error"
        data["answer"] = {key: data.pop(key)}
        return data

    @model_serializer(mode="wrap")
    def flatten_answer(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        answer = data.pop("answer")
        data.update(answer)
        return data

    @classmethod
    def success(cls, id: int, result: Any) -> "JsonRpcResponse":
        """
        Create a success response.

        The result is converted to plain JSON values up front. If that is not
        possible (unknown types, cycles, NaN or infinite floats) an Internal
        Error response is returned instead, so this never raises.
        """
        try:
            value = to_json_value(result)
        except ValueError as e:
            logger.error("Result is not JSON representable", request_id=id, error=str(e))
            error = JsonRpcError.new(JsonRpcErrorReason.INTERNAL_ERROR, str(e))
            return cls.error(id, error)

        return cls(id=id, answer=JsonRpcSuccess(result=value))

    @classmethod
    def error(cls, id: int, error: JsonRpcError) -> "JsonRpcResponse":
        """Create an error response."""
        return cls(id=id, answer=JsonRpcFailure(error=error))

    @property
    def is_success(self) -> bool:
        return isinstance(self.answer, JsonRpcSuccess)

    def to_wire(self) -> Dict[str, Any]:
        """Return the wire form as plain JSON values."""
        return self.model_dump(mode="json")
