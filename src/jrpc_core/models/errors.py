"""
JSON-RPC 2.0 Error Taxonomy

Standard error reasons, their fixed numeric codes, and the error object
carried inside an error response.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import to_jsonable_python

logger = structlog.get_logger()


class JsonRpcErrorReason(int, Enum):
    """Standard JSON-RPC 2.0 error reasons."""
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


_STANDARD_CODES = frozenset(reason.value for reason in JsonRpcErrorReason)


@dataclass(frozen=True)
class ServerError:
    """Application-defined error reason carrying its own code."""
    code: int

    def __post_init__(self) -> None:
        if self.code in _STANDARD_CODES:
            raise ValueError(
                f"Code {self.code} is reserved for {JsonRpcErrorReason(self.code).name}"
            )


ErrorReason = Union[JsonRpcErrorReason, ServerError]


def error_code(reason: ErrorReason) -> int:
    """Return the numeric code for an error reason."""
    if isinstance(reason, JsonRpcErrorReason):
        return reason.value
    return reason.code


def reason_from_code(code: int) -> ErrorReason:
    """Resolve a numeric code back into its error reason."""
    if code in _STANDARD_CODES:
        return JsonRpcErrorReason(code)
    return ServerError(code)


def to_json_value(value: Any) -> Any:
    """
    Convert a value to plain JSON values.

    Raises:
        ValueError: If strict JSON cannot carry the value (unknown types,
            cycles, NaN or infinite floats)
    """
    try:
        converted = to_jsonable_python(value)
        json.dumps(converted, allow_nan=False)
    except (ValueError, TypeError) as e:
        raise ValueError(str(e)) from e
    return converted


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line diagnostic."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    data: Any = Field(None, description="Additional error data")

    @field_validator("data")
    @classmethod
    def validate_data(cls, v: Any) -> Any:
        """Store data as plain JSON values."""
        return to_json_value(v)

    @classmethod
    def new(cls, reason: ErrorReason, message: str, data: Any = None) -> "JsonRpcError":
        """
        Build an error object for a reason.

        Data that JSON cannot carry is replaced by an Internal Error without
        data, so this never raises.

        Args:
            reason: Standard reason or an application-defined ServerError
            message: Human-readable description
            data: Arbitrary structured detail, null when absent
        """
        try:
            return cls(code=error_code(reason), message=message, data=data)
        except ValidationError as e:
            diagnostic = describe_validation_error(e)
            logger.error(
                "Error data is not JSON representable",
                code=error_code(reason),
                error=diagnostic,
            )
            return cls(
                code=JsonRpcErrorReason.INTERNAL_ERROR.value,
                message=f"Error data is not JSON representable: {diagnostic}",
            )

    @property
    def reason(self) -> ErrorReason:
        """Error reason resolved from the code."""
        return reason_from_code(self.code)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
