"""
JSON-RPC Request Extractor

Turns raw request input into a single-use handle for dispatch code. Every
protocol failure comes back as a ready-to-send JsonRpcResponse instead of an
exception, so each dispatch branch can simply return what it gets:

    def dispatch(req: JsonRpcExtractor) -> JsonRpcResponse:
        if req.method == "add":
            params = req.parse_params(tuple[int, int])
            if isinstance(params, JsonRpcResponse):
                return params
            return JsonRpcResponse.success(req.get_answer_id(), params[0] + params[1])
        return req.method_not_found(req.method)
"""

from typing import Any, Type, TypeVar, Union

import structlog
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from jrpc_core.models.errors import ErrorReason, JsonRpcError, JsonRpcErrorReason
from jrpc_core.models.jsonrpc import (
    DEFAULT_ID,
    JsonRpcRequest,
    JsonRpcResponse,
    describe_validation_error,
)

logger = structlog.get_logger()

T = TypeVar("T")


class JsonRpcExtractor:
    """
    Validated JSON-RPC request handed to dispatch code.

    The params stay undecoded until the dispatch branch that knows their
    shape calls parse_params, which consumes the handle.
    """

    def __init__(self, id: int, method: str, params: Any) -> None:
        self._id = id
        self._method = method
        self._params = params
        self._consumed = False

    @classmethod
    def from_request(cls, request: JsonRpcRequest) -> Union["JsonRpcExtractor", JsonRpcResponse]:
        """
        Build a handle from a decoded envelope.

        Returns:
            The handle, or an Invalid Request response echoing the request id
            when the protocol version is not "2.0"
        """
        if not request.has_valid_version:
            logger.warning(
                "Invalid jsonrpc version",
                request_id=request.id,
                jsonrpc=request.jsonrpc,
            )
            error = JsonRpcError.new(
                JsonRpcErrorReason.INVALID_REQUEST,
                "Invalid jsonrpc version",
            )
            return JsonRpcResponse.error(request.id, error)

        return cls(request.id, request.method, request.params)

    @classmethod
    def from_raw(cls, raw: Any) -> Union["JsonRpcExtractor", JsonRpcResponse]:
        """
        Parse and validate raw request input.

        Args:
            raw: JSON text (str or bytes) or an already decoded value

        Returns:
            The handle, or an Invalid Request response. Input that cannot be
            decoded into an envelope at all is answered with the default id.
        """
        try:
            request = JsonRpcRequest.parse(raw)
        except ValidationError as e:
            message = describe_validation_error(e)
            logger.warning("Request envelope rejected", error=message)
            error = JsonRpcError.new(JsonRpcErrorReason.INVALID_REQUEST, message)
            return JsonRpcResponse.error(DEFAULT_ID, error)

        return cls.from_request(request)

    def get_answer_id(self) -> int:
        """Id to use for any response to this request."""
        return self._id

    @property
    def method(self) -> str:
        return self._method

    def parse_params(self, shape: Type[T]) -> Union[T, JsonRpcResponse]:
        """
        Decode the params into the given shape, consuming the handle.

        Decoding is strict JSON decoding: arrays fill lists and tuples, objects
        fill models and dicts, but "2", 2.0 and true never pass as an int.

        Args:
            shape: Any type pydantic can validate into (a model, list[int],
                tuple[int, int], dict[str, Any], ...)

        Returns:
            The decoded params, or an Invalid Params response carrying the
            decoder diagnostic

        Raises:
            RuntimeError: If the params were already extracted
        """
        if self._consumed:
            raise RuntimeError(f"Params of request {self._id} were already extracted")
        self._consumed = True
        params, self._params = self._params, None

        try:
            return TypeAdapter(shape).validate_json(to_json(params), strict=True)
        except (ValidationError, PydanticSerializationError) as e:
            message = (
                describe_validation_error(e)
                if isinstance(e, ValidationError)
                else str(e)
            )
            logger.info(
                "Invalid params",
                request_id=self._id,
                method=self._method,
                error=message,
            )
            return self.error(JsonRpcErrorReason.INVALID_PARAMS, message)

    def method_not_found(self, method: str) -> JsonRpcResponse:
        """Method Not Found response for this request."""
        return self.error(
            JsonRpcErrorReason.METHOD_NOT_FOUND,
            f"Method `{method}` not found",
        )

    def error(self, reason: ErrorReason, message: str, data: Any = None) -> JsonRpcResponse:
        """Error response for this request."""
        return JsonRpcResponse.error(self._id, JsonRpcError.new(reason, message, data))

    def __repr__(self) -> str:
        return f"JsonRpcExtractor(id={self._id!r}, method={self._method!r})"
