"""JSON-RPC 2.0 request serialization and response parsing."""

import json
from typing import Any

from avarpc.core.errors import AvaRPCError
from avarpc.rpc.types import Request, Response


class ParseError(AvaRPCError):
    """Raised when a JSON-RPC response cannot be parsed."""


# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000  # Server error range: -32000 to -32099


def serialize_request(request: Request) -> str:
    """Serialize a Request to a JSON line.

    Args:
        request: The Request object to serialize.

    Returns:
        A single line of JSON text (no trailing newline).
    """
    data: dict[str, Any] = {
        "jsonrpc": request.jsonrpc,
        "method": request.method,
    }

    if request.params is not None:
        data["params"] = request.params

    if request.id is not None:
        data["id"] = request.id

    return json.dumps(data, separators=(",", ":"))


def parse_response(text: str) -> Response:
    """Parse JSON text into a JSON-RPC 2.0 Response.

    Args:
        text: The response body.

    Returns:
        A parsed Response object.

    Raises:
        ParseError: If the JSON is invalid or required fields are missing.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Response must be a JSON object")

    jsonrpc = data.get("jsonrpc")
    if jsonrpc != "2.0":
        raise ParseError(f"jsonrpc must be '2.0', got: {jsonrpc!r}")

    # id is required in responses, but may be null
    if "id" not in data:
        raise ParseError("Response must have 'id' field")
    response_id = data.get("id")
    if response_id is not None and not isinstance(response_id, (str, int)):
        raise ParseError(f"id must be string, number, or null, got: {type(response_id).__name__}")

    has_result = "result" in data
    has_error = "error" in data

    if has_result and has_error:
        raise ParseError("Response cannot have both 'result' and 'error'")
    if not has_result and not has_error:
        raise ParseError("Response must have either 'result' or 'error'")

    error = data.get("error")
    if error is not None:
        if not isinstance(error, dict):
            raise ParseError(f"error must be an object, got: {type(error).__name__}")
        if "code" not in error or "message" not in error:
            raise ParseError("error must have 'code' and 'message' fields")

    return Response(
        jsonrpc=jsonrpc,
        id=response_id,
        result=data.get("result"),
        error=error,
    )
