"""JSON-RPC 2.0 client-side protocol support for avarpc.

Example usage:
    request = Request(jsonrpc="2.0", method="info.getNodeID", id=1)
    body = serialize_request(request)
    response = parse_response('{"jsonrpc":"2.0","id":1,"result":{"nodeID":"NodeID-1"}}')
"""

from avarpc.rpc.protocol import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    ParseError,
    parse_response,
    serialize_request,
)
from avarpc.rpc.types import Request, Response

__all__ = [
    # Types
    "Request",
    "Response",
    # Protocol functions
    "serialize_request",
    "parse_response",
    # Error codes
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
    # Exceptions
    "ParseError",
]
