"""Typed exception hierarchy for avarpc."""

from __future__ import annotations

from typing import Any


class AvaRPCError(Exception):
    """Base class for all avarpc errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(AvaRPCError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class LoadError(AvaRPCError):
    """Raised when a JSON file cannot be found, read or decoded."""


class ClientError(AvaRPCError):
    """Exception for client-side errors (connection, timeout, protocol)."""


class RPCError(ClientError):
    """The node answered with a JSON-RPC error object instead of a result."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.rpc_message = message
        self.data = data
        super().__init__(f"RPC error {code}: {message}")


class MalformedResponseError(ClientError):
    """A successful response did not carry the expected result field.

    Attributes:
        method: JSON-RPC method that was called.
        field: Dotted path of the field that was expected in ``result``.
        reason: What was wrong (missing key, wrong type, ...).
    """

    def __init__(self, method: str, field: str, reason: str) -> None:
        self.method = method
        self.field = field
        self.reason = reason
        super().__init__(f"Malformed response for {method} (result.{field}): {reason}")
