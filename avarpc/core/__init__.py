"""Core types, errors and interfaces for avarpc."""

from avarpc.core.errors import (
    AvaRPCError,
    ClientError,
    ConfigError,
    LoadError,
    MalformedResponseError,
    RPCError,
)
from avarpc.core.interfaces import Transport

__all__ = [
    "AvaRPCError",
    "ClientError",
    "ConfigError",
    "LoadError",
    "MalformedResponseError",
    "RPCError",
    "Transport",
]
