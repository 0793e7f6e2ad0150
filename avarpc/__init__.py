"""Async client bindings for a node's JSON-RPC APIs."""

from avarpc.apis.base import MethodBinding, RPCAPI
from avarpc.apis.info import InfoAPI
from avarpc.client import NodeClient
from avarpc.core.errors import (
    AvaRPCError,
    ClientError,
    ConfigError,
    MalformedResponseError,
    RPCError,
)

__version__ = "0.1.0"

__all__ = [
    "AvaRPCError",
    "ClientError",
    "ConfigError",
    "InfoAPI",
    "MalformedResponseError",
    "MethodBinding",
    "NodeClient",
    "RPCAPI",
    "RPCError",
]
