"""JSON-RPC API groups exposed by a node."""

from avarpc.apis.base import MethodBinding, RPCAPI, extract_field
from avarpc.apis.info import INFO_BINDINGS, InfoAPI

__all__ = [
    "INFO_BINDINGS",
    "InfoAPI",
    "MethodBinding",
    "RPCAPI",
    "extract_field",
]
