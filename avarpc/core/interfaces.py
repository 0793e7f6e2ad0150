"""Core interfaces (protocols) for avarpc.

API groups talk to the node only through the Transport protocol, so any
object with a matching ``call`` coroutine can stand in for NodeClient.
"""

from typing import Any, Protocol

from avarpc.rpc.types import Response


class Transport(Protocol):
    """Protocol for the shared JSON-RPC call primitive.

    Example:
        class RecordingTransport:
            async def call(self, endpoint, method, params=None):
                self.calls.append((endpoint, method, params))
                return Response(jsonrpc="2.0", id=1, result={"nodeID": "NodeID-1"})
    """

    async def call(
        self,
        endpoint: str,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """Send one JSON-RPC request and return the decoded response.

        Implementations must raise (rather than return) when the node
        answers with a JSON-RPC error object.

        Args:
            endpoint: Base path of the API group (e.g. "/ext/info").
            method: Fully qualified method name (e.g. "info.getNodeID").
            params: Named parameters, or None to omit the params member.

        Returns:
            The parsed Response whose ``result`` member is set.
        """
        ...
