"""Async HTTP client for a node's JSON-RPC endpoints."""

import logging
import os
from typing import TYPE_CHECKING, Any, Literal, TypeVar

import httpx

from avarpc.apis.base import RPCAPI
from avarpc.apis.info import InfoAPI
from avarpc.core.constants import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_PROTOCOL, DEFAULT_TIMEOUT
from avarpc.core.errors import ClientError, RPCError
from avarpc.rpc.protocol import ParseError, parse_response, serialize_request
from avarpc.rpc.types import Request, Response

if TYPE_CHECKING:
    from avarpc.config.schema import Config

logger = logging.getLogger(__name__)

APIType = TypeVar("APIType", bound=RPCAPI)


class NodeClient:
    """Async JSON-RPC client for a node, shared by every API group.

    Usage:
        async with NodeClient("127.0.0.1", 9650) as node:
            node_id = await node.info().get_node_id()
            peers = await node.info().peers()

    API groups receive this client as their Transport; additional groups
    can be registered with add_api().
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        protocol: Literal["http", "https"] = DEFAULT_PROTOCOL,
        timeout: float = DEFAULT_TIMEOUT,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            host: Hostname or IP of the node.
            port: Port of the node's HTTP API.
            protocol: "http" or "https".
            timeout: Request timeout in seconds.
            api_key: Optional token. If provided, adds
                Authorization: Bearer <key> header to all requests.
            transport: Optional httpx transport (e.g. httpx.MockTransport).

        Raises:
            ValueError: If protocol, port or host are invalid.
        """
        if protocol not in ("http", "https"):
            raise ValueError(f"protocol must be 'http' or 'https', got: {protocol!r}")
        if not 1 <= port <= 65535:
            raise ValueError(f"port must be between 1 and 65535, got: {port}")

        self.host = host
        self.port = port
        self.protocol = protocol
        try:
            # httpx brackets IPv6 literals in the authority
            self._url = httpx.URL(scheme=protocol, host=host, port=port, path="/")
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid node host {host!r}: {e}") from e
        self._timeout = timeout
        self._api_key = api_key
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_id = 0
        self._apis: dict[str, RPCAPI] = {}
        self.add_api("info", InfoAPI)
        logger.debug("NodeClient initialized: url=%s, timeout=%s", self.base_url, timeout)

    @classmethod
    def from_config(
        cls,
        config: "Config",
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NodeClient":
        """Create a client from a loaded Config.

        Args:
            config: Loaded configuration.
            api_key: Explicit token. If None, it is read from the environment
                variable named by ``config.node.api_key_env``, if set.
            transport: Optional httpx transport.
        """
        node = config.node
        if api_key is None and node.api_key_env:
            api_key = os.environ.get(node.api_key_env)
        return cls(
            host=node.host,
            port=node.port,
            protocol=node.protocol,
            timeout=node.timeout,
            api_key=api_key or None,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return str(self._url).rstrip("/")

    async def __aenter__(self) -> "NodeClient":
        """Enter async context, create httpx client."""
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context, close httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    # API group registry

    def add_api(
        self,
        name: str,
        api_class: type[APIType],
        base_path: str | None = None,
    ) -> APIType:
        """Register an API group backed by this client.

        Args:
            name: Registry key (e.g. "info").
            api_class: RPCAPI subclass to instantiate.
            base_path: Override for the group's default mount path.

        Returns:
            The constructed API group. Replaces any group under the same name.
        """
        api = api_class(self, base_path)
        self._apis[name] = api
        logger.debug("Registered API %s at %s", name, api.base_path)
        return api

    def api(self, name: str) -> RPCAPI:
        """Return a registered API group.

        Raises:
            KeyError: If no group is registered under name.
        """
        try:
            return self._apis[name]
        except KeyError:
            raise KeyError(f"No API registered under {name!r}") from None

    def info(self) -> InfoAPI:
        """Return the InfoAPI group registered under "info"."""
        api = self.api("info")
        if not isinstance(api, InfoAPI):
            raise TypeError(f"API 'info' is {type(api).__name__}, not InfoAPI")
        return api

    # Transport

    def _next_id(self) -> int:
        """Generate the next request ID."""
        self._request_id += 1
        return self._request_id

    async def call(
        self,
        endpoint: str,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Response:
        """Make a JSON-RPC call and return the response.

        Args:
            endpoint: Base path of the API group (e.g. "/ext/info").
            method: The RPC method name.
            params: Optional parameters for the method.

        Returns:
            The parsed Response object, guaranteed to carry a result.

        Raises:
            RPCError: If the node returned a JSON-RPC error object.
            ClientError: On connection error, timeout, HTTP or protocol error.
        """
        if self._client is None:
            raise ClientError("Client not initialized. Use 'async with' context manager.")

        request = Request(
            jsonrpc="2.0",
            method=method,
            params=params,
            id=self._next_id(),
        )
        try:
            url = self._url.copy_with(path=endpoint)
        except httpx.InvalidURL as e:
            raise ClientError(f"Invalid endpoint {endpoint!r}: {e}") from e

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"

        logger.debug("RPC call: method=%s, id=%s, url=%s", method, request.id, url)
        try:
            http_response = await self._client.post(
                url,
                content=serialize_request(request),
                headers=headers,
            )
        except httpx.ConnectError as e:
            logger.warning("Connection failed to %s: %s", url, e)
            raise ClientError(f"Connection failed: {e}") from e
        except httpx.TimeoutException as e:
            logger.warning("Request timed out: method=%s, timeout=%s", method, self._timeout)
            raise ClientError(f"Request timed out: {e}") from e
        except httpx.InvalidURL as e:
            logger.warning("Invalid URL for method=%s: %s", method, e)
            raise ClientError(f"Invalid URL: {e}") from e
        except httpx.HTTPError as e:
            logger.warning("HTTP error for method=%s: %s", method, e)
            raise ClientError(f"HTTP error: {e}") from e

        try:
            response = parse_response(http_response.text)
        except ParseError as e:
            # Non-JSON-RPC body, typically an HTTP error page
            logger.warning(
                "Invalid server response for method=%s (HTTP %d): %s",
                method, http_response.status_code, e,
            )
            raise ClientError(
                f"Invalid server response (HTTP {http_response.status_code}): {e}"
            ) from e

        if response.error is not None:
            code = response.error.get("code", -1)
            message = response.error.get("message", "Unknown error")
            logger.warning("RPC error %s for method=%s: %s", code, method, message)
            raise RPCError(code, message, response.error.get("data"))

        if not http_response.is_success:
            raise ClientError(f"HTTP {http_response.status_code} for method {method}")

        if response.id != request.id:
            raise ClientError(
                f"Response id {response.id!r} does not match request id {request.id!r}"
            )

        return response
