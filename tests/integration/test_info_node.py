"""Integration tests: InfoAPI through NodeClient against a simulated node.

The node is an httpx.MockTransport that dispatches JSON-RPC methods the way
a real node's /ext/info endpoint does, so these tests exercise the binding
table, the HTTP transport and the response parsing together.
"""

import asyncio
import json

import httpx
import pytest

from avarpc.client import NodeClient
from avarpc.core.errors import ClientError, MalformedResponseError, RPCError


class SimulatedNode:
    """Minimal stand-in for a node's info endpoint."""

    def __init__(self) -> None:
        self.aliases: dict[str, str] = {"X": "2oYMBNV4eNHyqk2fjjV5nVQLDbtmNJzq5s3qs3Lo6ftnC6FByM"}
        self.requests: list[dict] = []
        self.profiling = False

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.url.path != "/ext/info":
            return httpx.Response(404, text="404 page not found")

        body = json.loads(request.content)
        self.requests.append(body)
        method = body["method"]
        params = body.get("params") or {}

        try:
            result = self._dispatch(method, params)
        except LookupError as e:
            return self._reply(body["id"], error={"code": -32000, "message": str(e)})
        return self._reply(body["id"], result=result)

    def _dispatch(self, method: str, params: dict) -> dict:
        if method == "info.getNodeID":
            return {"nodeID": "NodeID-7Xhw2mDxuDS44j42TCB6U5579esbSt3Lg"}
        if method == "info.getNetworkID":
            return {"networkID": "12345"}
        if method == "info.getNetworkName":
            return {"networkName": "local"}
        if method == "info.getNodeVersion":
            return {"version": "avalanche/1.0.0"}
        if method == "info.getNodeIP":
            return {"ip": "127.0.0.1:9651"}
        if method == "info.peers":
            return {"peers": ["1.2.3.4:9650", "5.6.7.8:9650"]}
        if method == "info.aliasChain":
            self.aliases[params["alias"]] = self.aliases.get(params["chain"], params["chain"])
            return {"success": True}
        if method == "info.getBlockchainID":
            if params["alias"] not in self.aliases:
                raise LookupError(f"there is no ID with alias {params['alias']}")
            return {"blockchainID": self.aliases[params["alias"]]}
        if method == "info.startCPUProfiler":
            self.profiling = True
            return {"success": True}
        if method == "info.stopCPUProfiler":
            was_profiling, self.profiling = self.profiling, False
            return {"success": was_profiling}
        if method == "info.lockProfile":
            # Older nodes answer with an empty result for some profilers
            return {}
        raise LookupError(f"the method {method} does not exist")

    @staticmethod
    def _reply(request_id, result=None, error=None) -> httpx.Response:
        payload = {"jsonrpc": "2.0", "id": request_id}
        if error is not None:
            payload["error"] = error
        else:
            payload["result"] = result
        return httpx.Response(200, json=payload)


@pytest.fixture
def node() -> SimulatedNode:
    return SimulatedNode()


@pytest.fixture
def client(node: SimulatedNode) -> NodeClient:
    return NodeClient("127.0.0.1", 9650, transport=httpx.MockTransport(node.handle))


class TestNodeMetadata:
    """Read-only queries against the simulated node."""

    @pytest.mark.asyncio
    async def test_identity_and_network(self, client):
        """Identity, network and peer queries return the node's values."""
        async with client:
            info = client.info()
            assert await info.get_node_id() == "NodeID-7Xhw2mDxuDS44j42TCB6U5579esbSt3Lg"
            assert await info.get_network_id() == 12345
            assert await info.get_network_name() == "local"
            assert await info.get_node_version() == "avalanche/1.0.0"
            assert await info.get_node_ip() == "127.0.0.1:9651"
            assert await info.peers() == ["1.2.3.4:9650", "5.6.7.8:9650"]

    @pytest.mark.asyncio
    async def test_concurrent_calls_resolve_independently(self, client, node):
        """Concurrent calls each get their own request id and result."""
        async with client:
            info = client.info()
            results = await asyncio.gather(
                info.get_node_version(),
                info.peers(),
                info.get_blockchain_id("X"),
                info.get_network_id(),
            )

        assert results == [
            "avalanche/1.0.0",
            ["1.2.3.4:9650", "5.6.7.8:9650"],
            node.aliases["X"],
            12345,
        ]
        assert sorted(r["id"] for r in node.requests) == [1, 2, 3, 4]


class TestAliases:
    """Chain aliasing against the simulated node."""

    @pytest.mark.asyncio
    async def test_alias_chain_then_resolve(self, client, node):
        """A new chain alias resolves to the aliased chain's ID."""
        async with client:
            info = client.info()
            assert await info.alias_chain("X", "exchange") is True
            assert await info.get_blockchain_id("exchange") == node.aliases["X"]

        assert node.requests[0]["params"] == {"chain": "X", "alias": "exchange"}

    @pytest.mark.asyncio
    async def test_unknown_alias_is_rpc_error(self, client):
        """The node's error object for an unknown alias surfaces as RPCError."""
        async with client:
            with pytest.raises(RPCError, match="no ID with alias"):
                await client.info().get_blockchain_id("nope")


class TestProfiling:
    """Profiler toggles against the simulated node."""

    @pytest.mark.asyncio
    async def test_cpu_profiler_cycle(self, client, node):
        """Start then stop reports success once; a second stop reports False."""
        async with client:
            info = client.info()
            assert await info.start_cpu_profiler("cpu.out") is True
            assert node.profiling is True
            assert await info.stop_cpu_profiler() is True
            assert await info.stop_cpu_profiler() is False

        assert node.requests[0]["params"] == {"fileName": "cpu.out"}
        assert "params" not in node.requests[1]

    @pytest.mark.asyncio
    async def test_empty_result_is_malformed(self, client):
        """An empty result object raises MalformedResponseError."""
        async with client:
            with pytest.raises(MalformedResponseError) as exc_info:
                await client.info().lock_profile("lock.out")

        assert exc_info.value.field == "success"


class TestTransport:
    """Transport-level behaviour seen through InfoAPI."""

    @pytest.mark.asyncio
    async def test_wrong_base_path_is_client_error(self, client):
        """A 404 page from an unmounted path becomes a ClientError."""
        client.add_api("info", type(client.info()), "/ext/missing")
        async with client:
            with pytest.raises(ClientError, match="HTTP 404"):
                await client.info().get_node_id()

    @pytest.mark.asyncio
    async def test_ipv6_loopback_host(self, node):
        """An IPv6 literal host is bracketed and reaches the node."""
        client = NodeClient("::1", 9650, transport=httpx.MockTransport(node.handle))
        async with client:
            assert await client.info().get_node_version() == "avalanche/1.0.0"
