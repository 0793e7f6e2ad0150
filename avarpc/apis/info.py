"""Bindings for a node's InfoAPI (``/ext/info``)."""

from typing import cast

from avarpc.apis.base import MethodBinding, RPCAPI
from avarpc.core.constants import INFO_BASE_PATH

MAX_NETWORK_ID = 2**32 - 1


def parse_network_id(value: int | str) -> int:
    """Convert a networkID field to an int.

    Accepts a non-negative int or a plain ASCII decimal string, both within
    the uint32 range. Signs, whitespace, underscores and non-ASCII digits
    are rejected.

    Raises:
        ValueError: If the value is not a valid network ID.
    """
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError("not a decimal digit string")
        value = int(value)
    if not 0 <= value <= MAX_NETWORK_ID:
        raise ValueError(f"outside 0..{MAX_NETWORK_ID}")
    return value


INFO_BINDINGS: dict[str, MethodBinding] = {
    "get_node_id": MethodBinding("info.getNodeID", "nodeID", str),
    # Nodes encode the network ID as a JSON string; accept either form
    "get_network_id": MethodBinding(
        "info.getNetworkID", "networkID", (int, str), convert=parse_network_id
    ),
    "alias": MethodBinding("info.alias", "success", bool, params=("endpoint", "alias")),
    "alias_chain": MethodBinding("info.aliasChain", "success", bool, params=("chain", "alias")),
    "get_blockchain_id": MethodBinding(
        "info.getBlockchainID", "blockchainID", str, params=("alias",)
    ),
    "get_node_version": MethodBinding("info.getNodeVersion", "version", str),
    "get_network_name": MethodBinding("info.getNetworkName", "networkName", str),
    "get_node_ip": MethodBinding("info.getNodeIP", "ip", str),
    "lock_profile": MethodBinding("info.lockProfile", "success", bool, params=("fileName",)),
    "memory_profile": MethodBinding("info.memoryProfile", "success", bool, params=("fileName",)),
    "peers": MethodBinding("info.peers", "peers", list, item_type=str),
    "start_cpu_profiler": MethodBinding(
        "info.startCPUProfiler", "success", bool, params=("fileName",)
    ),
    "stop_cpu_profiler": MethodBinding("info.stopCPUProfiler", "success", bool),
}


class InfoAPI(RPCAPI):
    """Client for a node's InfoAPI.

    Usually obtained from a NodeClient rather than built directly:

        async with NodeClient("127.0.0.1", 9650) as node:
            version = await node.info().get_node_version()
    """

    bindings = INFO_BINDINGS
    default_base_path = INFO_BASE_PATH

    async def get_node_id(self) -> str:
        """Fetch the node's ID (e.g. "NodeID-...")."""
        return cast(str, await self.invoke("get_node_id"))

    async def get_network_id(self) -> int:
        """Fetch the ID of the network the node participates in."""
        return cast(int, await self.invoke("get_network_id"))

    async def alias(self, endpoint: str, alias: str) -> bool:
        """Give an API endpoint an alias on this node.

        The original endpoint keeps working. Other nodes do not learn
        about the alias.

        Args:
            endpoint: Original endpoint, without the leading "/ext/".
            alias: The API becomes reachable at "ext/<alias>".

        Returns:
            True if the node reports success.
        """
        return cast(bool, await self.invoke("alias", endpoint, alias))

    async def alias_chain(self, chain: str, alias: str) -> bool:
        """Give a blockchain an alias usable wherever its ID is accepted.

        Args:
            chain: The blockchain's ID.
            alias: The new name for the blockchain.

        Returns:
            True if the node reports success.
        """
        return cast(bool, await self.invoke("alias_chain", chain, alias))

    async def get_blockchain_id(self, alias: str) -> str:
        """Resolve a blockchain alias to its base-58 blockchain ID."""
        return cast(str, await self.invoke("get_blockchain_id", alias))

    async def get_node_version(self) -> str:
        """Fetch the node software version (e.g. "avalanche/1.0.0")."""
        return cast(str, await self.invoke("get_node_version"))

    async def get_network_name(self) -> str:
        """Fetch the name of the network the node is running on."""
        return cast(str, await self.invoke("get_network_name"))

    async def get_node_ip(self) -> str:
        """Fetch the public IP the node advertises, in <ip>:<port> form."""
        return cast(str, await self.invoke("get_node_ip"))

    async def lock_profile(self, filename: str) -> bool:
        """Dump the node's mutex statistics to a file on the node.

        Args:
            filename: Name of the file the node writes.

        Returns:
            True on success.
        """
        return cast(bool, await self.invoke("lock_profile", filename))

    async def memory_profile(self, filename: str) -> bool:
        """Dump the node's current memory profile to a file on the node."""
        return cast(bool, await self.invoke("memory_profile", filename))

    async def peers(self) -> list[str]:
        """List the peers connected to the node, in <ip>:<port> form."""
        return cast(list[str], await self.invoke("peers"))

    async def start_cpu_profiler(self, filename: str) -> bool:
        """Start CPU profiling. The node writes the profile to filename on stop."""
        return cast(bool, await self.invoke("start_cpu_profiler", filename))

    async def stop_cpu_profiler(self) -> bool:
        """Stop a CPU profile started with start_cpu_profiler."""
        return cast(bool, await self.invoke("stop_cpu_profiler"))
