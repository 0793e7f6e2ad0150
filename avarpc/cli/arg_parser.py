"""Argument parsing for the avarpc CLI.

Info subcommands are generated from the InfoAPI binding table, so every
operation is reachable as ``avarpc info <operation-name> [params...]``.
"""

import argparse
from pathlib import Path

from avarpc.apis.info import INFO_BINDINGS


def operation_to_command(name: str) -> str:
    """Map an operation name to its CLI spelling (get_node_id -> get-node-id)."""
    return name.replace("_", "-")


def command_to_operation(command: str) -> str:
    return command.replace("-", "_")


def add_node_args(parser: argparse.ArgumentParser) -> None:
    """Add node connection overrides to a parser."""
    parser.add_argument("--host", help="Node host (overrides config)")
    parser.add_argument("--port", "-p", type=int, help="Node HTTP port (overrides config)")
    parser.add_argument(
        "--protocol",
        choices=["http", "https"],
        help="URL scheme (overrides config)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (overrides config)",
    )
    parser.add_argument(
        "--api-key",
        dest="api_key",
        help="Bearer token (defaults to the environment variable named in config)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser."""
    parser = argparse.ArgumentParser(
        prog="avarpc",
        description="Query a node's JSON-RPC APIs",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Config file (skips layered ~/.avarpc and ./.avarpc lookup)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    add_node_args(parser)

    subparsers = parser.add_subparsers(dest="command", required=True)

    info_parser = subparsers.add_parser(
        "info",
        help="InfoAPI calls (/ext/info)",
        description="Call a method of the node's InfoAPI and print the result as JSON.",
    )
    info_subparsers = info_parser.add_subparsers(dest="operation", required=True)

    for name, binding in INFO_BINDINGS.items():
        op_parser = info_subparsers.add_parser(
            operation_to_command(name),
            help=f"Call {binding.method}",
        )
        for key in binding.params:
            op_parser.add_argument(key, help=f"Value of the '{key}' parameter")

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
