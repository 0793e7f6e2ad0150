"""Entry point for the avarpc CLI."""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from avarpc.apis.info import INFO_BINDINGS
from avarpc.cli.arg_parser import command_to_operation, parse_args
from avarpc.cli.commands import cmd_info
from avarpc.cli.output import print_error, print_info
from avarpc.client import NodeClient
from avarpc.config.loader import load_config
from avarpc.config.schema import Config, NodeConfig
from avarpc.core.errors import ConfigError

logger = logging.getLogger(__name__)


def configure_logging(level: int | str) -> None:
    """Send avarpc logs to stderr at the given level.

    Replaces any handlers previously attached to the "avarpc" logger and
    stops propagation to the root logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    avarpc_logger = logging.getLogger("avarpc")
    avarpc_logger.setLevel(level)
    avarpc_logger.handlers.clear()
    avarpc_logger.addHandler(handler)
    avarpc_logger.propagate = False


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Return a copy of config with CLI connection flags applied."""
    overrides = {}
    for key in ("host", "port", "protocol", "timeout"):
        value = getattr(args, key, None)
        if value is not None:
            overrides[key] = value
    if not overrides:
        return config
    # Re-validate so bad flags are rejected the same way bad config is
    node = NodeConfig.model_validate({**config.node.model_dump(), **overrides})
    return config.model_copy(update={"node": node})


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigError as e:
        print_error(e.message)
        return 1
    except ValueError as e:
        print_error(f"Invalid option: {e}")
        return 1

    configure_logging(logging.DEBUG if args.verbose else config.logging.level)

    client = NodeClient.from_config(config, api_key=args.api_key)
    if args.verbose:
        print_info(f"Using node at {client.base_url}")
    operation = command_to_operation(args.operation)
    params = [getattr(args, key) for key in INFO_BINDINGS[operation].params]
    logger.debug("Running info %s with %d param(s)", operation, len(params))
    return asyncio.run(cmd_info(client, operation, params))


if __name__ == "__main__":
    sys.exit(main())
