"""CLI command implementations.

Each command prints its result as JSON to stdout and returns an exit code.
"""

import logging
from typing import Any

from avarpc.apis.base import RPCAPI
from avarpc.cli.output import print_error, print_json
from avarpc.client import NodeClient
from avarpc.core.errors import ClientError

logger = logging.getLogger(__name__)


async def run_operation(api: RPCAPI, operation: str, args: list[Any]) -> int:
    """Invoke one operation on an API group and print its result.

    Args:
        api: API group to call.
        operation: Operation name from the group's binding table.
        args: Positional parameter values.

    Returns:
        Exit code: 0 on success, 1 on error.
    """
    try:
        result = await api.invoke(operation, *args)
    except ClientError as e:
        print_error(e.message)
        return 1
    print_json(result)
    return 0


async def cmd_info(client: NodeClient, operation: str, args: list[Any]) -> int:
    """Run an InfoAPI operation against the node.

    Args:
        client: Client that has not been entered yet.
        operation: InfoAPI operation name (e.g. "get_node_id").
        args: Positional parameter values.

    Returns:
        Exit code: 0 on success, 1 on error.
    """
    logger.debug("info %s %s against %s", operation, args, client.base_url)
    async with client:
        return await run_operation(client.info(), operation, args)
