"""Table-driven binding of JSON-RPC methods onto async Python calls.

An API group declares one MethodBinding per remote operation. RPCAPI turns
a binding plus positional arguments into a single transport call and
extracts the declared field from the ``result`` object, raising
MalformedResponseError when the node does not honour the contract.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from avarpc.core.errors import MalformedResponseError
from avarpc.core.interfaces import Transport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MethodBinding:
    """Descriptor for one remote operation.

    Attributes:
        method: Fully qualified JSON-RPC method name (e.g. "info.alias").
        field: Key, or sequence of keys, locating the value inside ``result``.
        result_type: Accepted Python type(s) of the extracted value.
        params: Wire names of the parameters, in positional order.
        item_type: For list results, the accepted type of every element.
        convert: Optional callable applied to the value after type checking.
    """

    method: str
    field: str | tuple[str, ...]
    result_type: type | tuple[type, ...]
    params: tuple[str, ...] = ()
    item_type: type | None = None
    convert: Callable[[Any], Any] | None = None

    @property
    def field_path(self) -> tuple[str, ...]:
        if isinstance(self.field, str):
            return (self.field,)
        return tuple(self.field)

    @property
    def field_name(self) -> str:
        """Dotted form of the field path, for messages."""
        return ".".join(self.field_path)


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _matches(value: Any, expected: type | tuple[type, ...]) -> bool:
    """isinstance() that does not let bool pass for int."""
    types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in types:
        return False
    return isinstance(value, types)


def extract_field(binding: MethodBinding, result: Any) -> Any:
    """Validate and extract a binding's field from a JSON-RPC result.

    Args:
        binding: The binding that describes where the value lives.
        result: The ``result`` member of a successful response.

    Returns:
        The extracted value, converted if the binding has a converter.

    Raises:
        MalformedResponseError: If the path is missing, crosses a non-object,
            or the value has an unexpected type.
    """
    current = result
    for key in binding.field_path:
        if not isinstance(current, dict):
            raise MalformedResponseError(
                binding.method,
                binding.field_name,
                f"expected object containing {key!r}, got {_type_name(current)}",
            )
        if key not in current:
            raise MalformedResponseError(binding.method, binding.field_name, "field missing")
        current = current[key]

    if not _matches(current, binding.result_type):
        raise MalformedResponseError(
            binding.method,
            binding.field_name,
            f"unexpected type {_type_name(current)}",
        )

    if binding.item_type is not None:
        for index, item in enumerate(current):
            if not _matches(item, binding.item_type):
                raise MalformedResponseError(
                    binding.method,
                    binding.field_name,
                    f"item {index} has unexpected type {_type_name(item)}",
                )

    if binding.convert is not None:
        try:
            return binding.convert(current)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                binding.method, binding.field_name, f"cannot convert {current!r}: {e}"
            ) from e

    return current


class RPCAPI:
    """Base class for a group of JSON-RPC methods mounted under one path.

    Subclasses set ``bindings`` (operation name -> MethodBinding) and
    ``default_base_path``. The transport is injected, never looked up.
    """

    bindings: ClassVar[Mapping[str, MethodBinding]] = {}
    default_base_path: ClassVar[str] = ""

    def __init__(self, transport: Transport, base_path: str | None = None) -> None:
        """Initialize the API group.

        Args:
            transport: Object implementing the Transport protocol.
            base_path: Path the group is mounted at. Defaults to the
                class's ``default_base_path``.
        """
        self._transport = transport
        self.base_path = base_path if base_path is not None else self.default_base_path

    @classmethod
    def operations(cls) -> list[str]:
        """Names of all operations this group exposes."""
        return list(cls.bindings)

    async def invoke(self, name: str, *args: Any) -> Any:
        """Run the named operation.

        Args:
            name: Operation name (a key of ``bindings``).
            *args: Parameter values, in the order of the binding's params.

        Returns:
            The validated value extracted from the response.

        Raises:
            KeyError: If the operation is unknown.
            TypeError: If the number of arguments does not match.
            ClientError: On transport, protocol or extraction failure.
        """
        try:
            binding = self.bindings[name]
        except KeyError:
            raise KeyError(f"Unknown operation for {type(self).__name__}: {name}") from None

        if len(args) != len(binding.params):
            raise TypeError(
                f"{name}() takes {len(binding.params)} argument(s) ({len(args)} given)"
            )

        # Built per call; never shared between concurrent invocations
        params = dict(zip(binding.params, args)) if binding.params else None

        logger.debug("Invoking %s at %s", binding.method, self.base_path)
        response = await self._transport.call(self.base_path, binding.method, params)
        return extract_field(binding, response.result)
