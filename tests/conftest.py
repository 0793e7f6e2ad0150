"""Shared pytest fixtures for avarpc tests."""

from typing import Any

import pytest

from avarpc.rpc.types import Response


class FakeTransport:
    """In-memory Transport that records calls and replays canned results.

    Attributes:
        calls: (endpoint, method, params) for every call, in order.
        results: method name -> value placed in the response's result member.
        errors: method name -> exception raised instead of answering.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []
        self.results: dict[str, Any] = {}
        self.errors: dict[str, Exception] = {}

    async def call(
        self,
        endpoint: str,
        method: str,
        params: dict[str, Any] | None = None,
    ) -> Response:
        self.calls.append((endpoint, method, params))
        if method in self.errors:
            raise self.errors[method]
        return Response(jsonrpc="2.0", id=len(self.calls), result=self.results.get(method))


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A fresh FakeTransport per test."""
    return FakeTransport()
