"""Latency/outcome providers standing in for the remote round trip."""
from __future__ import annotations

import asyncio
from typing import Protocol

from ..errors import GatewayUnavailable


class LatencyProvider(Protocol):
    async def wait(self, operation: str) -> None: ...


class SimulatedLatency:
    """Sleeps a fixed window: ``fetch`` for reads, ``mutation`` for writes."""

    def __init__(self, fetch: float = 1.0, mutation: float = 0.5) -> None:
        self.fetch = fetch
        self.mutation = mutation

    async def wait(self, operation: str) -> None:
        await asyncio.sleep(self.fetch if operation == "fetch" else self.mutation)


class NoLatency:
    async def wait(self, operation: str) -> None:
        return None


class FailingLatency:
    """Fails the listed operations (all of them by default) as if the remote call errored."""

    def __init__(self, *operations: str, message: str = "remote call failed") -> None:
        self.operations = set(operations)
        self.message = message
        self.calls: list[str] = []

    async def wait(self, operation: str) -> None:
        self.calls.append(operation)
        if not self.operations or operation in self.operations:
            raise GatewayUnavailable(f"{operation}: {self.message}")
