# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Pool of virtual clients owned by the orchestrator."""

from mcpperf.clients.protocols import ClientFactory, WorkflowClientProtocol
from mcpperf.common.exceptions import PoolCapacityError
from mcpperf.common.logging import LogSinkProtocol, NullLogSink

__all__ = [
    "ClientPool",
]


class ClientPool:
    """Grow-only collection of client handles.

    Growth is explicit through :meth:`ensure_capacity` (or :meth:`add_clients`)
    and never shrinks on its own. Only :meth:`reset` discards handles.

    Attributes:
        factory: Callable creating one new client handle
        max_size: Optional upper bound on the number of handles
    """

    def __init__(
        self,
        factory: ClientFactory,
        max_size: int | None = None,
        log_sink: LogSinkProtocol | None = None,
    ) -> None:
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self.factory = factory
        self.max_size = max_size
        self.log_sink = log_sink or NullLogSink()
        self._clients: list[WorkflowClientProtocol] = []

    @property
    def size(self) -> int:
        return len(self._clients)

    @property
    def handles(self) -> tuple[WorkflowClientProtocol, ...]:
        return tuple(self._clients)

    def ensure_capacity(self, count: int) -> int:
        """Grow the pool to at least ``count`` handles.

        Returns:
            Number of handles created by this call

        Raises:
            PoolCapacityError: If ``count`` exceeds ``max_size``. Nothing is created.
        """
        missing = count - len(self._clients)
        if missing <= 0:
            return 0
        return self.add_clients(missing)

    def add_clients(self, amount: int) -> int:
        """Create ``amount`` more handles unconditionally."""
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")
        requested = len(self._clients) + amount
        if self.max_size is not None and requested > self.max_size:
            raise PoolCapacityError(requested, self.max_size)

        self._clients.extend(self.factory() for _ in range(amount))
        if amount:
            self.log_sink.info(f"Total clients: {len(self._clients)}")
        return amount

    def take(self, count: int) -> list[WorkflowClientProtocol]:
        """First ``count`` handles. The pool must already hold that many."""
        if count > len(self._clients):
            raise PoolCapacityError(count, len(self._clients))
        return self._clients[:count]

    async def reset(self) -> None:
        """Close every handle that supports it and empty the pool."""
        clients, self._clients = self._clients, []
        for client in clients:
            aclose = getattr(client, "aclose", None)
            if aclose is not None:
                await aclose()
        if clients:
            self.log_sink.debug(f"Discarded {len(clients)} clients")
