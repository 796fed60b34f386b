# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WorkflowClientProtocol(Protocol):
    """One simulated caller of the remote service.

    Holds whatever session state the wire protocol needs. Each call may raise;
    the caller times and classifies it.
    """

    async def initialize(self) -> Any: ...

    async def acknowledge(self) -> Any: ...

    async def list_operations(self) -> Any: ...


ClientFactory = Callable[[], WorkflowClientProtocol]
