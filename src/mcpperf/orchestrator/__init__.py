# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Load orchestration: client pool, scheduling strategies and run entry points."""

from mcpperf.orchestrator.models import ExecutionContext
from mcpperf.orchestrator.orchestrator import LoadOrchestrator
from mcpperf.orchestrator.pool import ClientPool
from mcpperf.orchestrator.strategies import (
    BurstStrategy,
    SchedulingStrategy,
    SustainedStrategy,
)

__all__ = [
    "BurstStrategy",
    "ClientPool",
    "ExecutionContext",
    "LoadOrchestrator",
    "SchedulingStrategy",
    "SustainedStrategy",
]
