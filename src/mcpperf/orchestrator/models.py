# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data passed from the orchestrator to its scheduling strategies."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mcpperf.clients.protocols import WorkflowClientProtocol
from mcpperf.common.config import RunConfiguration
from mcpperf.common.enums import RunState
from mcpperf.common.logging import LogSinkProtocol
from mcpperf.metrics import PerformanceAnalyzer
from mcpperf.workflow import WorkflowExecutor


@dataclass(slots=True)
class ExecutionContext:
    """Everything a strategy needs to drive one run.

    Attributes:
        config: Configuration of the run
        clients: Handles to drive, one task per handle
        executor: Runs a single workflow on a handle
        analyzer: Receives every outcome
        log_sink: Destination for progress messages
        idle_interval_sec: Pause between sustained-loop iterations
        set_state: Reports lifecycle transitions back to the orchestrator
    """

    config: RunConfiguration
    clients: Sequence[WorkflowClientProtocol]
    executor: WorkflowExecutor
    analyzer: PerformanceAnalyzer
    log_sink: LogSinkProtocol
    idle_interval_sec: float
    set_state: Callable[[RunState], None]
