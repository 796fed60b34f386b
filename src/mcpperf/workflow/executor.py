# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Runs the three-step client workflow and times each step."""

import time

from mcpperf.clients.protocols import WorkflowClientProtocol
from mcpperf.common.constants import NANOS_PER_MILLIS
from mcpperf.common.logging import LogSinkProtocol, NullLogSink
from mcpperf.common.models import OperationOutcome, now_epoch_millis

__all__ = [
    "WORKFLOW_STEPS",
    "WorkflowExecutor",
    "describe_error",
]

WORKFLOW_STEPS: tuple[str, ...] = ("initialize", "acknowledge", "list_operations")


def describe_error(error: BaseException) -> str:
    """Message text of an exception, or its class name when the message is empty."""
    return str(error) or type(error).__name__


class WorkflowExecutor:
    """Executes one workflow on a client.

    Steps run in order. A failing step ends the workflow: steps that already
    completed keep their success outcomes with real latencies, and a single
    zero-latency failure outcome carrying the error message is appended.
    Step failures never propagate out of :meth:`run_workflow`.
    """

    def __init__(self, log_sink: LogSinkProtocol | None = None) -> None:
        self.log_sink = log_sink or NullLogSink()

    async def run_workflow(
        self, client: WorkflowClientProtocol
    ) -> list[OperationOutcome]:
        outcomes: list[OperationOutcome] = []

        for step in WORKFLOW_STEPS:
            started_at = now_epoch_millis()
            start_ns = time.perf_counter_ns()
            try:
                await getattr(client, step)()
            except Exception as e:
                self.log_sink.debug(f"Workflow step {step} failed: {e!r}")
                outcomes.append(
                    OperationOutcome.failure(describe_error(e), started_at)
                )
                break
            outcomes.append(
                OperationOutcome(
                    success=True,
                    latency_millis=(time.perf_counter_ns() - start_ns)
                    / NANOS_PER_MILLIS,
                    started_at_epoch_millis=started_at,
                )
            )

        return outcomes
