# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Scheduling strategies for orchestrated load runs."""

import asyncio
import time
from abc import ABC, abstractmethod

from mcpperf.clients.protocols import WorkflowClientProtocol
from mcpperf.common.config import RunConfiguration
from mcpperf.common.enums import RunKind, RunState
from mcpperf.common.exceptions import ConfigurationError
from mcpperf.common.models import OperationOutcome
from mcpperf.orchestrator.models import ExecutionContext
from mcpperf.workflow import describe_error

__all__ = [
    "BurstStrategy",
    "SchedulingStrategy",
    "SustainedStrategy",
]


class SchedulingStrategy(ABC):
    """Base class for scheduling strategies.

    Strategies decide:
    1. Whether a configuration is acceptable before anything is provisioned
    2. When each client task is released
    3. How long each client keeps running workflows

    Every outcome, including errors that escape the workflow executor, ends up
    in the analyzer. A strategy returns only once all of its tasks settled;
    if it is cancelled, the tasks it started are cancelled and awaited first.
    """

    run_kind: RunKind

    def validate_config(self, config: RunConfiguration) -> None:  # noqa: B027
        """Reject configurations this strategy cannot run.

        Called by the orchestrator before the pool is grown or any remote call
        is made.

        Raises:
            ConfigurationError: If the configuration is unusable
        """
        pass

    @abstractmethod
    async def execute(self, ctx: ExecutionContext) -> None:
        """Drive every client in ``ctx`` and wait for all of them to settle."""
        pass

    async def _execute_workflow(
        self, ctx: ExecutionContext, client: WorkflowClientProtocol
    ) -> None:
        """Run one workflow and record its outcomes in step order.

        An error escaping the executor becomes one zero-latency failure outcome.
        """
        try:
            outcomes = await ctx.executor.run_workflow(client)
        except Exception as e:
            ctx.log_sink.error(f"Workflow execution failed: {describe_error(e)}")
            outcomes = [OperationOutcome.failure(describe_error(e))]
        ctx.analyzer.record_batch(outcomes)

    async def _cancel_all(self, tasks: list[asyncio.Task]) -> None:
        """Cancel every task and wait until each one has finished."""
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    async def _settle(self, ctx: ExecutionContext, tasks: list[asyncio.Task]) -> None:
        """Wait for every task and turn task-level errors into failure outcomes."""
        ctx.set_state(RunState.EXECUTING)
        results = await asyncio.gather(*tasks, return_exceptions=True)

        ctx.set_state(RunState.SETTLING)
        for task, result in zip(tasks, results, strict=True):
            if isinstance(result, BaseException):
                ctx.log_sink.error(
                    f"Task {task.get_name()} ended with an error: {describe_error(result)}"
                )
                ctx.analyzer.record(OperationOutcome.failure(describe_error(result)))


class BurstStrategy(SchedulingStrategy):
    """Launch one task per client, optionally staggered over a ramp-up window.

    Without ramp-up every task starts at once. With ``ramp_up_seconds`` set,
    task ``i`` is released ``i * ramp_up_seconds / concurrency`` seconds after
    the first one. Each task runs ``iterations_per_client`` workflows (default
    one) back to back.
    """

    run_kind = RunKind.BURST

    async def execute(self, ctx: ExecutionContext) -> None:
        interval = ctx.config.ramp_up_interval_sec
        iterations = ctx.config.iterations_per_client or 1

        if interval > 0:
            ctx.log_sink.info(
                f"Ramping up {len(ctx.clients)} clients over "
                f"{ctx.config.ramp_up_seconds}s ({interval * 1000:.2f}ms between starts)"
            )

        tasks: list[asyncio.Task] = []
        try:
            for index, client in enumerate(ctx.clients):
                if index > 0 and interval > 0:
                    await asyncio.sleep(interval)
                tasks.append(
                    asyncio.create_task(
                        self._run_client(ctx, client, iterations),
                        name=f"burst-client-{index}",
                    )
                )
            await self._settle(ctx, tasks)
        except BaseException:
            await self._cancel_all(tasks)
            raise

    async def _run_client(
        self, ctx: ExecutionContext, client: WorkflowClientProtocol, iterations: int
    ) -> None:
        for _ in range(iterations):
            await self._execute_workflow(ctx, client)


class SustainedStrategy(SchedulingStrategy):
    """Keep every client looping over its workflow until a wall-clock deadline.

    The deadline is checked between iterations only, so a loop may overrun it
    by up to one workflow. Each iteration is followed by a short idle pause.
    """

    run_kind = RunKind.DURATION_BOUNDED

    def validate_config(self, config: RunConfiguration) -> None:
        if config.duration_seconds is None or config.duration_seconds <= 0:
            raise ConfigurationError(
                "A duration-bounded run requires a positive duration_seconds. "
                f"Got: {config.duration_seconds!r}."
            )

    async def execute(self, ctx: ExecutionContext) -> None:
        self.validate_config(ctx.config)
        deadline = time.perf_counter() + ctx.config.duration_seconds

        ctx.log_sink.info(
            f"Running {len(ctx.clients)} clients for {ctx.config.duration_seconds}s"
        )
        tasks = [
            asyncio.create_task(
                self._run_client(ctx, client, deadline),
                name=f"sustained-client-{index}",
            )
            for index, client in enumerate(ctx.clients)
        ]

        try:
            await self._settle(ctx, tasks)
        except BaseException:
            await self._cancel_all(tasks)
            raise

    async def _run_client(
        self, ctx: ExecutionContext, client: WorkflowClientProtocol, deadline: float
    ) -> None:
        while time.perf_counter() < deadline:
            await self._execute_workflow(ctx, client)
            await asyncio.sleep(ctx.idle_interval_sec)
