# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Load orchestrator driving pools of virtual clients."""

import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from mcpperf.clients.protocols import ClientFactory
from mcpperf.common.config import RunConfiguration
from mcpperf.common.constants import DEFAULT_IDLE_INTERVAL_SEC, NANOS_PER_MILLIS
from mcpperf.common.enums import ExportFormat, RunState
from mcpperf.common.exceptions import RunInProgressError
from mcpperf.common.logging import LogSinkProtocol, NullLogSink
from mcpperf.common.models import OperationOutcome, RunReport
from mcpperf.metrics import PerformanceAnalyzer
from mcpperf.orchestrator.models import ExecutionContext
from mcpperf.orchestrator.pool import ClientPool
from mcpperf.orchestrator.strategies import (
    BurstStrategy,
    SchedulingStrategy,
    SustainedStrategy,
)
from mcpperf.workflow import WorkflowExecutor

__all__ = [
    "LoadOrchestrator",
]


class LoadOrchestrator:
    """Runs load tests against a remote service with a pool of virtual clients.

    The orchestrator owns the client pool and the analyzer. One run at a time
    moves through ``IDLE -> PROVISIONING -> SCHEDULING -> EXECUTING ->
    SETTLING -> REPORTING -> IDLE``. Per-operation failures are recorded as
    outcomes and never abort a run; configuration errors are raised before
    any remote call is made.

    No timeout is applied to remote calls. A call that never returns keeps its
    client task, and for burst runs the whole run, waiting.
    """

    def __init__(
        self,
        client_factory: ClientFactory,
        *,
        analyzer: PerformanceAnalyzer | None = None,
        executor: WorkflowExecutor | None = None,
        log_sink: LogSinkProtocol | None = None,
        max_clients: int | None = None,
        idle_interval_sec: float = DEFAULT_IDLE_INTERVAL_SEC,
    ) -> None:
        """Initialize LoadOrchestrator.

        Args:
            client_factory: Creates one client handle per call
            analyzer: Outcome accumulator, a fresh one by default
            executor: Workflow executor, a fresh one by default
            log_sink: Destination for progress messages and the run summary
            max_clients: Upper bound for the client pool, unbounded by default
            idle_interval_sec: Pause between sustained-loop iterations
        """
        if idle_interval_sec < 0:
            raise ValueError(
                f"idle_interval_sec must be non-negative, got {idle_interval_sec}"
            )
        self.log_sink = log_sink or NullLogSink()
        self.analyzer = analyzer or PerformanceAnalyzer()
        self.executor = executor or WorkflowExecutor(self.log_sink)
        self.pool = ClientPool(client_factory, max_clients, self.log_sink)
        self.idle_interval_sec = idle_interval_sec
        self._state = RunState.IDLE

    @property
    def state(self) -> RunState:
        return self._state

    def ensure_capacity(self, count: int) -> int:
        """Grow the client pool to at least ``count`` handles."""
        return self.pool.ensure_capacity(count)

    def set_clients_amount(self, amount: int) -> int:
        """Add ``amount`` handles to the pool."""
        return self.pool.add_clients(amount)

    async def run_burst(
        self, config: RunConfiguration | Mapping[str, Any]
    ) -> RunReport:
        """Run one fixed-concurrency burst, optionally ramped up.

        Args:
            config: Run configuration. ``duration_seconds`` is ignored.

        Returns:
            RunReport of kind ``burst``
        """
        return await self._run(config, BurstStrategy())

    async def run_sustained(
        self, config: RunConfiguration | Mapping[str, Any]
    ) -> RunReport:
        """Keep ``concurrency`` clients busy until ``duration_seconds`` elapse.

        Raises:
            ConfigurationError: If ``duration_seconds`` is missing
        """
        return await self._run(config, SustainedStrategy())

    run_concurrent_test = run_burst
    run_load_test = run_sustained

    async def run_initialization_check(self) -> list[OperationOutcome]:
        """Run one workflow on the first client as a connectivity smoke test.

        The outcomes are returned and not recorded in the analyzer.
        """
        with self._exclusive(RunState.EXECUTING):
            self.pool.ensure_capacity(1)
            client = self.pool.take(1)[0]
            return await self.executor.run_workflow(client)

    async def run_sequential(self) -> list[OperationOutcome]:
        """Run one workflow on every pooled client, one client after another.

        The outcomes are returned and not recorded in the analyzer.
        """
        outcomes: list[OperationOutcome] = []
        with self._exclusive(RunState.EXECUTING):
            for client in self.pool.handles:
                outcomes.extend(await self.executor.run_workflow(client))
        return outcomes

    def export_report(self, report: RunReport, fmt: ExportFormat | str) -> str:
        """Serialize ``report``. CSV rows are the outcomes carried by the report."""
        return self.analyzer.export(report, fmt)

    export_results = export_report

    async def reset(self) -> None:
        """Discard every client and recorded outcome."""
        with self._exclusive(RunState.SETTLING):
            await self.pool.reset()
            self.analyzer.reset()

    async def aclose(self) -> None:
        await self.pool.reset()

    async def _run(
        self,
        config: RunConfiguration | Mapping[str, Any],
        strategy: SchedulingStrategy,
    ) -> RunReport:
        if not isinstance(config, RunConfiguration):
            config = RunConfiguration.model_validate(config)

        with self._exclusive(RunState.PROVISIONING):
            strategy.validate_config(config)
            self.pool.ensure_capacity(config.concurrency)
            clients = self.pool.take(config.concurrency)
            self.analyzer.reset()

            self.log_sink.info(
                f"Starting {strategy.run_kind} run with {config.concurrency} clients"
            )
            self._set_state(RunState.SCHEDULING)
            started_at = datetime.now(timezone.utc)
            start_ns = time.perf_counter_ns()

            await strategy.execute(
                ExecutionContext(
                    config=config,
                    clients=clients,
                    executor=self.executor,
                    analyzer=self.analyzer,
                    log_sink=self.log_sink,
                    idle_interval_sec=self.idle_interval_sec,
                    set_state=self._set_state,
                )
            )

            duration_ms = (time.perf_counter_ns() - start_ns) / NANOS_PER_MILLIS
            ended_at = datetime.now(timezone.utc)

            self._set_state(RunState.REPORTING)
            report = RunReport(
                run_kind=strategy.run_kind,
                config=config,
                metrics=self.analyzer.compute_aggregate(duration_ms),
                started_at=started_at,
                ended_at=ended_at,
                outcomes=list(self.analyzer.outcomes),
            )
            self.analyzer.render_human_report(report, self.log_sink)
            return report

    @contextmanager
    def _exclusive(self, state: RunState) -> Iterator[None]:
        """Hold the orchestrator in ``state`` and return to idle on exit.

        Raises:
            RunInProgressError: If the orchestrator is not idle
        """
        self._require_idle()
        self._set_state(state)
        try:
            yield
        finally:
            self._set_state(RunState.IDLE)

    def _require_idle(self) -> None:
        if self._state != RunState.IDLE:
            raise RunInProgressError(
                f"Cannot start a new run while the orchestrator is {self._state}."
            )

    def _set_state(self, state: RunState) -> None:
        if state != self._state:
            self.log_sink.debug(f"Run state: {self._state} -> {state}")
        self._state = state
