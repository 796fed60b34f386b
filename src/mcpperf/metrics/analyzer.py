# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Accumulates operation outcomes and turns them into run statistics."""

import threading
from collections.abc import Iterable

from mcpperf.common.constants import MILLIS_PER_SECOND
from mcpperf.common.enums import ExportFormat
from mcpperf.common.logging import LogSinkProtocol, NullLogSink
from mcpperf.common.models import (
    AggregateMetrics,
    LatencyStatistics,
    OperationOutcome,
    Percentiles,
    RunReport,
)
from mcpperf.exporters import ReportRenderer, get_exporter
from mcpperf.metrics.statistics import (
    compute_latency_statistics,
    compute_percentiles,
)

__all__ = [
    "PerformanceAnalyzer",
]


class PerformanceAnalyzer:
    """Append-only outcome accumulator with on-demand aggregation.

    Producers may call :meth:`record` and :meth:`record_batch` concurrently;
    appends are serialized by a lock so no outcome is lost or duplicated.
    Aggregation is expected to run after every producer has settled, and works
    on a snapshot either way.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._outcomes: list[OperationOutcome] = []

    def record(self, outcome: OperationOutcome) -> None:
        with self._lock:
            self._outcomes.append(outcome)

    def record_batch(self, outcomes: Iterable[OperationOutcome]) -> None:
        """Append several outcomes. They stay contiguous and in the given order."""
        batch = list(outcomes)
        with self._lock:
            self._outcomes.extend(batch)

    def reset(self) -> None:
        """Forget every recorded outcome. Call before reusing the analyzer for a new run."""
        with self._lock:
            self._outcomes = []

    @property
    def outcomes(self) -> tuple[OperationOutcome, ...]:
        """Snapshot of the recorded outcomes in recording order."""
        with self._lock:
            return tuple(self._outcomes)

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)

    def compute_aggregate(self, wall_clock_duration_millis: float) -> AggregateMetrics:
        """Compute run statistics over the recorded outcomes.

        Does not change the analyzer and may be called any number of times.

        Args:
            wall_clock_duration_millis: Elapsed time of the whole run. Throughput
                is measured against it rather than against summed latencies,
                since operations overlap.

        Returns:
            AggregateMetrics. When no outcome succeeded, the error rate is 100
            and every percentile and dispersion field is zero.
        """
        outcomes = self.outcomes
        total_duration = max(float(wall_clock_duration_millis), 0.0)
        successful = [o for o in outcomes if o.success]
        failed_count = len(outcomes) - len(successful)
        timestamps = [o.started_at_epoch_millis for o in outcomes]

        if not successful:
            return AggregateMetrics(
                total_operations=len(outcomes),
                successful_operations=0,
                failed_operations=failed_count,
                total_duration=total_duration,
                throughput=0.0,
                latencies=[],
                percentiles=Percentiles(),
                statistics=LatencyStatistics(),
                error_rate=100.0,
                timestamps=timestamps,
            )

        latencies = sorted(o.latency_millis for o in successful)
        throughput = (
            len(successful) / (total_duration / MILLIS_PER_SECOND)
            if total_duration > 0
            else 0.0
        )

        return AggregateMetrics(
            total_operations=len(outcomes),
            successful_operations=len(successful),
            failed_operations=failed_count,
            total_duration=total_duration,
            throughput=throughput,
            latencies=latencies,
            percentiles=compute_percentiles(latencies),
            statistics=compute_latency_statistics(latencies),
            error_rate=failed_count / len(outcomes) * 100,
            timestamps=timestamps,
        )

    def export(self, report: RunReport, fmt: ExportFormat | str) -> str:
        """Serialize a report. The output depends on the report alone."""
        return get_exporter(fmt).export(report)

    def render_human_report(
        self, report: RunReport, log_sink: LogSinkProtocol | None = None
    ) -> None:
        ReportRenderer(log_sink or NullLogSink()).render(report)
