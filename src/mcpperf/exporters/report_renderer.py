# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Human-readable run summary written to a log sink."""

from mcpperf.common.constants import REPORT_RULE_WIDTH
from mcpperf.common.logging import LogSinkProtocol
from mcpperf.common.models import RunReport


class ReportRenderer:
    """Writes a multi-section text summary of a run report.

    Purely observational: rendering never feeds back into metrics. Every line
    goes to the sink at info level.
    """

    def __init__(self, log_sink: LogSinkProtocol) -> None:
        self.log_sink = log_sink

    def render(self, report: RunReport) -> None:
        for line in self.format_lines(report):
            self.log_sink.info(line)

    def format_lines(self, report: RunReport) -> list[str]:
        config = report.config
        metrics = report.metrics
        rule = "=" * REPORT_RULE_WIDTH

        lines = [
            rule,
            f"{str(report.run_kind).upper()} PERFORMANCE REPORT",
            rule,
            "Test Configuration:",
            f"  Concurrency Level: {config.concurrency}",
        ]
        if config.duration_seconds:
            lines.append(f"  Duration: {config.duration_seconds}s")
        if config.iterations_per_client:
            lines.append(f"  Iterations per client: {config.iterations_per_client}")
        if config.ramp_up_seconds:
            lines.append(f"  Ramp-up time: {config.ramp_up_seconds}s")

        lines += [
            "Operations Summary:",
            f"  Total Operations: {metrics.total_operations}",
            f"  Successful: {metrics.successful_operations}",
            f"  Failed: {metrics.failed_operations}",
            f"  Success Rate: {metrics.success_rate:.2f}%",
            f"  Throughput: {metrics.throughput:.2f} ops/sec",
            "Latency Statistics (ms):",
            f"  Min: {metrics.statistics.min:.2f}",
            f"  Max: {metrics.statistics.max:.2f}",
            f"  Mean: {metrics.statistics.mean:.2f}",
            f"  Median: {metrics.statistics.median:.2f}",
            f"  Std Dev: {metrics.statistics.standard_deviation:.2f}",
            "Latency Percentiles (ms):",
            f"  P50 (median): {metrics.percentiles.p50:.2f}",
            f"  P90: {metrics.percentiles.p90:.2f}",
            f"  P95: {metrics.percentiles.p95:.2f}",
            f"  P99: {metrics.percentiles.p99:.2f}",
            rule,
        ]
        return lines
