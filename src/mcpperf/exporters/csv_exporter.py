# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CSV exporter for run reports."""

import csv
import io

from mcpperf.common.models import RunReport
from mcpperf.exporters.base_exporter import ReportExporter

METADATA_SECTION = "# Test Metadata"
RAW_DATA_SECTION = "# Raw Operation Data"
RAW_DATA_HEADER = ["timestamp", "latency", "success", "error"]


class CsvReportExporter(ReportExporter):
    """Exports a run report to CSV.

    Layout:
    - ``# Test Metadata`` followed by ``Key,Value`` rows
    - Blank line separator
    - ``# Raw Operation Data`` followed by a ``timestamp,latency,success,error``
      header and one row per outcome of the report in recording order
    """

    file_extension = "csv"

    def _generate_content(self, report: RunReport) -> str:
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")

        writer.writerow([METADATA_SECTION])
        writer.writerows(self._metadata_rows(report))

        writer.writerow([])
        writer.writerow([RAW_DATA_SECTION])
        writer.writerow(RAW_DATA_HEADER)
        for outcome in report.outcomes:
            writer.writerow(
                [
                    outcome.started_at_epoch_millis,
                    self._format_number(outcome.latency_millis),
                    "true" if outcome.success else "false",
                    outcome.error or "",
                ]
            )

        return buf.getvalue()

    def _metadata_rows(self, report: RunReport) -> list[list[str]]:
        config = report.config
        metrics = report.metrics

        rows = [
            ["Test Type", str(report.run_kind)],
            ["Concurrency", str(config.concurrency)],
        ]
        if config.duration_seconds:
            rows.append(["Duration", self._format_number(config.duration_seconds)])
        if config.ramp_up_seconds:
            rows.append(["Ramp Up Time", self._format_number(config.ramp_up_seconds)])

        rows.extend(
            [
                ["Start Time", report.started_at.isoformat()],
                ["End Time", report.ended_at.isoformat()],
                ["Total Operations", str(metrics.total_operations)],
                ["Successful Operations", str(metrics.successful_operations)],
                ["Failed Operations", str(metrics.failed_operations)],
                ["Throughput (ops/sec)", f"{metrics.throughput:.2f}"],
                ["Error Rate (%)", f"{metrics.error_rate:.2f}"],
                ["P50 Latency (ms)", f"{metrics.percentiles.p50:.2f}"],
                ["P90 Latency (ms)", f"{metrics.percentiles.p90:.2f}"],
                ["P95 Latency (ms)", f"{metrics.percentiles.p95:.2f}"],
                ["P99 Latency (ms)", f"{metrics.percentiles.p99:.2f}"],
                ["Mean Latency (ms)", f"{metrics.statistics.mean:.2f}"],
                ["Min Latency (ms)", f"{metrics.statistics.min:.2f}"],
                ["Max Latency (ms)", f"{metrics.statistics.max:.2f}"],
                [
                    "Std Dev Latency (ms)",
                    f"{metrics.statistics.standard_deviation:.2f}",
                ],
            ]
        )
        return rows

    def _format_number(self, value: float) -> str:
        """Print whole numbers without a trailing ``.0``."""
        if float(value).is_integer():
            return str(int(value))
        return str(value)
