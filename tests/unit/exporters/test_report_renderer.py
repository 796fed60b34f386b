# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from datetime import datetime, timezone

from mcpperf.common.config import RunConfiguration
from mcpperf.common.enums import RunKind
from mcpperf.common.logging import NullLogSink
from mcpperf.common.models import RunReport
from mcpperf.exporters import ReportRenderer
from mcpperf.metrics import PerformanceAnalyzer


class TestReportRenderer:
    def test_sections_and_values(self, sample_report, log_sink):
        ReportRenderer(log_sink).render(sample_report)
        lines = log_sink.messages["info"]

        assert lines[0] == "=" * 60
        assert lines[1] == "BURST PERFORMANCE REPORT"
        assert lines[-1] == "=" * 60
        for header in (
            "Test Configuration:",
            "Operations Summary:",
            "Latency Statistics (ms):",
            "Latency Percentiles (ms):",
        ):
            assert header in lines
        assert "  Concurrency Level: 4" in lines
        assert "  Ramp-up time: 2.0s" in lines
        assert "  Success Rate: 80.00%" in lines
        assert "  Throughput: 2.00 ops/sec" in lines
        assert "  P50 (median): 25.00" in lines
        assert "  Median: 25.00" in lines

    def test_optional_config_lines(self, sample_report):
        lines = ReportRenderer(NullLogSink()).format_lines(sample_report)
        assert not any(line.startswith("  Duration:") for line in lines)
        assert not any(line.startswith("  Iterations per client:") for line in lines)

    def test_all_failed_run(self, outcome, log_sink):
        analyzer = PerformanceAnalyzer()
        analyzer.record_batch([outcome(0.0, success=False)] * 2)
        now = datetime.now(timezone.utc)
        report = RunReport(
            run_kind=RunKind.DURATION_BOUNDED,
            config=RunConfiguration(concurrency=2, duration_seconds=1.5),
            metrics=analyzer.compute_aggregate(1500.0),
            started_at=now,
            ended_at=now,
        )

        analyzer.render_human_report(report, log_sink)
        lines = log_sink.messages["info"]

        assert lines[1] == "DURATION-BOUNDED PERFORMANCE REPORT"
        assert "  Duration: 1.5s" in lines
        assert "  Success Rate: 0.00%" in lines
        assert "  Failed: 2" in lines
        assert "  P99: 0.00" in lines
