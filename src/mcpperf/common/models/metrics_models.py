# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import Field

from mcpperf.common.base_models import MCPPerfBaseModel


class Percentiles(MCPPerfBaseModel):
    """Latency percentiles in milliseconds."""

    p50: float = 0.0
    p90: float = 0.0
    p95: float = 0.0
    p99: float = 0.0


class LatencyStatistics(MCPPerfBaseModel):
    """Dispersion of the successful latency sample in milliseconds."""

    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    median: float = 0.0
    standard_deviation: float = 0.0


class AggregateMetrics(MCPPerfBaseModel):
    """Statistics derived from every outcome recorded during a run.

    Attributes:
        total_operations: Number of recorded outcomes
        successful_operations: Outcomes with ``success=True``
        failed_operations: Outcomes with ``success=False``
        total_duration: Wall-clock duration of the run in milliseconds
        throughput: Successful operations per second of wall-clock time
        latencies: Sorted latencies of the successful outcomes
        percentiles: p50/p90/p95/p99 of ``latencies``
        statistics: min/max/mean/median/standard deviation of ``latencies``
        error_rate: Failed outcomes as a percentage of all outcomes
        timestamps: Start time of every outcome in recording order
    """

    total_operations: int = Field(ge=0)
    successful_operations: int = Field(ge=0)
    failed_operations: int = Field(ge=0)
    total_duration: float = Field(ge=0)
    throughput: float = Field(ge=0)
    latencies: list[float] = Field(default_factory=list)
    percentiles: Percentiles = Field(default_factory=Percentiles)
    statistics: LatencyStatistics = Field(default_factory=LatencyStatistics)
    error_rate: float = Field(ge=0, le=100)
    timestamps: list[int] = Field(default_factory=list)

    @property
    def success_rate(self) -> float:
        return 100.0 - self.error_rate
