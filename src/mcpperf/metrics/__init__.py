# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Outcome accumulation and run statistics."""

from mcpperf.metrics.analyzer import PerformanceAnalyzer
from mcpperf.metrics.statistics import (
    compute_latency_statistics,
    compute_percentiles,
    quantile_sorted,
)

__all__ = [
    "PerformanceAnalyzer",
    "compute_latency_statistics",
    "compute_percentiles",
    "quantile_sorted",
]
