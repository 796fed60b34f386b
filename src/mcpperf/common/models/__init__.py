# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from mcpperf.common.models.metrics_models import (
    AggregateMetrics,
    LatencyStatistics,
    Percentiles,
)
from mcpperf.common.models.outcome import OperationOutcome, now_epoch_millis
from mcpperf.common.models.run_report import RunReport

__all__ = [
    "AggregateMetrics",
    "LatencyStatistics",
    "OperationOutcome",
    "Percentiles",
    "RunReport",
    "now_epoch_millis",
]
