# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import AwareDatetime, Field

from mcpperf.common.base_models import MCPPerfBaseModel
from mcpperf.common.config import RunConfiguration
from mcpperf.common.enums import RunKind
from mcpperf.common.models.metrics_models import AggregateMetrics
from mcpperf.common.models.outcome import OperationOutcome


class RunReport(MCPPerfBaseModel):
    """Everything known about one finished run. Unit of export.

    Attributes:
        run_kind: Scheduling policy that produced the run
        config: Configuration the run was started with
        metrics: Aggregates over every outcome of the run
        started_at: UTC time before scheduling began
        ended_at: UTC time after all work settled
        outcomes: Every outcome of the run in recording order
    """

    run_kind: RunKind
    config: RunConfiguration
    metrics: AggregateMetrics
    started_at: AwareDatetime
    ended_at: AwareDatetime
    outcomes: list[OperationOutcome] = Field(default_factory=list)
