# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import time

from pydantic import Field

from mcpperf.common.base_models import MCPPerfBaseModel


class OperationOutcome(MCPPerfBaseModel):
    """Timed result of a single remote step."""

    success: bool = Field(description="Whether the step completed without raising")
    latency_millis: float = Field(
        ge=0,
        description="Wall-clock time spent in the step. Zero for the step that aborted a workflow.",
    )
    started_at_epoch_millis: int = Field(
        description="Unix epoch milliseconds at which the step started"
    )
    error: str | None = Field(
        default=None, description="Error message of a failed step"
    )

    @classmethod
    def failure(
        cls, error: str, started_at_epoch_millis: int | None = None
    ) -> "OperationOutcome":
        """Build a zero-latency failure outcome."""
        if started_at_epoch_millis is None:
            started_at_epoch_millis = now_epoch_millis()
        return cls(
            success=False,
            latency_millis=0.0,
            started_at_epoch_millis=started_at_epoch_millis,
            error=error,
        )


def now_epoch_millis() -> int:
    return time.time_ns() // 1_000_000
