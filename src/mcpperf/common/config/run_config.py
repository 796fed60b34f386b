# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field

from mcpperf.common.base_models import MCPPerfBaseModel


class RunConfiguration(MCPPerfBaseModel):
    """Load shape for one orchestrated run.

    The scheduling policy is picked by the orchestrator entry point, not by
    which of these fields are set. ``duration_seconds`` is required by
    sustained runs and ignored by burst runs.
    """

    concurrency: Annotated[
        int,
        Field(
            gt=0,
            description="Number of virtual clients driven at the same time. "
            "The client pool is grown to at least this size before the run.",
        ),
    ]

    duration_seconds: Annotated[
        float | None,
        Field(
            gt=0,
            description="Wall-clock length of a sustained run in seconds. "
            "Each client keeps repeating its workflow until this deadline passes.",
        ),
    ] = None

    iterations_per_client: Annotated[
        int | None,
        Field(
            gt=0,
            description="Number of workflows each client runs back to back during a burst run. "
            "Defaults to a single workflow per client.",
        ),
    ] = None

    ramp_up_seconds: Annotated[
        float | None,
        Field(
            ge=0,
            description="Spread the start of burst clients evenly over this many seconds. "
            "The first client starts immediately.",
        ),
    ] = None

    @property
    def ramp_up_interval_sec(self) -> float:
        """Delay between two consecutive client releases during ramp-up."""
        if not self.ramp_up_seconds:
            return 0.0
        return self.ramp_up_seconds / self.concurrency
