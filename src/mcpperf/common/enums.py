# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum


class CaseInsensitiveStrEnum(str, Enum):
    """String enum that also accepts values regardless of case."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


class RunKind(CaseInsensitiveStrEnum):
    """Scheduling policy that produced a run report."""

    BURST = "burst"
    DURATION_BOUNDED = "duration-bounded"


class RunState(CaseInsensitiveStrEnum):
    """Lifecycle of a single orchestrated run."""

    IDLE = "idle"
    PROVISIONING = "provisioning"
    SCHEDULING = "scheduling"
    EXECUTING = "executing"
    SETTLING = "settling"
    REPORTING = "reporting"


class ResponseMode(CaseInsensitiveStrEnum):
    """How the server delivers JSON-RPC responses."""

    SSE = "sse"
    BATCH = "batch"


class ExportFormat(CaseInsensitiveStrEnum):
    JSON = "json"
    CSV = "csv"
