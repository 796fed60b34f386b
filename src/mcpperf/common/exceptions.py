# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class MCPPerfError(Exception):
    """Base class for all exceptions raised by mcpperf."""


class ConfigurationError(MCPPerfError):
    """A run was requested with a configuration it cannot honor.

    Raised before any work is scheduled. Never recovered into the metrics stream.
    """


class PoolCapacityError(ConfigurationError):
    """The client pool cannot grow to the requested number of handles."""

    def __init__(self, requested: int, max_size: int) -> None:
        super().__init__(
            f"Client pool cannot provide {requested} clients: "
            f"the pool is capped at {max_size}."
        )
        self.requested = requested
        self.max_size = max_size


class RunInProgressError(ConfigurationError):
    """A run was started while another run on the same orchestrator is active."""


class UnsupportedExportFormatError(MCPPerfError, ValueError):
    """The requested export format is not known."""
