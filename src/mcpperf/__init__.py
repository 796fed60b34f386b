# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""mcpperf - Load generation and latency reporting for MCP servers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mcpperf")
except PackageNotFoundError:
    __version__ = "unknown"
