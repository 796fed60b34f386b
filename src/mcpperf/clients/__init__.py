# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Wire-level clients for the remote service."""

from mcpperf.clients.http_client import MCPHttpClient
from mcpperf.clients.protocols import ClientFactory, WorkflowClientProtocol

__all__ = [
    "ClientFactory",
    "MCPHttpClient",
    "WorkflowClientProtocol",
]
