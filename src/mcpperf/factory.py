# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Convenience constructors for orchestrators talking HTTP to an MCP server."""

from functools import partial

import httpx

from mcpperf.clients import MCPHttpClient
from mcpperf.common.config import ClientConfig
from mcpperf.common.enums import ResponseMode
from mcpperf.common.logging import LogSinkProtocol
from mcpperf.orchestrator import LoadOrchestrator


def create_orchestrator(
    config: ClientConfig,
    *,
    log_sink: LogSinkProtocol | None = None,
    max_clients: int | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LoadOrchestrator:
    """Create an orchestrator whose pool holds :class:`MCPHttpClient` instances.

    Args:
        config: Server location, response mode and request timeout
        log_sink: Shared by the orchestrator and every client
        max_clients: Optional cap on the client pool
        transport: Custom httpx transport, mainly for tests
    """
    factory = partial(
        MCPHttpClient.from_config, config, log_sink=log_sink, transport=transport
    )
    return LoadOrchestrator(factory, log_sink=log_sink, max_clients=max_clients)


def create_sse_orchestrator(
    base_url: str, log_sink: LogSinkProtocol | None = None
) -> LoadOrchestrator:
    """Create an orchestrator for a server answering with server-sent events."""
    return create_orchestrator(
        ClientConfig(base_url=base_url, response_mode=ResponseMode.SSE),
        log_sink=log_sink,
    )


def create_batch_orchestrator(
    base_url: str, log_sink: LogSinkProtocol | None = None
) -> LoadOrchestrator:
    """Create an orchestrator for a server answering with plain JSON bodies."""
    return create_orchestrator(
        ClientConfig(base_url=base_url, response_mode=ResponseMode.BATCH),
        log_sink=log_sink,
    )
