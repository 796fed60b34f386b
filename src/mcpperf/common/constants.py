# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

MILLIS_PER_SECOND = 1000
NANOS_PER_MILLIS = 1_000_000
NANOS_PER_SECOND = 1_000_000_000

# Pause between iterations of a sustained-load loop. Keeps a loop from
# spinning when the server answers faster than the scheduler can check
# the deadline. Tunable, not a backoff.
DEFAULT_IDLE_INTERVAL_SEC = 0.01

MCP_ENDPOINT_PATH = "/mcp"
MCP_SESSION_HEADER = "mcp-session-id"
MCP_PROTOCOL_VERSION = "2025-03-26"
JSONRPC_VERSION = "2.0"

CLIENT_NAME = "mcpperf"

SSE_ACCEPT_HEADER = "text/event-stream, application/json"
BATCH_ACCEPT_HEADER = "application/json"

REPORT_RULE_WIDTH = 60
