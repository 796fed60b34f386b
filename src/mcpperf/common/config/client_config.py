# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated

from pydantic import Field, field_validator

from mcpperf.common.base_models import MCPPerfBaseModel
from mcpperf.common.enums import ResponseMode


class ClientConfig(MCPPerfBaseModel):
    """Settings shared by every HTTP client in the pool."""

    base_url: Annotated[
        str,
        Field(
            min_length=1,
            description="Base URL of the MCP server, without the /mcp path.",
        ),
    ]

    response_mode: Annotated[
        ResponseMode,
        Field(
            description="Whether the server answers with server-sent events or plain JSON.",
        ),
    ] = ResponseMode.SSE

    request_timeout: Annotated[
        float | None,
        Field(
            gt=0,
            description="Per-request timeout in seconds. None waits forever; "
            "a hung request then hangs the client that issued it.",
        ),
    ] = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
