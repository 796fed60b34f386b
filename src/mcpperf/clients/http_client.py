# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTTP client speaking MCP-style JSON-RPC to a single server."""

import itertools
import re
from typing import Any

import httpx
import orjson

from mcpperf import __version__
from mcpperf.common.config import ClientConfig
from mcpperf.common.constants import (
    BATCH_ACCEPT_HEADER,
    CLIENT_NAME,
    JSONRPC_VERSION,
    MCP_ENDPOINT_PATH,
    MCP_PROTOCOL_VERSION,
    MCP_SESSION_HEADER,
    SSE_ACCEPT_HEADER,
)
from mcpperf.common.enums import ResponseMode
from mcpperf.common.logging import LogSinkProtocol, NullLogSink

_SSE_DATA_RE = re.compile(r"data: (.+)")


class MCPHttpClient:
    """Virtual client that runs the initialize / acknowledge / list-tools exchange.

    The session id returned by ``initialize`` is attached to every later
    request made by this client. Non-2xx responses raise
    :class:`httpx.HTTPStatusError`.
    """

    def __init__(
        self,
        base_url: str,
        response_mode: ResponseMode | str = ResponseMode.SSE,
        *,
        log_sink: LogSinkProtocol | None = None,
        request_timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.response_mode = ResponseMode(response_mode)
        self.log_sink = log_sink or NullLogSink()
        self._message_ids = itertools.count(1)
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": self._accept_header()},
            timeout=httpx.Timeout(request_timeout),
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        log_sink: LogSinkProtocol | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "MCPHttpClient":
        return cls(
            config.base_url,
            config.response_mode,
            log_sink=log_sink,
            request_timeout=config.request_timeout,
            transport=transport,
        )

    @property
    def session_id(self) -> str | None:
        return self._http.headers.get(MCP_SESSION_HEADER)

    def set_response_mode(self, mode: ResponseMode | str) -> None:
        self.response_mode = ResponseMode(mode)
        self._http.headers["Accept"] = self._accept_header()
        self.log_sink.info(f"Response mode set to: {self.response_mode}")

    async def initialize(self) -> Any:
        self.log_sink.debug("Initializing...")
        message = {
            "jsonrpc": JSONRPC_VERSION,
            "id": next(self._message_ids),
            "method": "initialize",
            "params": {
                "protocolVersion": MCP_PROTOCOL_VERSION,
                "capabilities": {
                    "roots": {"listChanged": True},
                    "sampling": {},
                },
                "clientInfo": {"name": CLIENT_NAME, "version": __version__},
            },
        }
        response = await self._post(message)
        session_id = response.headers.get(MCP_SESSION_HEADER)
        if session_id:
            self._http.headers[MCP_SESSION_HEADER] = session_id
        return self._decode(response)

    async def acknowledge(self) -> Any:
        message = {
            "jsonrpc": JSONRPC_VERSION,
            "method": "notifications/initialize",
        }
        response = await self._post(message)
        self.log_sink.debug(
            f"Acknowledged initialize. | {MCP_SESSION_HEADER}: {self.session_id}"
        )
        return response.text

    async def list_operations(self) -> Any:
        """List the tools the server exposes."""
        message = {
            "jsonrpc": JSONRPC_VERSION,
            "id": next(self._message_ids),
            "method": "tools/list",
        }
        response = await self._post(message)

        if self.response_mode == ResponseMode.SSE:
            match = _SSE_DATA_RE.search(response.text)
            if match is None:
                self.log_sink.error("Could not parse SSE tools response")
                return response.text
            data = orjson.loads(match.group(1))
        else:
            data = orjson.loads(response.content)

        tools = []
        if isinstance(data, dict):
            tools = (data.get("result") or {}).get("tools", [])
        self.log_sink.debug(
            f"Available tools ({self.response_mode} mode): {len(tools)}"
        )
        return data

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _post(self, message: dict[str, Any]) -> httpx.Response:
        response = await self._http.post(
            MCP_ENDPOINT_PATH,
            content=orjson.dumps(message),
            headers={"Content-Type": "application/json"},
        )
        response.raise_for_status()
        return response

    def _decode(self, response: httpx.Response) -> Any:
        """Decode a JSON or single-event SSE body, falling back to raw text."""
        match = _SSE_DATA_RE.search(response.text)
        payload = match.group(1) if match else response.text
        try:
            return orjson.loads(payload)
        except orjson.JSONDecodeError:
            return response.text

    def _accept_header(self) -> str:
        if self.response_mode == ResponseMode.SSE:
            return SSE_ACCEPT_HEADER
        return BATCH_ACCEPT_HEADER
