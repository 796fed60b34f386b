# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for MCPHttpClient against an in-process mock transport."""

import httpx
import orjson
import pytest

from mcpperf.clients import MCPHttpClient, WorkflowClientProtocol
from mcpperf.common.config import ClientConfig
from mcpperf.common.constants import MCP_PROTOCOL_VERSION
from mcpperf.common.enums import ResponseMode
from mcpperf.workflow import WorkflowExecutor

BASE_URL = "http://mcp.test"
SESSION_ID = "session-123"
TOOLS_RESULT = {"jsonrpc": "2.0", "id": 2, "result": {"tools": [{"name": "echo"}]}}


class FakeMCPServer:
    """Records requests and answers like a minimal MCP server."""

    def __init__(self, response_mode: ResponseMode, status_code: int = 200) -> None:
        self.response_mode = response_mode
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="server error")

        message = orjson.loads(request.content)
        method = message["method"]
        if method == "initialize":
            result = {"jsonrpc": "2.0", "id": message["id"], "result": {"ok": True}}
            return self._reply(result, headers={"mcp-session-id": SESSION_ID})
        if method == "notifications/initialize":
            return httpx.Response(202, text="")
        if method == "tools/list":
            return self._reply(TOOLS_RESULT)
        return httpx.Response(404)

    def _reply(self, payload: dict, headers: dict | None = None) -> httpx.Response:
        if self.response_mode == ResponseMode.SSE:
            body = b"event: message\ndata: " + orjson.dumps(payload) + b"\n\n"
            return httpx.Response(
                200,
                content=body,
                headers={"content-type": "text/event-stream", **(headers or {})},
            )
        return httpx.Response(200, json=payload, headers=headers)


def make_client(server: FakeMCPServer, **kwargs) -> MCPHttpClient:
    return MCPHttpClient(
        BASE_URL,
        server.response_mode,
        transport=httpx.MockTransport(server),
        **kwargs,
    )


@pytest.mark.asyncio
class TestMCPHttpClient:
    @pytest.mark.parametrize("mode", [ResponseMode.SSE, ResponseMode.BATCH])
    async def test_full_workflow(self, mode):
        server = FakeMCPServer(mode)
        client = make_client(server)

        init = await client.initialize()
        await client.acknowledge()
        tools = await client.list_operations()
        await client.aclose()

        assert init["result"] == {"ok": True}
        assert tools == TOOLS_RESULT
        assert [r.url.path for r in server.requests] == ["/mcp"] * 3

    async def test_initialize_message(self):
        server = FakeMCPServer(ResponseMode.BATCH)
        client = make_client(server)

        await client.initialize()

        body = orjson.loads(server.requests[0].content)
        assert body["jsonrpc"] == "2.0"
        assert body["method"] == "initialize"
        assert body["params"]["protocolVersion"] == MCP_PROTOCOL_VERSION
        assert body["params"]["clientInfo"]["name"] == "mcpperf"
        assert server.requests[0].headers["content-type"] == "application/json"

    async def test_session_id_is_sent_after_initialize(self):
        server = FakeMCPServer(ResponseMode.SSE)
        client = make_client(server)

        assert client.session_id is None
        await client.initialize()
        await client.acknowledge()

        assert client.session_id == SESSION_ID
        assert "mcp-session-id" not in server.requests[0].headers
        assert server.requests[1].headers["mcp-session-id"] == SESSION_ID

    async def test_acknowledge_is_a_notification(self):
        server = FakeMCPServer(ResponseMode.SSE)
        client = make_client(server)

        await client.acknowledge()

        body = orjson.loads(server.requests[0].content)
        assert body == {"jsonrpc": "2.0", "method": "notifications/initialize"}

    @pytest.mark.parametrize(
        "mode,accept",
        [
            (ResponseMode.SSE, "text/event-stream, application/json"),
            (ResponseMode.BATCH, "application/json"),
        ],
    )  # fmt: skip
    async def test_accept_header(self, mode, accept):
        server = FakeMCPServer(mode)
        await make_client(server).initialize()
        assert server.requests[0].headers["accept"] == accept

    async def test_set_response_mode(self, log_sink):
        server = FakeMCPServer(ResponseMode.BATCH)
        client = make_client(server, log_sink=log_sink)
        client.set_response_mode(ResponseMode.SSE)
        client.set_response_mode("batch")

        await client.list_operations()

        assert server.requests[0].headers["accept"] == "application/json"
        assert log_sink.messages["info"][-1] == "Response mode set to: batch"

    async def test_unparseable_sse_tools_response(self, log_sink):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="event: ping\n\n")

        client = MCPHttpClient(
            BASE_URL, log_sink=log_sink, transport=httpx.MockTransport(handler)
        )

        assert await client.list_operations() == "event: ping\n\n"
        assert log_sink.messages["error"] == ["Could not parse SSE tools response"]

    async def test_http_error_raises(self):
        client = make_client(FakeMCPServer(ResponseMode.SSE, status_code=500))
        with pytest.raises(httpx.HTTPStatusError):
            await client.initialize()

    async def test_http_error_becomes_failure_outcome(self):
        client = make_client(FakeMCPServer(ResponseMode.SSE, status_code=503))

        outcomes = await WorkflowExecutor().run_workflow(client)

        assert len(outcomes) == 1
        assert outcomes[0].success is False
        assert "503" in outcomes[0].error

    async def test_from_config(self):
        server = FakeMCPServer(ResponseMode.BATCH)
        config = ClientConfig(base_url=f"{BASE_URL}/", response_mode="batch")
        client = MCPHttpClient.from_config(
            config, transport=httpx.MockTransport(server)
        )

        assert client.response_mode == ResponseMode.BATCH
        await client.initialize()
        assert str(server.requests[0].url) == f"{BASE_URL}/mcp"


def test_satisfies_workflow_protocol():
    assert isinstance(MCPHttpClient(BASE_URL), WorkflowClientProtocol)
