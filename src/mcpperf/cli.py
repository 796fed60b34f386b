# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for mcpperf."""

import asyncio
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError

from mcpperf.common.config import ClientConfig, RunConfiguration
from mcpperf.common.enums import ExportFormat, ResponseMode, RunKind
from mcpperf.common.exceptions import MCPPerfError
from mcpperf.common.logging import setup_rich_logging
from mcpperf.common.models import RunReport
from mcpperf.factory import create_orchestrator

app = App(
    name="mcpperf",
    help="Generate concurrent load against an MCP server and report latency statistics.",
)

BaseUrl = Annotated[str, Parameter(name=("--base-url", "-u"))]
Mode = Annotated[ResponseMode, Parameter(name=("--response-mode",))]
Concurrency = Annotated[int, Parameter(name=("--concurrency", "-c"))]
Output = Annotated[Path | None, Parameter(name=("--output", "-o"))]
Format = Annotated[ExportFormat | None, Parameter(name=("--format", "-f"))]
LogLevel = Annotated[str, Parameter(name=("--log-level",))]


@app.command
def burst(
    *,
    base_url: BaseUrl,
    concurrency: Concurrency = 10,
    ramp_up: Annotated[float | None, Parameter(name=("--ramp-up",))] = None,
    iterations: Annotated[int | None, Parameter(name=("--iterations",))] = None,
    response_mode: Mode = ResponseMode.SSE,
    output: Output = None,
    format: Format = None,
    log_level: LogLevel = "INFO",
) -> int:
    """Launch one workflow per client at once, or staggered over a ramp-up window.

    Parameters
    ----------
    base_url
        Base URL of the MCP server.
    concurrency
        Number of virtual clients.
    ramp_up
        Seconds over which client starts are spread.
    iterations
        Workflows each client runs back to back.
    response_mode
        Whether the server answers with server-sent events or plain JSON.
    output
        File to write the report to.
    format
        Report format. Defaults to the output file suffix, then json.
    log_level
        Logging level.
    """
    return _run_command(
        RunKind.BURST,
        {
            "concurrency": concurrency,
            "ramp_up_seconds": ramp_up,
            "iterations_per_client": iterations,
        },
        base_url=base_url,
        response_mode=response_mode,
        output=output,
        fmt=format,
        log_level=log_level,
    )


@app.command
def sustained(
    *,
    base_url: BaseUrl,
    duration: Annotated[float, Parameter(name=("--duration", "-d"))],
    concurrency: Concurrency = 10,
    response_mode: Mode = ResponseMode.SSE,
    output: Output = None,
    format: Format = None,
    log_level: LogLevel = "INFO",
) -> int:
    """Keep every client repeating its workflow until the duration elapses.

    Parameters
    ----------
    base_url
        Base URL of the MCP server.
    duration
        Run length in seconds.
    concurrency
        Number of virtual clients.
    response_mode
        Whether the server answers with server-sent events or plain JSON.
    output
        File to write the report to.
    format
        Report format. Defaults to the output file suffix, then json.
    log_level
        Logging level.
    """
    return _run_command(
        RunKind.DURATION_BOUNDED,
        {"concurrency": concurrency, "duration_seconds": duration},
        base_url=base_url,
        response_mode=response_mode,
        output=output,
        fmt=format,
        log_level=log_level,
    )


def _run_command(
    kind: RunKind,
    run_options: dict,
    *,
    base_url: str,
    response_mode: ResponseMode,
    output: Path | None,
    fmt: ExportFormat | None,
    log_level: str,
) -> int:
    logger = setup_rich_logging(log_level)

    try:
        run_config = RunConfiguration(**run_options)
        client_config = ClientConfig(base_url=base_url, response_mode=response_mode)
    except ValidationError as e:
        logger.error(f"Invalid configuration:\n{e}")
        return 1

    orchestrator = create_orchestrator(client_config, log_sink=logger)

    async def run() -> RunReport:
        try:
            if kind == RunKind.BURST:
                return await orchestrator.run_burst(run_config)
            return await orchestrator.run_sustained(run_config)
        finally:
            await orchestrator.aclose()

    try:
        report = asyncio.run(run())
    except MCPPerfError as e:
        logger.error(str(e))
        return 1

    if output is not None:
        export_format = fmt or _format_from_suffix(output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(
            orchestrator.export_report(report, export_format), encoding="utf-8"
        )
        logger.info(f"Report written to {output} ({export_format})")

    return 0


def _format_from_suffix(path: Path) -> ExportFormat:
    try:
        return ExportFormat(path.suffix.lstrip("."))
    except ValueError:
        return ExportFormat.JSON


if __name__ == "__main__":
    app()
