# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: scripted workflow clients and report builders."""

import asyncio
import time
from datetime import datetime, timedelta, timezone

import pytest

from mcpperf.common.config import RunConfiguration
from mcpperf.common.enums import RunKind
from mcpperf.common.models import OperationOutcome, RunReport
from mcpperf.metrics import PerformanceAnalyzer


class FakeWorkflowClient:
    """Scripted client. Each step sleeps ``delay`` seconds, then may raise.

    Attributes:
        fail_on: Step name that raises ``error`` on every call
        started_at: perf_counter value of the first ``initialize`` call
        calls: Every step invoked, in order
    """

    def __init__(
        self,
        delay: float = 0.001,
        fail_on: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.delay = delay
        self.fail_on = fail_on
        self.error = error or RuntimeError(f"{fail_on} failed")
        self.started_at: float | None = None
        self.calls: list[str] = []
        self.closed = False

    async def _step(self, name: str) -> dict:
        self.calls.append(name)
        await asyncio.sleep(self.delay)
        if name == self.fail_on:
            raise self.error
        return {"step": name}

    async def initialize(self) -> dict:
        if self.started_at is None:
            self.started_at = time.perf_counter()
        return await self._step("initialize")

    async def acknowledge(self) -> dict:
        return await self._step("acknowledge")

    async def list_operations(self) -> dict:
        return await self._step("list_operations")

    async def aclose(self) -> None:
        self.closed = True


class RecordingLogSink:
    """Log sink keeping every message per level."""

    def __init__(self) -> None:
        self.messages: dict[str, list[str]] = {
            "error": [],
            "warning": [],
            "info": [],
            "debug": [],
        }

    def error(self, msg: str, *args, **kwargs) -> None:
        self.messages["error"].append(msg)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.messages["warning"].append(msg)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.messages["info"].append(msg)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.messages["debug"].append(msg)


@pytest.fixture
def fake_client_cls() -> type[FakeWorkflowClient]:
    return FakeWorkflowClient


@pytest.fixture
def created_clients() -> list[FakeWorkflowClient]:
    """Clients created by ``client_factory``, in creation order."""
    return []


@pytest.fixture
def client_factory(created_clients):
    """Factory producing healthy fake clients and remembering them."""

    def factory() -> FakeWorkflowClient:
        client = FakeWorkflowClient()
        created_clients.append(client)
        return client

    return factory


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()


def make_outcome(
    latency: float, success: bool = True, started_at: int = 1_700_000_000_000
) -> OperationOutcome:
    if not success:
        return OperationOutcome.failure("boom", started_at)
    return OperationOutcome(
        success=True, latency_millis=latency, started_at_epoch_millis=started_at
    )


@pytest.fixture
def outcome():
    """Builder for a single outcome: ``outcome(latency, success=True, started_at=...)``."""
    return make_outcome


@pytest.fixture
def sample_outcomes() -> list[OperationOutcome]:
    return [
        make_outcome(10.0, started_at=1_700_000_000_000),
        make_outcome(20.0, started_at=1_700_000_000_010),
        make_outcome(0.0, success=False, started_at=1_700_000_000_020),
        make_outcome(30.0, started_at=1_700_000_000_030),
        make_outcome(40.0, started_at=1_700_000_000_040),
    ]


@pytest.fixture
def sample_report(sample_outcomes) -> RunReport:
    analyzer = PerformanceAnalyzer()
    analyzer.record_batch(sample_outcomes)
    started_at = datetime(2025, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)
    return RunReport(
        run_kind=RunKind.BURST,
        config=RunConfiguration(concurrency=4, ramp_up_seconds=2),
        metrics=analyzer.compute_aggregate(2000.0),
        started_at=started_at,
        ended_at=started_at + timedelta(seconds=2),
        outcomes=sample_outcomes,
    )
