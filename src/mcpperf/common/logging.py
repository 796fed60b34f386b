# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Log sinks for mcpperf.

Library code never configures logging. Every component accepts a sink that
satisfies :class:`LogSinkProtocol` and defaults to :class:`NullLogSink`. A
standard :class:`logging.Logger` satisfies the protocol, so applications can
pass one directly (see :func:`setup_rich_logging`).
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "mcpperf"


@runtime_checkable
class LogSinkProtocol(Protocol):
    """Leveled message sink. Callers only emit; they never branch on level."""

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class NullLogSink:
    """Sink that drops every message."""

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        pass


def setup_rich_logging(
    level: int | str = logging.INFO,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the mcpperf logger to print through rich and return it.

    Calling this more than once replaces the previously installed handler, so
    the CLI can re-run it without duplicating output.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = False
    return logger
