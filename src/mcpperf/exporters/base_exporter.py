# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Base class for run report exporters."""

from abc import ABC, abstractmethod
from pathlib import Path

from mcpperf.common.models import RunReport


class ReportExporter(ABC):
    """Serializes a :class:`RunReport` to text.

    The report is the only input, so identical reports always export to
    identical text.
    """

    file_extension: str = ""

    def export(self, report: RunReport) -> str:
        """Return the serialized report."""
        return self._generate_content(report)

    def write(self, report: RunReport, path: Path) -> Path:
        """Write the serialized report to ``path`` and return it."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.export(report), encoding="utf-8")
        return path

    def get_file_name(self, stem: str = "mcpperf_report") -> str:
        return f"{stem}.{self.file_extension}"

    @abstractmethod
    def _generate_content(self, report: RunReport) -> str:
        pass
