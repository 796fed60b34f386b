# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exporters and renderers for run reports."""

from mcpperf.common.enums import ExportFormat
from mcpperf.common.exceptions import UnsupportedExportFormatError
from mcpperf.exporters.base_exporter import ReportExporter
from mcpperf.exporters.csv_exporter import CsvReportExporter
from mcpperf.exporters.json_exporter import JsonReportExporter
from mcpperf.exporters.report_renderer import ReportRenderer

_EXPORTERS: dict[ExportFormat, type[ReportExporter]] = {
    ExportFormat.JSON: JsonReportExporter,
    ExportFormat.CSV: CsvReportExporter,
}


def get_exporter(fmt: ExportFormat | str) -> ReportExporter:
    """Return an exporter instance for ``fmt`` (case-insensitive)."""
    try:
        export_format = ExportFormat(fmt)
    except ValueError as err:
        supported = ", ".join(str(f) for f in ExportFormat)
        raise UnsupportedExportFormatError(
            f"Unsupported export format: {fmt!r}. Supported formats: {supported}."
        ) from err
    return _EXPORTERS[export_format]()


__all__ = [
    "CsvReportExporter",
    "JsonReportExporter",
    "ReportExporter",
    "ReportRenderer",
    "get_exporter",
]
