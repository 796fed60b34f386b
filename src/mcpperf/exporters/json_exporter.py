# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""JSON exporter for run reports."""

import orjson

from mcpperf.common.models import RunReport
from mcpperf.exporters.base_exporter import ReportExporter


class JsonReportExporter(ReportExporter):
    """Exports the full run report as indented JSON.

    Keys follow the model field order under their camelCase aliases and
    datetimes are ISO-8601 strings. The output parses back with
    ``RunReport.model_validate_json``.
    """

    file_extension = "json"

    def _generate_content(self, report: RunReport) -> str:
        data = report.model_dump(mode="json", by_alias=True)
        return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode("utf-8")
