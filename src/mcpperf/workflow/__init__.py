# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from mcpperf.workflow.executor import WORKFLOW_STEPS, WorkflowExecutor, describe_error

__all__ = [
    "WORKFLOW_STEPS",
    "WorkflowExecutor",
    "describe_error",
]
