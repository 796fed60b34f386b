# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from mcpperf.common.config.client_config import ClientConfig
from mcpperf.common.config.run_config import RunConfiguration

__all__ = [
    "ClientConfig",
    "RunConfiguration",
]
