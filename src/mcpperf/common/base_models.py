# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MCPPerfBaseModel(BaseModel):
    """Base model for every mcpperf data object.

    Instances are immutable. Python code uses snake_case attributes while
    serialized forms use the camelCase aliases.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
