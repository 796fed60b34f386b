# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Order statistics over latency samples.

Percentiles use linear interpolation between order statistics (the "R-7"
definition, ``numpy.percentile(..., method="linear")``). The quantile is
spelled out here so the method is pinned regardless of library defaults.
"""

import math
from collections.abc import Sequence

import numpy as np

from mcpperf.common.models import LatencyStatistics, Percentiles


def quantile_sorted(sorted_sample: Sequence[float], q: float) -> float:
    """Return the ``q`` quantile of an ascending sample.

    Args:
        sorted_sample: Non-empty sample sorted in ascending order
        q: Quantile in the closed interval [0, 1]

    Raises:
        ValueError: If the sample is empty or ``q`` is out of range
    """
    if not sorted_sample:
        raise ValueError("Cannot compute a quantile of an empty sample.")
    if not 0.0 <= q <= 1.0:
        raise ValueError(f"Quantile must be between 0 and 1, got {q}.")

    h = (len(sorted_sample) - 1) * q
    lower = math.floor(h)
    upper = min(lower + 1, len(sorted_sample) - 1)
    fraction = h - lower
    low_value = float(sorted_sample[lower])
    high_value = float(sorted_sample[upper])
    value = low_value + fraction * (high_value - low_value)
    # Rounding must not push the result outside its two order statistics.
    return min(max(value, low_value), high_value)


def compute_percentiles(sorted_sample: Sequence[float]) -> Percentiles:
    if not sorted_sample:
        return Percentiles()
    return Percentiles(
        p50=quantile_sorted(sorted_sample, 0.50),
        p90=quantile_sorted(sorted_sample, 0.90),
        p95=quantile_sorted(sorted_sample, 0.95),
        p99=quantile_sorted(sorted_sample, 0.99),
    )


def compute_latency_statistics(sorted_sample: Sequence[float]) -> LatencyStatistics:
    """Dispersion of an ascending sample. Standard deviation is the population one (ddof=0)."""
    if not sorted_sample:
        return LatencyStatistics()
    values = np.asarray(sorted_sample, dtype=np.float64)
    return LatencyStatistics(
        min=float(values[0]),
        max=float(values[-1]),
        mean=float(np.mean(values)),
        median=quantile_sorted(sorted_sample, 0.5),
        standard_deviation=float(np.std(values, ddof=0)),
    )
