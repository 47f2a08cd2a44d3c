"""
Normalize — Per-metric max scaling of the raw brand metric vectors.
"""

from __future__ import annotations

import math
from typing import Iterable

from luxury_engine.config import METRICS


def metric_maxima(
    raw: dict[str, dict[str, float]],
    metrics: Iterable[str] = METRICS,
) -> dict[str, float]:
    """Divisor per metric: the max across brands, or 1.0 if that is 0 / NaN."""
    maxima: dict[str, float] = {}
    for metric in metrics:
        values = [vec.get(metric, 0.0) for vec in raw.values()]
        top = max(values) if values else 0.0
        if top == 0 or math.isnan(top):
            top = 1.0
        maxima[metric] = top
    return maxima


def normalize_metrics(
    raw: dict[str, dict[str, float]],
    metrics: Iterable[str] = METRICS,
) -> dict[str, dict[str, float]]:
    """
    Divide each metric by its maximum across brands.

    Example:
        {"Gucci": {"Revenue": 2000}, "Coach": {"Revenue": 500}}
        → {"Gucci": {"Revenue": 1.0}, "Coach": {"Revenue": 0.25}}

    An all-zero metric stays 0 for every brand.
    """
    metrics = list(metrics)
    maxima = metric_maxima(raw, metrics)
    return {
        brand: {m: max(0.0, vec.get(m, 0.0) / maxima[m]) for m in metrics}
        for brand, vec in raw.items()
    }
