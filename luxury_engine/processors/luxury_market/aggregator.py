"""
Metric Aggregator — Joins the four brand tables into radar-ready vectors.

    revenue table  ─┐
    resale table   ─┤  one scalar per (brand, metric)  →  max-normalized [0, 1]
    search export  ─┤
    region table   ─┘

Every brand in the configured set gets every metric. Missing tables,
columns or cells degrade to 0 instead of raising.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS, METRIC_LABELS, METRICS
from .metrics.categories import calculate_category_diversity
from .metrics.normalize import normalize_metrics
from .metrics.resale import calculate_avg_resale
from .metrics.revenue import calculate_revenue
from .metrics.search_interest import calculate_search_interest

logger = logging.getLogger(__name__)


class MetricAggregator:
    """
    Produces a normalized metric vector per brand.

    Usage:
        aggregator = MetricAggregator()
        vectors = aggregator.aggregate(revenue_df, resale_df, search_text, region_df)
        # {"Hermes": {"Revenue": 1.0, "AvgResale": 0.8, ...}, ...}
    """

    def __init__(self, brands: Iterable[str] = BRANDS, metrics: Iterable[str] = METRICS):
        self.brands = list(brands)
        self.metrics = list(metrics)

    def raw_metrics(
        self,
        revenue: pd.DataFrame | None,
        resale: pd.DataFrame | None,
        search: str | pd.DataFrame | None,
        region: pd.DataFrame | None,
    ) -> dict[str, dict[str, float]]:
        """
        Un-normalized metric vector per brand (all values >= 0).

        Returns:
            {
              "Hermes": {"Revenue": 15200.0, "AvgResale": 9800.0,
                         "SearchInterest": 31.4, "CategoryDiversity": 3.0},
              ...
            }
        """
        per_metric = {
            "Revenue": calculate_revenue(revenue, self.brands),
            "AvgResale": calculate_avg_resale(resale, self.brands),
            "SearchInterest": calculate_search_interest(search, self.brands),
            "CategoryDiversity": calculate_category_diversity(region, self.brands),
        }

        raw: dict[str, dict[str, float]] = {}
        for brand in self.brands:
            raw[brand] = {
                m: max(0.0, float(per_metric.get(m, {}).get(brand, 0.0)))
                for m in self.metrics
            }

        logger.debug(f"Raw brand metrics: {raw}")
        return raw

    def aggregate(
        self,
        revenue: pd.DataFrame | None,
        resale: pd.DataFrame | None,
        search: str | pd.DataFrame | None,
        region: pd.DataFrame | None,
    ) -> dict[str, dict[str, float]]:
        """Normalized metric vector per brand, each value in [0, 1]."""
        raw = self.raw_metrics(revenue, resale, search, region)
        return normalize_metrics(raw, self.metrics)


def radar_series(
    normalized: dict[str, dict[str, float]],
    metrics: Iterable[str] = METRICS,
) -> dict:
    """
    Reshape normalized vectors into the per-brand point lists the radar draws.

    Returns:
        {
          "axes":   [{"axis": "Revenue", "label": "Revenue (normalized)"}, ...],
          "series": {"Hermes": [{"axis": "Revenue", "value": 1.0}, ...], ...}
        }
    """
    metrics = list(metrics)
    return {
        "axes": [{"axis": m, "label": METRIC_LABELS.get(m, m)} for m in metrics],
        "series": {
            brand: [{"axis": m, "value": vec.get(m, 0.0)} for m in metrics]
            for brand, vec in normalized.items()
        },
    }
