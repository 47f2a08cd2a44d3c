"""
Brand Analyzer — The single entry point for the luxury market charts.

Runs the metric aggregator, the density estimator and the chart-series
builders, and returns one JSON-safe "Brand Snapshot" dictionary that the
rendering layer consumes directly.
"""

from __future__ import annotations

import math

import pandas as pd

from luxury_engine.config import BRANDS, DEFAULT_PRICE_METRIC, METRICS
from .aggregator import MetricAggregator, radar_series
from .density import DensityEstimator
from .metrics.normalize import normalize_metrics
from .series import latest_revenue_bars, resale_stack, revenue_long


def _sanitize(obj):
    """Walk dicts/lists/tuples and replace NaN / inf floats with None."""
    if isinstance(obj, dict):
        return {k: _sanitize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    return obj


class BrandAnalyzer:
    """
    Takes the loaded tables and produces the full chart snapshot.

    Usage:
        analyzer = BrandAnalyzer()
        snapshot = analyzer.analyze(tables, price_metric="seller_price")
    """

    def __init__(self, brands=BRANDS, metrics=METRICS):
        self.brands = list(brands)
        self.metrics = list(metrics)

    def analyze(self, tables: dict, price_metric: str = DEFAULT_PRICE_METRIC) -> dict:
        """
        Args:
            tables:       {"revenue", "resale", "search", "region"} — any may be None.
            price_metric: Active metric for the density chart.

        Returns:
            {
              "meta":    { "brands": [...], "metrics": [...], "rows": {...} },
              "radar":   { "raw": {...}, "normalized": {...}, "axes": [...], "series": {...} },
              "density": { ... },   # DensityEstimator.estimate()
              "series":  { "revenue_long": [...], "revenue_bars": [...], "resale_stack": {...} },
            }
        """
        revenue = tables.get("revenue")
        resale = tables.get("resale")
        search = tables.get("search")
        region = tables.get("region")

        aggregator = MetricAggregator(self.brands, self.metrics)
        raw = aggregator.raw_metrics(revenue, resale, search, region)
        normalized = normalize_metrics(raw, self.metrics)

        estimator = DensityEstimator(resale, self.brands)
        density = estimator.estimate(price_metric)
        density["columns"] = estimator.detected_columns

        snapshot = {
            "meta": {
                "brands": self.brands,
                "metrics": self.metrics,
                "rows": {
                    name: len(t) for name, t in tables.items()
                    if isinstance(t, pd.DataFrame)
                },
            },
            "radar": {
                "raw": raw,
                "normalized": normalized,
                **radar_series(normalized, self.metrics),
            },
            "density": density,
            "series": {
                "revenue_long": revenue_long(revenue, self.brands),
                "revenue_bars": latest_revenue_bars(revenue, self.brands),
                "resale_stack": resale_stack(resale),
            },
        }

        return _sanitize(snapshot)
