"""
Density Estimator — Epanechnikov KDE curves for per-brand resale prices.

Feeds the overlapping price-distribution chart. Two interchangeable
metrics are supported ('price_usd' and 'seller_price'); a brand missing
one of them borrows the other so both toggles always have something
to draw.

All brands are evaluated on one shared x-grid, so curves can be
overlaid and compared point for point.
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import pandas as pd

from luxury_engine.config import (
    BRANDS,
    DEFAULT_PRICE_METRIC,
    KDE_BANDWIDTH_DIVISOR,
    KDE_DOMAIN_PAD,
    KDE_FALLBACK_FRACTION,
    PRICE_METRICS,
    settings,
)
from .core.brands import match_brand
from .core.cleaning import clean_series
from .core.columns import ColumnResolver, find_column

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Kernel
# ------------------------------------------------------------------

def epanechnikov(bandwidth: float):
    """
    Epanechnikov kernel scaled by *bandwidth*.

        K(u) = 0.75 * (1 - (u/h)^2) / h   for |u/h| <= 1, else 0

    The returned callable accepts scalars or numpy arrays.
    """
    h = float(bandwidth)

    def kernel(u):
        scaled = np.asarray(u, dtype=float) / h
        return np.where(np.abs(scaled) <= 1, 0.75 * (1 - scaled ** 2) / h, 0.0)

    return kernel


# ------------------------------------------------------------------
# Sample preparation
# ------------------------------------------------------------------

def _blank(series: pd.Series) -> pd.Series:
    return series.isna() | (series.astype(str).str.strip() == "")


def group_samples(
    resale_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> tuple[dict[str, dict[str, list[float]]], dict[str, str | None]]:
    """
    Collect numeric price observations per metric per brand.

    Rows with an unknown brand or a non-numeric value are skipped.
    A blank price_usd cell falls back to the row's average-price column.

    Returns:
        (samples, detected_columns)

        samples = {"price_usd": {"Hermes": [...], ...},
                   "seller_price": {"Hermes": [...], ...}}
    """
    brands = list(brands)
    samples = {m: {b: [] for b in brands} for m in PRICE_METRICS}
    detected: dict[str, str | None] = {
        "brand": None, "price_usd": None, "seller_price": None, "average_price": None,
    }

    if resale_df is None or resale_df.empty:
        return samples, detected

    brand_col = find_column(resale_df.columns, ColumnResolver.BRAND_CANDIDATES)
    price_col, seller_col, alt_col = ColumnResolver.resolve_prices(resale_df)
    detected.update({
        "brand": brand_col, "price_usd": price_col,
        "seller_price": seller_col, "average_price": alt_col,
    })
    logger.debug(f"Density columns detected: {detected}")

    if brand_col is None:
        logger.warning("Resale table has no brand column; no density samples")
        return samples, detected

    nan = pd.Series(np.nan, index=resale_df.index, dtype=float)

    usd = clean_series(resale_df[price_col]) if price_col else nan.copy()
    if alt_col and alt_col != price_col:
        fill = _blank(resale_df[price_col]) if price_col else pd.Series(True, index=resale_df.index)
        usd = usd.where(~fill, clean_series(resale_df[alt_col]))
    seller = clean_series(resale_df[seller_col]) if seller_col else nan.copy()

    values = {"price_usd": usd, "seller_price": seller}
    canonical = resale_df[brand_col].map(lambda v: match_brand(v, brands))

    for brand in brands:
        mask = canonical == brand
        for metric in PRICE_METRICS:
            col = values[metric][mask]
            samples[metric][brand] = [float(v) for v in col if np.isfinite(v)]

    return samples, detected


def impute_missing(
    samples: dict[str, dict[str, list[float]]],
) -> dict[str, dict[str, list[float]]]:
    """
    Cross-metric fallback: a brand with no values for one metric gets a
    copy of its values for the other metric. Input is not mutated.
    """
    first, second = PRICE_METRICS
    out = {m: {b: list(v) for b, v in samples.get(m, {}).items()} for m in PRICE_METRICS}
    brands = set(out[first]) | set(out[second])

    for brand in brands:
        a = out[first].setdefault(brand, [])
        b = out[second].setdefault(brand, [])
        if not a and b:
            out[first][brand] = list(b)
        elif not b and a:
            out[second][brand] = list(a)

    return out


# ------------------------------------------------------------------
# Estimation
# ------------------------------------------------------------------

def evaluation_grid(values: Iterable[float], points: int = settings.KDE_GRID_POINTS) -> np.ndarray:
    """Evenly spaced x positions over [max(0, min*0.9), max*1.05]."""
    arr = np.asarray(list(values), dtype=float)
    low_pad, high_pad = KDE_DOMAIN_PAD
    lo = max(0.0, float(arr.min()) * low_pad)
    hi = float(arr.max()) * high_pad
    return np.linspace(lo, hi, points)


def bandwidth(values: Iterable[float]) -> float:
    """
    (max - min) / 24, falling back to max * 0.05, then to 1.0, when the
    range is degenerate (e.g. all values identical).
    """
    arr = np.asarray(list(values), dtype=float)
    lo, hi = float(arr.min()), float(arr.max())

    h = (hi - lo) / KDE_BANDWIDTH_DIVISOR
    if h > 0:
        return h

    h = hi * KDE_FALLBACK_FRACTION
    if h > 0:
        logger.warning(f"Zero-width price range; bandwidth falls back to {h:.4g}")
        return h

    logger.warning("Zero-width price range at or below 0; bandwidth falls back to 1")
    return 1.0


def estimate_density(samples: Iterable[float], grid: np.ndarray, h: float) -> np.ndarray:
    """Mean kernel value over *samples* at each grid point (zeros if no samples)."""
    values = np.asarray(list(samples), dtype=float)
    if values.size == 0:
        return np.zeros(len(grid))
    kernel = epanechnikov(h)
    return kernel(grid[:, None] - values[None, :]).mean(axis=1)


class DensityEstimator:
    """
    Prepares per-brand samples once, then evaluates curves per metric.

    Usage:
        estimator = DensityEstimator(resale_df)
        result = estimator.estimate("seller_price")
        if result["no_data"]:
            ...  # render the empty state
    """

    def __init__(
        self,
        resale_df: pd.DataFrame | None,
        brands: Iterable[str] = BRANDS,
        grid_points: int = settings.KDE_GRID_POINTS,
    ):
        self.brands = list(brands)
        self.grid_points = grid_points
        grouped, self._detected = group_samples(resale_df, self.brands)
        self._samples = impute_missing(grouped)

    @property
    def samples(self) -> dict[str, dict[str, list[float]]]:
        return self._samples

    @property
    def detected_columns(self) -> dict[str, str | None]:
        return self._detected

    def has_data(self, metric: str = DEFAULT_PRICE_METRIC) -> bool:
        return any(self._metric_samples(metric).values())

    def estimate(self, metric: str = DEFAULT_PRICE_METRIC) -> dict:
        """
        Evaluate one density curve per brand for *metric*.

        Returns:
            {
              "metric":      "price_usd",
              "no_data":     False,
              "grid":        [x0, x1, ...],            # shared by all brands
              "bandwidth":   412.5,
              "curves":      {"Hermes": [(x0, d0), (x1, d1), ...], ...},
              "max_density": 0.0012
            }

            With no samples for any brand: no_data=True and empty grid/curves.
        """
        by_brand = self._metric_samples(metric)
        all_values = [v for b in self.brands for v in by_brand.get(b, [])]

        if not all_values:
            logger.info(f"No density samples for metric '{metric}'")
            return {
                "metric": metric,
                "no_data": True,
                "grid": [],
                "bandwidth": None,
                "curves": {},
                "max_density": 0.0,
            }

        grid = evaluation_grid(all_values, self.grid_points)
        h = bandwidth(all_values)

        curves: dict[str, list[tuple[float, float]]] = {}
        max_density = 0.0
        for brand in self.brands:
            density = estimate_density(by_brand.get(brand, []), grid, h)
            curves[brand] = [(float(x), float(d)) for x, d in zip(grid, density)]
            if density.size:
                max_density = max(max_density, float(density.max()))

        return {
            "metric": metric,
            "no_data": False,
            "grid": [float(x) for x in grid],
            "bandwidth": h,
            "curves": curves,
            "max_density": max_density,
        }

    def _metric_samples(self, metric: str) -> dict[str, list[float]]:
        if metric not in PRICE_METRICS:
            raise ValueError(f"Unknown price metric '{metric}' (expected one of {PRICE_METRICS})")
        return self._samples[metric]
