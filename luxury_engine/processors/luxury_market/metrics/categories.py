"""
Category Diversity — Distinct product categories per brand in the region table.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS
from ..core.columns import ColumnResolver

logger = logging.getLogger(__name__)


def _coalesce(df: pd.DataFrame, fields: list[str]) -> pd.Series:
    """Row-wise first non-empty value across *fields* (missing fields skipped)."""
    out = pd.Series("", index=df.index, dtype=object)
    for field in fields:
        if field not in df.columns:
            continue
        values = df[field].fillna("").astype(str)
        out = out.where(out.str.len() > 0, values)
    return out


def calculate_category_diversity(
    region_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> dict[str, float]:
    """
    Count distinct, trimmed, non-empty categories per brand.

    Accepts 'brand'/'Brand' and 'category'/'Category' headers; lowercase wins
    when both are present and non-empty. Distinctness is case-sensitive.
    """
    brands = list(brands)
    if region_df is None or region_df.empty:
        return {b: 0.0 for b in brands}

    if ColumnResolver.first_present(region_df, ColumnResolver.REGION_BRAND_FIELDS) is None:
        logger.warning("Region table has no brand column")
        return {b: 0.0 for b in brands}

    brand_values = _coalesce(region_df, ColumnResolver.REGION_BRAND_FIELDS).str.lower()
    categories = _coalesce(region_df, ColumnResolver.CATEGORY_FIELDS).str.strip()

    result: dict[str, float] = {}
    for brand in brands:
        cats = categories[(brand_values == brand.lower()) & (categories != "")]
        result[brand] = float(cats.nunique())

    return result
