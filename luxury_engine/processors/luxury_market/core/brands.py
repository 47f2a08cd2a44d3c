"""
Brands — Case-insensitive brand matching against the configured brand set.

Brand name is the only join key across the revenue, resale,
search-interest and region tables.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS


def match_brand(value, brands: Iterable[str] = BRANDS) -> str | None:
    """
    Map a raw brand cell to its canonical name.

    Example:
        match_brand('  gucci ')  → 'Gucci'
        match_brand('Prada')     → None
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    text = str(value).strip().lower()
    if not text:
        return None
    for brand in brands:
        if brand.lower() == text:
            return brand
    return None


def brand_mask(series: pd.Series, brand: str) -> pd.Series:
    """Boolean mask of rows whose brand equals *brand* (trimmed, case-insensitive)."""
    return series.fillna("").astype(str).str.strip().str.lower() == brand.lower()
