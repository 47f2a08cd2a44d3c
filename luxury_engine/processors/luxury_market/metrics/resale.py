"""
Resale — Average resale price per brand.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS
from ..core.brands import brand_mask
from ..core.cleaning import clean_series

logger = logging.getLogger(__name__)

BRAND_COLUMN = "Brand"
PRICE_COLUMN = "Average_Price_USD"


def calculate_avg_resale(
    resale_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> dict[str, float]:
    """Mean of numeric Average_Price_USD over each brand's rows (0.0 if none)."""
    brands = list(brands)
    if resale_df is None or resale_df.empty:
        return {b: 0.0 for b in brands}

    missing = [c for c in (BRAND_COLUMN, PRICE_COLUMN) if c not in resale_df.columns]
    if missing:
        logger.warning(f"Resale table is missing column(s) {missing}")
        return {b: 0.0 for b in brands}

    prices = clean_series(resale_df[PRICE_COLUMN])
    result: dict[str, float] = {}

    for brand in brands:
        values = prices[brand_mask(resale_df[BRAND_COLUMN], brand)].dropna()
        result[brand] = float(values.mean()) if len(values) > 0 else 0.0

    return result
