"""
Revenue — Latest-year revenue per brand from the wide revenue table.

Table shape:
    Year, Gucci_Revenue_Million_USD, Coach_Revenue_Million_USD, Hermes_Revenue_Million_USD
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np
import pandas as pd

from luxury_engine.config import BRANDS
from ..core.cleaning import clean_series, to_number
from ..core.columns import revenue_column

logger = logging.getLogger(__name__)


def latest_revenue_row(revenue_df: pd.DataFrame | None) -> pd.Series | None:
    """
    Return the row for the most recent year.

    Picks the row with the largest numeric 'Year' (the last such row on ties).
    Falls back to the last row when 'Year' is absent or entirely non-numeric.
    Returns None for a missing or empty table.
    """
    if revenue_df is None or revenue_df.empty:
        return None

    if "Year" in revenue_df.columns:
        years = clean_series(revenue_df["Year"])
        if years.notna().any():
            latest = np.flatnonzero((years == years.max()).to_numpy())[-1]
            return revenue_df.iloc[int(latest)]
        logger.warning("Revenue table has no numeric 'Year'; using last row")

    return revenue_df.iloc[-1]


def calculate_revenue(
    revenue_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> dict[str, float]:
    """
    Latest-year revenue (million USD) per brand.

    Returns:
        { "Hermes": 15200.0, "Gucci": 7700.0, "Coach": 5100.0 }
        — 0.0 for any brand whose column is missing or non-numeric.
    """
    row = latest_revenue_row(revenue_df)
    result: dict[str, float] = {}

    for brand in brands:
        col = revenue_column(brand)
        if row is None or col not in row.index:
            if row is not None:
                logger.warning(f"Revenue column '{col}' not found")
            result[brand] = 0.0
            continue
        value = to_number(row[col])
        result[brand] = value if value is not None else 0.0

    return result
