"""
Chart Series — Small reshapes behind the line, bubble, bar and stacked-bar charts.

    revenue_long        — wide revenue table → [{year, brand, revenue}]
    latest_revenue_bars — latest-year revenue → [{brand, revenue}]
    resale_stack        — brand x category average resale price matrix
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS
from .core.cleaning import clean_series, to_number
from .core.columns import revenue_column
from .metrics.revenue import calculate_revenue


def revenue_long(
    revenue_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> list[dict]:
    """
    Convert the wide revenue table to long format.

    Rows with a non-numeric Year, and cells with non-numeric revenue,
    are skipped. Sorted by year, then by brand order.
    """
    brands = list(brands)
    if revenue_df is None or revenue_df.empty or "Year" not in revenue_df.columns:
        return []

    years = clean_series(revenue_df["Year"])
    points: list[dict] = []

    for idx, year in years.items():
        if pd.isna(year):
            continue
        for order, brand in enumerate(brands):
            col = revenue_column(brand)
            if col not in revenue_df.columns:
                continue
            value = to_number(revenue_df.at[idx, col])
            if value is None:
                continue
            points.append({"year": int(year), "brand": brand, "revenue": value, "_order": order})

    points.sort(key=lambda p: (p["year"], p["_order"]))
    for p in points:
        del p["_order"]
    return points


def latest_revenue_bars(
    revenue_df: pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> list[dict]:
    """Latest-year revenue per brand, in brand order."""
    revenue = calculate_revenue(revenue_df, brands)
    return [{"brand": b, "revenue": v} for b, v in revenue.items()]


def resale_stack(resale_df: pd.DataFrame | None) -> dict:
    """
    Brand x category matrix of Average_Price_USD for the stacked bar chart.

    Brands and categories keep their order of first appearance. Each cell is
    the price from the first matching row, 0.0 when no row matches.

    Returns:
        {
          "brands":     ["Hermes", "Gucci", "Coach"],
          "categories": ["Handbags", "Shoes", "Accessories"],
          "rows":       [{"brand": "Hermes", "Handbags": 9800.0, ...}, ...],
          "max_total":  14350.0
        }
    """
    empty = {"brands": [], "categories": [], "rows": [], "max_total": 0.0}
    if resale_df is None or resale_df.empty:
        return empty
    if not {"Brand", "Category", "Average_Price_USD"} <= set(resale_df.columns):
        return empty

    frame = resale_df.assign(stack_price=clean_series(resale_df["Average_Price_USD"]).fillna(0.0))
    brands = list(pd.unique(frame["Brand"]))
    categories = list(pd.unique(frame["Category"]))

    first = frame.drop_duplicates(subset=["Brand", "Category"], keep="first")
    lookup = {
        (brand, cat): float(price)
        for brand, cat, price in zip(first["Brand"], first["Category"], first["stack_price"])
    }

    rows: list[dict] = []
    max_total = 0.0
    for brand in brands:
        row: dict = {"brand": brand}
        for cat in categories:
            row[cat] = lookup.get((brand, cat), 0.0)
        max_total = max(max_total, sum(row[c] for c in categories))
        rows.append(row)

    return {
        "brands": brands,
        "categories": categories,
        "rows": rows,
        "max_total": max_total,
    }
