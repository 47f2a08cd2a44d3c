"""
Column Resolver — Flexible column-name detection for the luxury datasets.

The resale and search-interest exports do not agree on header spelling
("Average_Price_USD", "price_usd", "Hermès: (1/1/24 - 12/31/24)" ...).
This module centralises all column-name resolution into one place.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd


def find_column(columns: Iterable[str], keywords: Iterable[str]) -> str | None:
    """
    Return the first column whose lower-cased name contains a keyword.

    Keywords are tried in order, so earlier keywords win over later ones
    even if a later keyword matches an earlier column.

    Returns:
        The original column name, or None if nothing matches.
    """
    cols = [str(c) for c in columns]
    lowered = [c.lower() for c in cols]
    for kw in keywords:
        kw_low = kw.lower()
        for col, col_low in zip(cols, lowered):
            if kw_low in col_low:
                return col
    return None


def revenue_column(brand: str) -> str:
    """Wide-format revenue column for *brand*, e.g. 'Gucci_Revenue_Million_USD'."""
    return f"{brand}_Revenue_Million_USD"


class ColumnResolver:
    """
    Candidate header lists and the lookups built on find_column().
    """

    # ----- pre-built candidate lists -----

    BRAND_CANDIDATES = ["brand"]

    # Specific names first; a bare 'price' would also match 'seller_price'
    PRICE_USD_CANDIDATES = [
        "price_usd", "price usd", "priceusd",
        "average_price", "average price",
    ]

    SELLER_PRICE_CANDIDATES = [
        "seller_price", "sellerprice", "seller price", "seller",
    ]

    AVERAGE_PRICE_FALLBACK = ["average_price"]

    CATEGORY_FIELDS = ["category", "Category"]
    REGION_BRAND_FIELDS = ["brand", "Brand"]

    # ----------------------------------------------------------------
    # Public API
    # ----------------------------------------------------------------

    @classmethod
    def resolve_prices(
        cls, df: pd.DataFrame
    ) -> tuple[str | None, str | None, str | None]:
        """
        Find the price-in-USD, seller-price and average-price columns in *df*.

        Substring matching with ordered candidates, so 'seller_price' is never
        mistaken for the USD price. The average-price column fills in USD
        values for rows where the USD column is blank or absent.

        Returns:
            (price_usd_column, seller_price_column, average_price_column)
            — any of them may be None.
        """
        columns = list(df.columns)
        price_col = find_column(columns, cls.PRICE_USD_CANDIDATES)
        seller_col = find_column(columns, cls.SELLER_PRICE_CANDIDATES)
        alt_col = find_column(columns, cls.AVERAGE_PRICE_FALLBACK)
        return price_col, seller_col, alt_col

    @staticmethod
    def first_present(df: pd.DataFrame, fields: list[str]) -> str | None:
        """Return the first of *fields* that is an actual column of *df*."""
        for field in fields:
            if field in df.columns:
                return field
        return None
