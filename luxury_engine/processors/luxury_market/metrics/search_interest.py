"""
Search Interest — Mean regional search share per brand.

Input is the raw text of a Google Trends "interest by region" export:

    Category: All categories

    Region,Hermès: (1/1/24 - 12/31/24),Gucci: (1/1/24 - 12/31/24),Coach: (...)
    New York,31%,42%,27%
    ...

The leading metadata line is dropped, brand columns are found by
substring, and percentage cells are averaged.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable

import pandas as pd

from luxury_engine.config import BRANDS, SEARCH_METADATA_PREFIX
from ..core.cleaning import parse_percent
from ..core.columns import find_column

logger = logging.getLogger(__name__)


def parse_search_table(text: str | None) -> pd.DataFrame:
    """Drop blank lines and the metadata line, then parse the CSV body."""
    if not text:
        return pd.DataFrame()

    lines = [line for line in text.splitlines() if line.strip()]
    if lines and lines[0].startswith(SEARCH_METADATA_PREFIX):
        lines.pop(0)
    if not lines:
        return pd.DataFrame()

    # Rows with the wrong field count (e.g. unquoted "Washington, D.C.") are dropped
    try:
        return pd.read_csv(
            io.StringIO("\n".join(lines)),
            dtype=str,
            keep_default_na=False,
            on_bad_lines="skip",
        )
    except pd.errors.ParserError as exc:
        logger.warning(f"Unparsable search-interest export: {exc}")
        return pd.DataFrame()


def brand_search_column(columns: Iterable[str], brand: str) -> str | None:
    """
    Locate *brand*'s column by substring.

    The 4-letter stem keeps accented headers ('Hermès') matching 'Hermes'.
    """
    name = brand.lower()
    return find_column(columns, [name, name[:4]])


def calculate_search_interest(
    search: str | pd.DataFrame | None,
    brands: Iterable[str] = BRANDS,
) -> dict[str, float]:
    """
    Average parsed percentage per brand column.

    Args:
        search: Raw export text, or an already-parsed DataFrame.

    Returns:
        { "Hermes": 31.4, "Gucci": 42.0, "Coach": 26.6 } — 0.0 when the
        brand's column is missing or holds no parsable percentages.
    """
    table = search if isinstance(search, pd.DataFrame) else parse_search_table(search)
    columns = [str(c) for c in table.columns]
    result: dict[str, float] = {}

    for brand in brands:
        col = brand_search_column(columns, brand)
        if col is None:
            if columns:
                logger.warning(f"No search-interest column for brand '{brand}'")
            result[brand] = 0.0
            continue

        values = [v for v in (parse_percent(cell) for cell in table[col]) if v is not None]
        result[brand] = sum(values) / len(values) if values else 0.0

    return result
