"""Pytest fixtures for luxury_engine tests.

Provides small in-memory versions of the four source tables so each
pipeline can be exercised without the real CSV exports.

Key fixtures:
- revenue_df: Wide revenue table, years deliberately out of order
- resale_df: Brand / Category / Average_Price_USD rows
- search_text: Raw Google Trends export with its metadata line
- region_df: brand / category rows with duplicates and blanks
- tables: All four bundled the way DatasetLoader.load() returns them
"""

import pandas as pd
import pytest


@pytest.fixture
def revenue_df() -> pd.DataFrame:
    """Revenue table where the latest year is not the last row."""
    return pd.DataFrame(
        {
            "Year": ["2022", "2024", "2023"],
            "Gucci_Revenue_Million_USD": ["1800", "2000", "1900"],
            "Coach_Revenue_Million_USD": ["450", "500", "480"],
            "Hermes_Revenue_Million_USD": ["800", "1000", "900"],
        }
    )


@pytest.fixture
def resale_df() -> pd.DataFrame:
    """Resale rows for all three brands across three categories."""
    return pd.DataFrame(
        {
            "Brand": ["Hermes", "Hermes", "gucci", "Gucci", "Coach", "Prada"],
            "Category": ["Handbags", "Scarves", "Handbags", "Shoes", "Handbags", "Handbags"],
            "Average_Price_USD": ["9000", "1000", "1500", "700", "300", "2500"],
        }
    )


@pytest.fixture
def search_text() -> str:
    """Google Trends interest-by-region export."""
    return (
        "Category: All categories\n"
        "\n"
        "Region,Hermès: (1/1/24 - 12/31/24),Gucci: (1/1/24 - 12/31/24),Coach: (1/1/24 - 12/31/24)\n"
        "New York,30%,50%,20%\n"
        "Texas,10%,,<1%\n"
    )


@pytest.fixture
def region_df() -> pd.DataFrame:
    """Region/category rows with case variants, padding and blanks."""
    return pd.DataFrame(
        {
            "brand": ["hermes", "Hermes", "HERMES", "Gucci", "Gucci", "Coach", "Coach"],
            "category": ["Handbags", " Handbags ", "Scarves", "Shoes", "", "handbags", "Handbags"],
        }
    )


@pytest.fixture
def tables(revenue_df, resale_df, search_text, region_df) -> dict:
    """All four tables keyed the way DatasetLoader.load() returns them."""
    return {
        "revenue": revenue_df,
        "resale": resale_df,
        "search": search_text,
        "region": region_df,
    }
