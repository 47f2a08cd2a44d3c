"""Tests for the core helpers: column resolution, cell parsing, brand matching."""

import math

import pandas as pd
import pytest

from luxury_engine.processors.luxury_market.core.brands import brand_mask, match_brand
from luxury_engine.processors.luxury_market.core.cleaning import (
    clean_series,
    parse_percent,
    to_number,
)
from luxury_engine.processors.luxury_market.core.columns import (
    ColumnResolver,
    find_column,
    revenue_column,
)


# -----------------------------------------------------------------------------
# Column resolution
# -----------------------------------------------------------------------------


class TestFindColumn:
    """Tests for the substring column lookup."""

    def test_case_insensitive_substring(self) -> None:
        assert find_column(["Region", "Gucci: (2024)"], ["gucci"]) == "Gucci: (2024)"

    def test_keyword_order_wins_over_column_order(self) -> None:
        columns = ["seller_price", "price_usd"]
        assert find_column(columns, ["price_usd", "seller"]) == "price_usd"

    def test_not_found_returns_none(self) -> None:
        assert find_column(["Year", "Region"], ["brand"]) is None

    def test_empty_inputs(self) -> None:
        assert find_column([], ["brand"]) is None
        assert find_column(["Brand"], []) is None


class TestColumnResolver:
    """Tests for price and field column detection."""

    def test_resolve_prices_keeps_seller_separate(self) -> None:
        df = pd.DataFrame(columns=["brand", "seller_price", "price_usd"])
        price, seller, alt = ColumnResolver.resolve_prices(df)
        assert price == "price_usd"
        assert seller == "seller_price"
        assert alt is None

    def test_resolve_prices_average_price_only(self) -> None:
        df = pd.DataFrame(columns=["Brand", "Average_Price_USD", "Category"])
        price, seller, alt = ColumnResolver.resolve_prices(df)
        assert price == "Average_Price_USD"
        assert seller is None
        assert alt == "Average_Price_USD"

    def test_revenue_column_name(self) -> None:
        assert revenue_column("Gucci") == "Gucci_Revenue_Million_USD"


# -----------------------------------------------------------------------------
# Cell parsing
# -----------------------------------------------------------------------------


class TestParsePercent:
    """Tests for the percentage parser."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("44%", 44.0),
            (" 12.5 % ", 12.5),
            ("-3%", -3.0),
            ("7", 7.0),
            ("<1%", 1.0),
            (".5%", 0.5),
            (44, 44.0),
        ],
    )
    def test_parses(self, raw, expected) -> None:
        assert parse_percent(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw", [None, "", "   ", "abc", "%", "1-2", "1.2.3", float("nan"), True, False]
    )
    def test_not_a_number(self, raw) -> None:
        assert parse_percent(raw) is None


class TestToNumber:
    """Tests for single-cell numeric coercion."""

    def test_numeric_strings(self) -> None:
        assert to_number("1200") == 1200.0
        assert to_number(" 3.5 ") == 3.5

    def test_rejects_junk(self) -> None:
        for raw in (None, "", "n/a", float("nan"), "inf", True):
            assert to_number(raw) is None

    def test_passes_numbers_through(self) -> None:
        assert to_number(7) == 7.0


def test_clean_series_strips_currency() -> None:
    out = clean_series(pd.Series(["$1,200", "300", "bad"]))
    assert out.iloc[0] == 1200.0
    assert out.iloc[1] == 300.0
    assert math.isnan(out.iloc[2])


def test_clean_series_drops_infinities() -> None:
    out = clean_series(pd.Series(["inf", "-inf", "Infinity", "42"]))
    assert out.isna().tolist() == [True, True, True, False]
    assert out.iloc[3] == 42.0


# -----------------------------------------------------------------------------
# Brand matching
# -----------------------------------------------------------------------------


class TestBrands:
    """Tests for case-insensitive brand matching."""

    def test_match_brand_canonicalizes(self) -> None:
        assert match_brand("  gucci ") == "Gucci"
        assert match_brand("HERMES") == "Hermes"

    def test_match_brand_unknown(self) -> None:
        assert match_brand("Prada") is None
        assert match_brand("") is None
        assert match_brand(None) is None

    def test_brand_mask(self) -> None:
        series = pd.Series(["Coach", " coach", None, "Gucci"])
        assert brand_mask(series, "Coach").tolist() == [True, True, False, False]
