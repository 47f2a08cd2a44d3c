"""Tests for DatasetLoader against a temporary data directory."""

from pathlib import Path

import pytest

from luxury_engine.config import (
    REGION_CATEGORY_FILE,
    RESALE_FILE,
    REVENUE_FILE,
    SEARCH_INTEREST_FILE,
)
from luxury_engine.processors.luxury_market.loader import DatasetError, DatasetLoader


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory holding all four source files."""
    (tmp_path / REVENUE_FILE).write_text(
        "Year,Gucci_Revenue_Million_USD,Coach_Revenue_Million_USD,Hermes_Revenue_Million_USD\n"
        "2023,1900,480,900\n"
        "2024,2000,500,1000\n"
    )
    (tmp_path / RESALE_FILE).write_text(
        "Brand,Category,Average_Price_USD\nHermes,Handbags,9000\nCoach,Handbags,\n"
    )
    (tmp_path / SEARCH_INTEREST_FILE).write_text(
        "Category: All categories\n\nRegion,Gucci\nOhio,40%\n"
    )
    (tmp_path / REGION_CATEGORY_FILE).write_text("brand,category\nGucci,Shoes\n")
    return tmp_path


def test_loads_all_tables(data_dir: Path) -> None:
    loader = DatasetLoader(str(data_dir))
    tables = loader.load()

    assert len(tables["revenue"]) == 2
    assert tables["revenue"]["Year"].tolist() == ["2023", "2024"]
    # blanks stay as empty strings, not NaN
    assert tables["resale"]["Average_Price_USD"].tolist() == ["9000", ""]
    assert tables["search"].startswith("Category:")
    assert tables["region"]["brand"].tolist() == ["Gucci"]
    assert [f["filename"] for f in loader.file_info] == [
        REVENUE_FILE, RESALE_FILE, SEARCH_INTEREST_FILE, REGION_CATEGORY_FILE,
    ]


def test_optional_files_missing(data_dir: Path) -> None:
    (data_dir / SEARCH_INTEREST_FILE).unlink()
    (data_dir / REGION_CATEGORY_FILE).unlink()

    tables = DatasetLoader(str(data_dir)).load()
    assert tables["search"] is None
    assert tables["region"] is None


def test_missing_required_file_raises(data_dir: Path) -> None:
    (data_dir / REVENUE_FILE).unlink()
    with pytest.raises(DatasetError, match=REVENUE_FILE):
        DatasetLoader(str(data_dir)).load()


def test_empty_required_file_raises(data_dir: Path) -> None:
    (data_dir / RESALE_FILE).write_text("Brand,Category,Average_Price_USD\n")
    with pytest.raises(DatasetError, match="no rows"):
        DatasetLoader(str(data_dir)).load()


def test_dataset_error_is_value_error() -> None:
    assert issubclass(DatasetError, ValueError)
