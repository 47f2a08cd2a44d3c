"""
Dataset Loader — Reads the four luxury-market sources from a data directory.

    luxury_revenue.csv              → DataFrame  (required)
    resale_prices.csv               → DataFrame  (required)
    geoMap (2).csv                  → raw text   (optional; has a metadata line)
    region_category_clean_data.csv  → DataFrame  (optional)

Cells are kept as strings; the pipelines do their own numeric coercion.
"""

from __future__ import annotations

import logging
import os

import pandas as pd

from luxury_engine.config import (
    REGION_CATEGORY_FILE,
    RESALE_FILE,
    REVENUE_FILE,
    SEARCH_INTEREST_FILE,
    settings,
)

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """A required dataset is missing, unreadable or empty."""


class DatasetLoader:
    """
    Loads every source table into memory.

    Usage:
        tables = DatasetLoader("data/").load()
        tables["revenue"], tables["resale"], tables["search"], tables["region"]
    """

    def __init__(self, data_dir: str | None = None):
        self.data_dir = data_dir or settings.DATA_DIR
        self._file_info: list[dict] = []

    @property
    def file_info(self) -> list[dict]:
        return self._file_info

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self) -> dict:
        """
        Returns:
            {"revenue": DataFrame, "resale": DataFrame,
             "search": str | None, "region": DataFrame | None}

        Raises:
            DatasetError: revenue or resale table cannot be loaded.
        """
        self._file_info = []
        return {
            "revenue": self._read_csv(REVENUE_FILE, required=True),
            "resale": self._read_csv(RESALE_FILE, required=True),
            "search": self._read_text(SEARCH_INTEREST_FILE),
            "region": self._read_csv(REGION_CATEGORY_FILE, required=False),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _path(self, fname: str) -> str:
        return os.path.join(self.data_dir, fname)

    def _read_csv(self, fname: str, required: bool) -> pd.DataFrame | None:
        path = self._path(fname)
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            if required:
                raise DatasetError(f"Cannot load required dataset {fname}: {exc}") from exc
            logger.warning(f"Skipping {fname}: {exc}")
            return None

        if df.empty and required:
            raise DatasetError(f"Required dataset {fname} has no rows")

        self._file_info.append({"filename": fname, "rows": len(df), "columns": len(df.columns)})
        return df

    def _read_text(self, fname: str) -> str | None:
        path = self._path(fname)
        try:
            with open(path, encoding="utf-8-sig") as fh:
                text = fh.read()
        except OSError as exc:
            logger.warning(f"Skipping {fname}: {exc}")
            return None

        self._file_info.append({"filename": fname, "rows": text.count("\n"), "columns": None})
        return text
