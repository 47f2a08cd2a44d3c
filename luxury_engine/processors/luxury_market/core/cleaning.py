"""
Cleaning — Numeric coercion helpers shared by every pipeline.

Source cells arrive as strings ("44%", "$1,200", "", "<1").
These helpers turn them into floats, or None when there is no number.
"""

from __future__ import annotations

import math
import re

import numpy as np
import pandas as pd


# optional sign, digits with optional decimal point, optional trailing '%'
_PERCENT_RE = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*%?\s*$")

# Anything that can't be part of a number or the trailing '%'
_STRAY_CHARS_RE = re.compile(r"[^0-9.%+\-]")


def _is_missing(value) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def parse_percent(value) -> float | None:
    """
    Parse a percentage cell like '44%', ' 12.5 % ' or '-3%' into a float.

    Stray characters such as '<' in '<1%' are stripped first.
    Returns None for empty, NaN or unparsable input.
    """
    if _is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    text = _STRAY_CHARS_RE.sub("", str(value))
    match = _PERCENT_RE.match(text)
    if not match:
        return None
    return float(match.group(1))


def to_number(value) -> float | None:
    """Coerce a single cell to float. Empty / non-numeric / NaN -> None."""
    if _is_missing(value):
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def clean_series(series: pd.Series) -> pd.Series:
    """Strip $/, convert to numeric, return Series (NaN for junk and +-inf)."""
    numeric = pd.to_numeric(
        series.astype(str).str.replace(r"[\$,]", "", regex=True),
        errors="coerce",
    ).astype(float)
    return numeric.where(np.isfinite(numeric))
