import logging
import os

from pydantic_settings import BaseSettings

# --- DYNAMIC PATH CONFIGURATION ---
# luxury_engine/config/__init__.py -> parent is config -> parent is luxury_engine -> parent is project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

DATA_DIR = os.path.join(BASE_DIR, "data")

# --- DATASET FILES ---
REVENUE_FILE = "luxury_revenue.csv"
RESALE_FILE = "resale_prices.csv"
SEARCH_INTEREST_FILE = "geoMap (2).csv"
REGION_CATEGORY_FILE = "region_category_clean_data.csv"

# --- BRANDS & METRICS ---
BRANDS = ("Hermes", "Gucci", "Coach")

METRICS = ("Revenue", "AvgResale", "SearchInterest", "CategoryDiversity")

METRIC_LABELS = {
    "Revenue": "Revenue (normalized)",
    "AvgResale": "Avg Resale Price (normalized)",
    "SearchInterest": "Search Interest (normalized)",
    "CategoryDiversity": "Category Diversity (normalized)",
}

PRICE_METRICS = ("price_usd", "seller_price")
DEFAULT_PRICE_METRIC = "price_usd"

# Google Trends exports prepend a "Category: ..." line before the header
SEARCH_METADATA_PREFIX = "Category:"

# --- KDE SETTINGS ---
KDE_GRID_POINTS = 80
KDE_BANDWIDTH_DIVISOR = 24
KDE_FALLBACK_FRACTION = 0.05
KDE_DOMAIN_PAD = (0.9, 1.05)


class Settings(BaseSettings):
    """Runtime overrides loaded from environment variables / .env file."""

    DATA_DIR: str = DATA_DIR
    LOG_LEVEL: str = "INFO"
    KDE_GRID_POINTS: int = KDE_GRID_POINTS

    class Config:
        env_file = ".env"
        env_prefix = "LUXURY_"
        case_sensitive = True
        extra = "ignore"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at *level* (defaults to settings.LOG_LEVEL)."""
    name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
