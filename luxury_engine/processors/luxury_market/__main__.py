"""
Snapshot Runner — Loads the datasets and prints the Brand Snapshot as JSON.

Usage:
    python -m luxury_engine.processors.luxury_market --data-dir data/ --metric seller_price
"""

import argparse
import json
import logging
import sys

from luxury_engine.config import PRICE_METRICS, DEFAULT_PRICE_METRIC, configure_logging, settings
from .analyzer import BrandAnalyzer
from .loader import DatasetError, DatasetLoader

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the luxury brand chart snapshot as JSON.")
    parser.add_argument("--data-dir", default=settings.DATA_DIR)
    parser.add_argument("--metric", choices=PRICE_METRICS, default=DEFAULT_PRICE_METRIC)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    loader = DatasetLoader(args.data_dir)
    try:
        tables = loader.load()
    except DatasetError as exc:
        logger.error(str(exc))
        return 1

    for info in loader.file_info:
        logger.info(f"Loaded {info['filename']}: {info['rows']} rows")

    snapshot = BrandAnalyzer().analyze(tables, price_metric=args.metric)
    json.dump(snapshot, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
