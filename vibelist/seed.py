"""Seed the track library from a CSV dataset.

Usage: python -m vibelist.seed [path/to/dataset.csv]
"""
import argparse
import logging
import sys
from pathlib import Path

from vibelist.config import BASE_DIR, DB_PATH
from vibelist.core.csv_import import parse_csv
from vibelist.core.database import Database, StoreError
from vibelist.core.track_store import TrackStore
from vibelist.models.track import SOURCE_DATASET

logger = logging.getLogger(__name__)

DEFAULT_DATASET = BASE_DIR / "datasets" / "sample_music_data.csv"
DATASET_FILENAME = "Pre-loaded Dataset"


def seed(csv_path: Path, db_path: Path = DB_PATH) -> int:
    """Insert every row of csv_path as one batch. Returns the number of tracks stored."""
    text = Path(csv_path).read_text(encoding="utf-8-sig")
    tracks = parse_csv(text, source=SOURCE_DATASET, filename=DATASET_FILENAME)
    TrackStore(Database(db_path)).bulk_insert(tracks)
    return len(tracks)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the Vibelist track library from a CSV file.")
    parser.add_argument("csv_path", nargs="?", default=str(DEFAULT_DATASET))
    parser.add_argument("--db", default=str(DB_PATH), help="SQLite database path")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    csv_path = Path(args.csv_path)
    if not csv_path.exists():
        logger.error("Dataset not found: %s", csv_path)
        return 1
    logger.info("Reading dataset from %s...", csv_path)
    try:
        count = seed(csv_path, Path(args.db))
    except StoreError as e:
        logger.error("Seeding failed: %s", e)
        return 1
    logger.info("Successfully seeded %d tracks into %s", count, args.db)
    return 0


if __name__ == "__main__":
    sys.exit(main())
