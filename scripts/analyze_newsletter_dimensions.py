#!/usr/bin/env python3
"""Survey the legacy newsletter dimension values in the database.

Read-only. Prints every unique ``dimensions`` value with where it is used,
grouped by pixel, physical, descriptive and unclear values. Run this
before extending the legacy dimension map.

Usage:
    python scripts/analyze_newsletter_dimensions.py [--uri URI] [--database NAME]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from analytics.dimension_analyzer import analyze_newsletter_dimensions, format_analysis
from config import ConfigManager
from storage.database import close_database, connect_to_database
from storage.publication_repository import PublicationRepository

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Newsletter dimension analysis")
    parser.add_argument("--uri", type=str, help="MongoDB URI (default: $MONGODB_URI)")
    parser.add_argument("--database", type=str, help="Database name (default: $MONGODB_DB_NAME)")
    parser.add_argument("--collection", type=str, help="Publications collection name")
    parser.add_argument("--config-dir", type=str, help="Config directory (default: ~/.adformats)")
    args = parser.parse_args(argv)

    config_manager = ConfigManager(Path(args.config_dir).expanduser() if args.config_dir else None)

    try:
        logging.basicConfig(level=config_manager.get_config().log_level.upper())
        mongo = config_manager.resolve_mongo_config(args.uri, args.database, args.collection)
        database = connect_to_database(mongo.uri.get_secret_value(), mongo.database)
        repository = PublicationRepository(database[mongo.publications_collection])
        publications = asyncio.run(repository.find_all())
    except Exception:
        logger.exception("Dimension analysis failed")
        return 1
    finally:
        close_database()

    print("=" * 100)
    print("NEWSLETTER DIMENSION ANALYSIS - CURRENT VALUES")
    print("=" * 100)
    print(format_analysis(analyze_newsletter_dimensions(publications)))
    print("✅ Analysis completed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
