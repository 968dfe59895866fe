"""Migration runner for ad format migrations.

Reads every publication once, plans each one, and in apply mode writes one
``$set`` update per publication that changed. Updates are awaited one at a
time. A failed update is logged and recorded, and the remaining
publications are still processed; there is no retry and no rollback.

Dry-run is the default: nothing is written unless ``apply=True``.
"""

import argparse
import asyncio
import logging
from pathlib import Path
from typing import Optional, Sequence

from config import ConfigManager
from migrations.base import FormatMigration, publication_name
from migrations.models import MigrationSummary, WriteError
from migrations.report import format_report
from storage.database import StorageError, close_database, connect_to_database
from storage.publication_repository import PublicationRepository

logger = logging.getLogger(__name__)


async def run_migration(
    migration: FormatMigration,
    repository: PublicationRepository,
    apply: bool = False,
) -> MigrationSummary:
    """Run a migration over all matching publications.

    Args:
        migration: The migration to run.
        repository: Publication repository to read from and write to.
        apply: If False (default), plan only and issue no writes.

    Returns:
        MigrationSummary with per-ad results, counts and write errors.

    Raises:
        StorageError: If reading the publications fails.
    """
    publications = await repository.find_all(migration.query)
    summary = MigrationSummary(
        migration=migration.name,
        container_label=migration.container_label,
        dry_run=not apply,
        publications_scanned=len(publications),
    )
    logger.info(f"Analyzing {len(publications)} publications ({migration.name})")

    for publication in publications:
        plan = migration.plan(publication)
        summary.results.extend(plan.results)

        if not apply or not plan.changed:
            continue

        name = publication_name(publication)
        try:
            await repository.set_fields(publication["_id"], {plan.field_path: plan.value})
        except StorageError as e:
            logger.error(f"Failed to update {name} ({publication['_id']}): {e}")
            summary.errors.append(WriteError(publication["_id"], name, str(e)))
            continue

        summary.publications_updated += 1
        summary.ads_updated += plan.ads_changed
        logger.info(f"Updated {name}: {plan.ads_changed} ads")

    return summary


def build_parser(migration: FormatMigration) -> argparse.ArgumentParser:
    """Command-line options shared by the migration scripts."""
    parser = argparse.ArgumentParser(
        description=f"Populate format.dimensions ({migration.name})"
    )
    parser.add_argument("--apply", action="store_true", help="Write changes (default: dry run)")
    parser.add_argument("--uri", type=str, help="MongoDB URI (default: $MONGODB_URI)")
    parser.add_argument("--database", type=str, help="Database name (default: $MONGODB_DB_NAME)")
    parser.add_argument("--collection", type=str, help="Publications collection name")
    parser.add_argument("--config-dir", type=str, help="Config directory (default: ~/.adformats)")
    parser.add_argument("--log-level", type=str, help="Logging level (default: from config)")
    return parser


def main(migration: FormatMigration, argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for migration scripts.

    Returns:
        Process exit code: 0 on completion, 1 on any unhandled error.
    """
    args = build_parser(migration).parse_args(argv)
    config_manager = ConfigManager(Path(args.config_dir).expanduser() if args.config_dir else None)

    try:
        app_config = config_manager.get_config()
        logging.basicConfig(
            level=(args.log_level or app_config.log_level).upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        print("=" * 100)
        if args.apply:
            print("⚠️  LIVE MODE - Changes will be applied!")
        else:
            print("🔍 DRY RUN MODE - No changes will be made")
        print("=" * 100)

        mongo = config_manager.resolve_mongo_config(args.uri, args.database, args.collection)
        database = connect_to_database(mongo.uri.get_secret_value(), mongo.database)
        repository = PublicationRepository(database[mongo.publications_collection])

        summary = asyncio.run(run_migration(migration, repository, apply=args.apply))
    except Exception:
        logger.exception(f"Migration {migration.name} failed")
        return 1
    finally:
        close_database()

    print(format_report(summary, migration.script))
    print("✅ Migration analysis completed!")
    return 0
