#!/usr/bin/env python3
"""Manage the encrypted MongoDB settings used by the migration scripts.

Settings saved here are the fallback when neither command-line flags nor
MONGODB_URI / MONGODB_DB_NAME are given.

Usage:
    python scripts/configure.py set --uri URI [--database NAME] [--collection NAME] [--log-level LEVEL]
    python scripts/configure.py show
    python scripts/configure.py reset

Examples:
    python scripts/configure.py set --uri "mongodb+srv://user:pw@cluster0.example.net"
    python scripts/configure.py show
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import AppConfig, ConfigError, ConfigManager, MongoConfig
from storage.database import redact_uri

logger = logging.getLogger(__name__)


def cmd_set(manager, args):
    """Store connection settings, keeping any values not given."""
    current = manager.get_config()
    stored = current.mongodb

    uri = args.uri or (stored.uri.get_secret_value() if stored else None)
    if not uri:
        print("❌ --uri is required when nothing is stored yet")
        return 1

    defaults = stored or MongoConfig(uri=uri)
    config = AppConfig(
        mongodb=MongoConfig(
            uri=uri,
            database=args.database or defaults.database,
            publications_collection=args.collection or defaults.publications_collection,
        ),
        log_level=(args.log_level or current.log_level).upper(),
    )
    manager.save(config)
    print(f"✅ Configuration saved to {manager.config_path}")
    return 0


def cmd_show(manager, args):
    """Print the stored settings with credentials masked."""
    if not manager.is_configured():
        print(f"No configuration stored in {manager.config_dir}")
        return 1

    config = manager.load()
    print(f"Config file: {manager.config_path}")
    print(f"Log level:   {config.log_level}")
    if config.mongodb is None:
        print("MongoDB:     not set")
        return 0
    print(f"MongoDB URI: {redact_uri(config.mongodb.uri.get_secret_value())}")
    print(f"Database:    {config.mongodb.database}")
    print(f"Collection:  {config.mongodb.publications_collection}")
    return 0


def cmd_reset(manager, args):
    """Delete the stored settings and encryption key."""
    manager.reset()
    print(f"🗑️  Configuration removed from {manager.config_dir}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Ad format migration settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config-dir", type=str, help="Config directory (default: ~/.adformats)")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    set_parser = subparsers.add_parser("set", help="Store MongoDB settings")
    set_parser.add_argument("--uri", type=str, help="MongoDB connection string")
    set_parser.add_argument("--database", type=str, help="Database name")
    set_parser.add_argument("--collection", type=str, help="Publications collection name")
    set_parser.add_argument("--log-level", type=str, help="Log level for the scripts")
    set_parser.set_defaults(func=cmd_set)

    show_parser = subparsers.add_parser("show", help="Show stored settings")
    show_parser.set_defaults(func=cmd_show)

    reset_parser = subparsers.add_parser("reset", help="Delete stored settings")
    reset_parser.set_defaults(func=cmd_reset)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    manager = ConfigManager(Path(args.config_dir).expanduser() if args.config_dir else None)
    try:
        return args.func(manager, args)
    except ConfigError:
        logger.exception("Configuration command failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
