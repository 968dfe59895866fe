"""Ad format migrations for publication documents.

Each migration populates ``format.dimensions`` from legacy free-text
values. Runs are dry-run by default and idempotent: records that already
carry ``format.dimensions`` are skipped.

Usage:
    # Preview the newsletter migration
    python scripts/migrate_newsletter_formats.py

    # Apply it
    python scripts/migrate_newsletter_formats.py --apply
"""

from .base import FormatMigration
from .models import MigrationOutcome, MigrationResult, MigrationSummary, PublicationPlan, WriteError
from .newsletter_formats import NewsletterFormatMigration, infer_dimensions, resolve_legacy_dimensions
from .website_formats import WebsiteFormatMigration, infer_website_dimensions

__all__ = [
    "FormatMigration",
    "NewsletterFormatMigration",
    "WebsiteFormatMigration",
    "MigrationOutcome",
    "MigrationResult",
    "MigrationSummary",
    "PublicationPlan",
    "WriteError",
    "infer_dimensions",
    "infer_website_dimensions",
    "resolve_legacy_dimensions",
]
