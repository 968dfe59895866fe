#!/usr/bin/env python3
"""Populate format.dimensions on newsletter advertising opportunities.

Translates the legacy free-text ``dimensions`` string of every newsletter
ad into the canonical vocabulary. Ambiguous values are listed for manual
review and never written. Records that already have ``format.dimensions``
are skipped, so the script is safe to re-run.

Usage:
    python scripts/migrate_newsletter_formats.py [--apply]

Without --apply the script only prints the report.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from migrations.newsletter_formats import NewsletterFormatMigration
from migrations.runner import main


if __name__ == "__main__":
    sys.exit(main(NewsletterFormatMigration()))
