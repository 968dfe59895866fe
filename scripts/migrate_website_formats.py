#!/usr/bin/env python3
"""Populate format.dimensions on website advertising opportunities.

Normalizes the legacy ``sizes`` list (or ``specifications.size``) of every
website ad into ``format.dimensions``.

Usage:
    python scripts/migrate_website_formats.py [--apply]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from migrations.runner import main
from migrations.website_formats import WebsiteFormatMigration


if __name__ == "__main__":
    sys.exit(main(WebsiteFormatMigration()))
