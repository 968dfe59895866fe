"""Newsletter ad format migration.

Moves every newsletter advertising opportunity from the legacy scalar
``dimensions`` string to ``format.dimensions``. Records that already carry
``format.dimensions`` are left alone, so the migration can be re-run safely
after a partial or complete apply.

Resolution order for one opportunity:

1. ``format.dimensions`` present: ALREADY_MIGRATED, skipped.
2. Legacy value missing: ``full-newsletter`` for dedicated sends (MISSING),
   otherwise NEEDS_REVIEW.
3. Legacy value in LEGACY_DIMENSION_MAP: MAPPED (or NEEDS_REVIEW when the
   map says so).
4. Heuristics in infer_dimensions(): INFERRED, or NEEDS_REVIEW.

Example:
    >>> resolve_legacy_dimensions("Full email", "dedicated")
    ('full-newsletter', <MigrationOutcome.MAPPED: 'mapped'>)
    >>> resolve_legacy_dimensions("300x250, 600x150")
    (['300x250', '600x150'], <MigrationOutcome.INFERRED: 'inferred'>)
"""

import copy
import re
from typing import Any, Mapping, Optional, Tuple

from formats.accessors import format_dimensions, is_dimension_set
from formats.classifier import get_category
from formats.constants import NEEDS_REVIEW
from formats.models import DimensionValue
from migrations.base import FormatMigration, publication_id, publication_name
from migrations.dimension_map import LEGACY_DIMENSION_MAP
from migrations.models import MigrationOutcome, MigrationResult, PublicationPlan
from utils.size_normalization import LOOSE_PIXEL_SIZE_PATTERN

DEDICATED_POSITION = "dedicated"
TAKEOVER_VALUE = "full-newsletter"

LIST_SEPARATORS = re.compile(r"[,/]|\s+or\s+", re.IGNORECASE)
TAKEOVER_PATTERN = re.compile(r"full|takeover|dedicated|edition|integration", re.IGNORECASE)
RESPONSIVE_PATTERN = re.compile(r"responsive|flexible|fluid", re.IGNORECASE)
NATIVE_PATTERN = re.compile(r"text|content|sponsored|native", re.IGNORECASE)
CHARACTER_LIMIT_PATTERN = re.compile(r"\d+\s*character", re.IGNORECASE)


def _is_list_text(dimensions: str) -> bool:
    return "," in dimensions or "/" in dimensions or " or " in dimensions.lower()


def _resolve_piece(piece: str) -> str:
    if LOOSE_PIXEL_SIZE_PATTERN.match(piece):
        return piece
    return LEGACY_DIMENSION_MAP.get(piece, piece)


def infer_dimensions(dimensions: str, position: Optional[str] = None) -> DimensionValue:
    """
    Infer canonical dimensions from a legacy string not found in the map.

    Args:
        dimensions: Legacy free-text dimension value.
        position: Placement position ("header", "inline", "dedicated", ...).

    Returns:
        A canonical value, a list of alternatives, or NEEDS_REVIEW.

    Examples:
        >>> infer_dimensions("300 x 250")
        '300 x 250'

        >>> infer_dimensions("728x90 or 300x250")
        ['728x90', '300x250']

        >>> infer_dimensions("Sponsored takeover")
        'full-newsletter'

        >>> infer_dimensions("Up to 300 characters")
        'text-only'

        >>> infer_dimensions("See media kit")
        'NEEDS_REVIEW'
    """
    # Pixel sizes pass through verbatim; category is derived later
    if LOOSE_PIXEL_SIZE_PATTERN.match(dimensions):
        return dimensions

    if _is_list_text(dimensions):
        pieces = [p.strip() for p in LIST_SEPARATORS.split(dimensions)]
        sizes = [_resolve_piece(p) for p in pieces if p]
        if len(sizes) > 1 and all(size != NEEDS_REVIEW for size in sizes):
            return sizes

    if TAKEOVER_PATTERN.search(dimensions):
        return TAKEOVER_VALUE

    if RESPONSIVE_PATTERN.search(dimensions):
        return "responsive"

    if NATIVE_PATTERN.search(dimensions):
        return "text-only"

    if CHARACTER_LIMIT_PATTERN.search(dimensions):
        return "text-only"

    if position == DEDICATED_POSITION:
        return TAKEOVER_VALUE

    return NEEDS_REVIEW


def resolve_legacy_dimensions(
    dimensions: Optional[str],
    position: Optional[str] = None,
) -> Tuple[DimensionValue, MigrationOutcome]:
    """
    Resolve a legacy dimensions value to its replacement and outcome.

    Args:
        dimensions: Legacy ``dimensions`` string (None or "" when missing).
        position: Placement position.

    Returns:
        Tuple of (new value, outcome). The new value is NEEDS_REVIEW
        whenever the outcome is NEEDS_REVIEW.
    """
    if not is_dimension_set(dimensions):
        if position == DEDICATED_POSITION:
            return TAKEOVER_VALUE, MigrationOutcome.MISSING
        return NEEDS_REVIEW, MigrationOutcome.NEEDS_REVIEW

    # Lists, numbers and other non-text values have no legacy meaning
    if not isinstance(dimensions, str):
        return NEEDS_REVIEW, MigrationOutcome.NEEDS_REVIEW

    mapped = LEGACY_DIMENSION_MAP.get(dimensions)
    if mapped is not None:
        if mapped == NEEDS_REVIEW:
            return NEEDS_REVIEW, MigrationOutcome.NEEDS_REVIEW
        return mapped, MigrationOutcome.MAPPED

    inferred = infer_dimensions(dimensions, position)
    if inferred == NEEDS_REVIEW:
        return NEEDS_REVIEW, MigrationOutcome.NEEDS_REVIEW
    return inferred, MigrationOutcome.INFERRED


class NewsletterFormatMigration(FormatMigration):
    """Populates ``format.dimensions`` on newsletter advertising opportunities."""

    name = "newsletter-formats"
    field_path = "distributionChannels.newsletters"
    script = "scripts/migrate_newsletter_formats.py"

    def plan(self, publication: Mapping[str, Any]) -> PublicationPlan:
        pub_id = publication_id(publication)
        pub_name = publication_name(publication)
        channels = publication.get("distributionChannels") or {}
        newsletters = copy.deepcopy(channels.get("newsletters") or [])

        plan = PublicationPlan(field_path=self.field_path, value=newsletters)

        for newsletter in newsletters:
            newsletter_name = newsletter.get("name") or "Unnamed Newsletter"

            for ad in newsletter.get("advertisingOpportunities") or []:
                old_dimensions = ad.get("dimensions")
                result = MigrationResult(
                    publication_id=pub_id,
                    publication_name=pub_name,
                    container_name=newsletter_name,
                    ad_name=ad.get("name") or "Unnamed Ad",
                    old_dimensions=old_dimensions if is_dimension_set(old_dimensions) else None,
                    new_dimensions=None,
                    outcome=MigrationOutcome.ALREADY_MIGRATED,
                )
                plan.results.append(result)

                existing = format_dimensions(ad)
                if existing is not None:
                    result.new_dimensions = existing
                    result.category = get_category(existing).value
                    continue

                new_dimensions, outcome = resolve_legacy_dimensions(
                    old_dimensions, ad.get("position")
                )
                result.new_dimensions = new_dimensions
                result.outcome = outcome

                if result.needs_review:
                    continue

                result.category = get_category(new_dimensions).value
                ad["format"] = {**(ad.get("format") or {}), "dimensions": new_dimensions}
                plan.ads_changed += 1

        return plan
