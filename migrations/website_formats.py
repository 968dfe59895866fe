"""Website ad format migration.

Website opportunities never had a ``dimensions`` string; publishers listed
accepted sizes in ``sizes`` (or a single ``specifications.size``). This
migration normalizes those lists into ``format.dimensions`` the same way
the newsletter migration does for newsletters.
"""

import copy
from typing import Any, Dict, List, Mapping

from formats.accessors import format_dimensions
from formats.constants import NEEDS_REVIEW
from formats.models import DimensionValue
from migrations.base import FormatMigration, publication_name
from migrations.models import MigrationOutcome, MigrationResult, PublicationPlan
from utils.size_normalization import normalize_pixel_size

WEBSITE_CHANNEL = "Website"

# Web display standards; wider than the newsletter IAB set
IAB_WEB_SIZES = frozenset([
    "728x90", "970x90", "300x250", "336x280", "300x600", "160x600",
    "120x600", "970x250", "250x250", "200x200", "180x150", "125x125",
    "320x50", "320x100", "300x50", "468x60",
])

NATIVE_INLINE = "native-inline"
NATIVE_KEYWORDS = ("article", "sponsored", "native", "in-story")
VAGUE_SINGLE_SIZES = frozenset([
    "multiple ad placements", "standard banner dimensions", "custom", "various",
])
VAGUE_LIST_ENTRIES = frozenset([
    "article", "multiple ad placements", "standard banner dimensions", "custom",
])


def website_sizes(ad: Mapping[str, Any]) -> List[str]:
    """Legacy sizes of a website opportunity, or [] when none are recorded.

    A recorded ``sizes`` list wins even when empty; ``specifications.size``
    is only read when ``sizes`` is absent.
    """
    sizes = ad.get("sizes")
    if isinstance(sizes, str):
        return [sizes]
    if sizes is not None:
        return [str(size) for size in sizes if size is not None]
    specifications = ad.get("specifications") or {}
    size = specifications.get("size")
    return [str(size)] if size else []


def infer_website_dimensions(sizes: List[str]) -> DimensionValue:
    """
    Infer ``format.dimensions`` from a website opportunity's sizes.

    Args:
        sizes: Legacy ``sizes`` entries.

    Returns:
        A normalized pixel size, ``native-inline``, a list of sizes, or
        NEEDS_REVIEW.

    Examples:
        >>> infer_website_dimensions(["300 x 250px"])
        '300x250'

        >>> infer_website_dimensions(["Sponsored article"])
        'native-inline'

        >>> infer_website_dimensions(["728x90", "custom", "300x250"])
        ['728x90', '300x250']
    """
    if not sizes:
        return NEEDS_REVIEW

    if len(sizes) == 1:
        size = sizes[0].strip()
        lower = size.lower()

        if any(keyword in lower for keyword in NATIVE_KEYWORDS):
            return NATIVE_INLINE

        if lower in VAGUE_SINGLE_SIZES:
            return NEEDS_REVIEW

        return normalize_pixel_size(size) or NEEDS_REVIEW

    normalized = []
    for size in sizes:
        trimmed = size.strip()
        if trimmed.lower() in VAGUE_LIST_ENTRIES:
            continue
        pixel = normalize_pixel_size(trimmed)
        if pixel:
            normalized.append(pixel)

    if not normalized:
        return NEEDS_REVIEW
    if len(normalized) == 1:
        return normalized[0]
    return normalized


def website_category(dimensions: DimensionValue) -> str:
    """Category label used in the website migration report."""
    if dimensions == NEEDS_REVIEW:
        return "needs-review"

    dim = dimensions[0] if isinstance(dimensions, list) else dimensions

    if dim.startswith("native-"):
        return "native"
    if dim.startswith("responsive-"):
        return "responsive"
    if dim in IAB_WEB_SIZES:
        return "iab-standard"
    if normalize_pixel_size(dim) == dim:
        return "custom-display"
    return "unknown"


class WebsiteFormatMigration(FormatMigration):
    """Populates ``format.dimensions`` on website advertising opportunities."""

    name = "website-formats"
    field_path = "distributionChannels.website.advertisingOpportunities"
    script = "scripts/migrate_website_formats.py"
    container_label = "Channel"

    @property
    def query(self) -> Dict[str, Any]:
        return {self.field_path: {"$exists": True, "$ne": []}}

    def plan(self, publication: Mapping[str, Any]) -> PublicationPlan:
        pub_name = publication_name(publication)
        website = (publication.get("distributionChannels") or {}).get("website") or {}
        ads = copy.deepcopy(website.get("advertisingOpportunities") or [])

        plan = PublicationPlan(field_path=self.field_path, value=ads)

        for ad in ads:
            result = MigrationResult(
                publication_id=publication.get("_id"),
                publication_name=pub_name,
                container_name=WEBSITE_CHANNEL,
                ad_name=ad.get("name") or "Unnamed Ad",
                old_dimensions=None,
                new_dimensions=None,
                outcome=MigrationOutcome.ALREADY_MIGRATED,
            )

            existing = format_dimensions(ad)
            if existing is not None:
                result.new_dimensions = existing
                plan.results.append(result)
                continue

            sizes = website_sizes(ad)
            if not sizes:
                continue

            new_dimensions = infer_website_dimensions(sizes)
            result.old_dimensions = sizes
            result.new_dimensions = new_dimensions
            plan.results.append(result)

            if new_dimensions == NEEDS_REVIEW:
                result.outcome = MigrationOutcome.NEEDS_REVIEW
                continue

            result.outcome = MigrationOutcome.INFERRED
            result.category = website_category(new_dimensions)
            ad["format"] = {**(ad.get("format") or {}), "dimensions": new_dimensions}
            plan.ads_changed += 1

        return plan
