"""Newsletter Dimension Analyzer.

Surveys the legacy ``dimensions`` strings on newsletter advertising
opportunities before a migration is planned:

1. How many publications, newsletters and ads there are
2. Which ads have no dimension value at all
3. Every unique dimension value, how often it occurs and where
4. A rough grouping of values (pixel, physical, descriptive, other)

Example:
    >>> from analytics.dimension_analyzer import analyze_newsletter_dimensions
    >>> analysis = analyze_newsletter_dimensions(publications)
    >>> print(format_analysis(analysis))
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping

from migrations.base import publication_name

logger = logging.getLogger(__name__)

PIXEL_PATTERN = re.compile(r"^\d+x\d+$", re.IGNORECASE)
PHYSICAL_PATTERN = re.compile(r"[\"'“”‘’]|inch", re.IGNORECASE)
DESCRIPTIVE_PATTERN = re.compile(
    r"full|responsive|integration|email|newsletter|edition|custom|image|words",
    re.IGNORECASE,
)

WIDTH = 100


@dataclass
class DimensionPlacement:
    """Where a dimension value is used."""

    publication: str
    newsletter: str
    ad_name: str
    position: str


@dataclass
class DimensionUsage:
    """Occurrences of one legacy dimension value."""

    dimension: str
    count: int = 0
    used_by: List[DimensionPlacement] = field(default_factory=list)


@dataclass
class DimensionAnalysis:
    """Complete newsletter dimension survey."""

    total_publications: int = 0
    total_newsletters: int = 0
    newsletters_with_ads: int = 0
    total_ads: int = 0
    ads_without_dimensions: int = 0
    usages: Dict[str, DimensionUsage] = field(default_factory=dict)

    def sorted_usages(self) -> List[DimensionUsage]:
        """Usages ordered by count, most used first (stable for ties)."""
        return sorted(self.usages.values(), key=lambda u: u.count, reverse=True)

    def groups(self) -> Dict[str, List[DimensionUsage]]:
        """Bucket every value into pixel, physical, descriptive or other."""
        grouped: Dict[str, List[DimensionUsage]] = {
            "pixel": [],
            "physical": [],
            "descriptive": [],
            "other": [],
        }
        for usage in self.sorted_usages():
            value = usage.dimension
            if PIXEL_PATTERN.match(value):
                grouped["pixel"].append(usage)
            elif PHYSICAL_PATTERN.search(value):
                grouped["physical"].append(usage)
            elif DESCRIPTIVE_PATTERN.search(value):
                grouped["descriptive"].append(usage)
            else:
                grouped["other"].append(usage)
        return grouped


def analyze_newsletter_dimensions(publications: Iterable[Mapping[str, Any]]) -> DimensionAnalysis:
    """
    Survey legacy newsletter dimension values across publications.

    Args:
        publications: Publication documents.

    Returns:
        DimensionAnalysis with totals and per-value usage.
    """
    analysis = DimensionAnalysis()

    for pub in publications:
        analysis.total_publications += 1
        pub_name = publication_name(pub)
        newsletters = (pub.get("distributionChannels") or {}).get("newsletters") or []
        analysis.total_newsletters += len(newsletters)

        for newsletter in newsletters:
            newsletter_name = newsletter.get("name") or "Unnamed Newsletter"
            ads = newsletter.get("advertisingOpportunities") or []
            if ads:
                analysis.newsletters_with_ads += 1

            for ad in ads:
                analysis.total_ads += 1
                dimension = ad.get("dimensions")
                if not dimension:
                    analysis.ads_without_dimensions += 1
                    continue
                if not isinstance(dimension, str):
                    dimension = str(dimension)

                usage = analysis.usages.setdefault(dimension, DimensionUsage(dimension=dimension))
                usage.count += 1
                usage.used_by.append(DimensionPlacement(
                    publication=pub_name,
                    newsletter=newsletter_name,
                    ad_name=ad.get("name") or "Unnamed Ad",
                    position=ad.get("position") or "unknown",
                ))

    logger.debug(
        f"Analyzed {analysis.total_ads} ads, {len(analysis.usages)} unique dimension values"
    )
    return analysis


def _occurrences(usage: DimensionUsage) -> str:
    suffix = "s" if usage.count > 1 else ""
    return f'   • "{usage.dimension}" ({usage.count} occurrence{suffix})'


def format_analysis(analysis: DimensionAnalysis) -> str:
    """Render the analysis as the plain-text survey report."""
    lines = ["", "📈 SUMMARY:", "─" * WIDTH]
    lines.append(f"  Total Publications: {analysis.total_publications}")
    lines.append(f"  Total Newsletters: {analysis.total_newsletters}")
    lines.append(f"  Newsletters with Ads: {analysis.newsletters_with_ads}")
    lines.append(f"  Total Newsletter Ad Opportunities: {analysis.total_ads}")
    lines.append(f"  Ads WITHOUT Dimensions: {analysis.ads_without_dimensions}")
    lines.append(f"  Unique Dimension Values Found: {len(analysis.usages)}")

    lines.extend(["", "", "📐 ALL UNIQUE DIMENSION VALUES:", "─" * WIDTH])
    for index, usage in enumerate(analysis.sorted_usages(), 1):
        lines.append(f'\n{index}. "{usage.dimension}"')
        lines.append(f"   Used {usage.count} time(s)")
        for placement in usage.used_by:
            lines.append(f"   • {placement.publication}")
            lines.append(f'     └─ Newsletter: "{placement.newsletter}"')
            lines.append(f'     └─ Ad: "{placement.ad_name}" (position: {placement.position})')

    lines.extend(["", "", "📊 CATEGORIZED BY FORMAT:", "─" * WIDTH])
    groups = analysis.groups()
    headings = [
        ("pixel", "🖼️  PIXEL-BASED DIMENSIONS (WxH):"),
        ("physical", "📏 PHYSICAL DIMENSIONS (inches):"),
        ("descriptive", "📝 DESCRIPTIVE VALUES:"),
    ]
    for key, heading in headings:
        lines.append(f"\n{heading}")
        if not groups[key]:
            lines.append("   None found")
        lines.extend(_occurrences(usage) for usage in groups[key])

    if groups["other"]:
        lines.append("\n❓ OTHER/UNCLEAR:")
        lines.extend(_occurrences(usage) for usage in groups["other"])

    if analysis.ads_without_dimensions:
        lines.append(
            f"\n⚠️  WARNING: {analysis.ads_without_dimensions} ad(s) have NO dimension value set!"
        )

    lines.append("\n" + "=" * WIDTH)
    return "\n".join(lines)
