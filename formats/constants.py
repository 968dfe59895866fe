"""Dimension vocabulary for newsletter and website ad placements.

Placements store their accepted dimensions as a pixel size ("300x250"),
a list of alternative pixel sizes, or one of a small set of semantic
labels ("full-newsletter", "text-only", ...). The tables here drive
classification, labelling and the grouped selector options.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

# Sentinel written into migration results for values a human must resolve
NEEDS_REVIEW = "NEEDS_REVIEW"

# Email clients render at 600px width
EMAIL_STANDARD_SIZES = frozenset([
    "600x150", "600x100", "600x200", "600x300",
])

IAB_STANDARD_SIZES = frozenset([
    "300x250", "728x90", "300x600", "160x600",
    "320x50", "970x250", "336x280", "120x600",
])

NATIVE_FORMATS = frozenset([
    "text-only", "sponsored-content", "logo-text", "content-integration",
])

TAKEOVER_FORMATS = frozenset(["full-newsletter"])

SEMANTIC_LABELS = NATIVE_FORMATS | TAKEOVER_FORMATS | frozenset(["responsive", "custom"])

DIMENSION_LABELS: Mapping[str, str] = MappingProxyType({
    # Email Standard
    "600x150": "600×150 - Email Header Banner",
    "600x100": "600×100 - Email Leaderboard",
    "600x200": "600×200 - Email Large Banner",
    "600x300": "600×300 - Email Display Ad",
    # Web Standard (IAB sizes also used in newsletters)
    "728x90": "728×90 - Leaderboard",
    "300x250": "300×250 - Medium Rectangle",
    "336x280": "336×280 - Large Rectangle",
    "300x600": "300×600 - Half Page",
    "160x600": "160×600 - Wide Skyscraper",
    "320x50": "320×50 - Mobile Banner",
    "970x250": "970×250 - Billboard",
    "120x600": "120×600 - Skyscraper",
    # Special formats
    "full-newsletter": "Full Newsletter Takeover / Dedicated Send",
    "full-email": "Full Newsletter Takeover",
    "dedicated-send": "Dedicated Send",
    "text-only": "Text Only / Sponsored Message",
    "responsive": "Responsive / Flexible Size",
    # Native / content integration
    "sponsored-content": "Sponsored Content",
    "logo-text": "Logo + Text",
    "content-integration": "Content Integration",
    "custom": "Custom Size",
})


class DimensionOption(NamedTuple):
    """A single selectable dimension in the format selector."""

    value: str
    label: str
    standard_id: Optional[str] = None


class DimensionOptionGroup(NamedTuple):
    """A labelled group of selector options."""

    label: str
    options: Tuple[DimensionOption, ...]


# standard_id values line up with the inventory standards catalogue
DIMENSION_OPTIONS: Tuple[DimensionOptionGroup, ...] = (
    DimensionOptionGroup("Email Standard (600px width)", (
        DimensionOption("600x150", "600×150 - Email Header Banner", "newsletter_email_header_600x150"),
        DimensionOption("600x100", "600×100 - Email Leaderboard", "newsletter_email_leaderboard_600x100"),
        DimensionOption("600x200", "600×200 - Email Large Banner", "newsletter_email_large_600x200"),
        DimensionOption("600x300", "600×300 - Email Display Ad", "newsletter_email_display_600x300"),
    )),
    DimensionOptionGroup("Web Standard (IAB)", (
        DimensionOption("728x90", "728×90 - Leaderboard", "newsletter_leaderboard_728x90"),
        DimensionOption("300x250", "300×250 - Medium Rectangle", "newsletter_medium_rectangle_300x250"),
        DimensionOption("336x280", "336×280 - Large Rectangle", "newsletter_large_rectangle_336x280"),
        DimensionOption("300x600", "300×600 - Half Page", "website_banner_300x600"),
        DimensionOption("160x600", "160×600 - Wide Skyscraper", "website_banner_160x600"),
        DimensionOption("320x50", "320×50 - Mobile Banner", "website_banner_320x50"),
        DimensionOption("970x250", "970×250 - Billboard", "website_banner_970x250"),
        DimensionOption("120x600", "120×600 - Skyscraper", "website_banner_120x600"),
    )),
    DimensionOptionGroup("Special Formats", (
        DimensionOption("full-newsletter", "Full Newsletter Takeover / Dedicated Send", "newsletter_takeover"),
        DimensionOption("responsive", "Responsive / Flexible Size", "newsletter_responsive"),
    )),
    DimensionOptionGroup("Text / Native (Upload .txt or .html file)", (
        DimensionOption("text-only", "Text Only - Sponsored Message", "newsletter_text_only"),
        DimensionOption("sponsored-content", "Sponsored Content / Native Ad", "newsletter_native"),
        DimensionOption("logo-text", "Logo + Text", "newsletter_native"),
        DimensionOption("content-integration", "Content Integration", "newsletter_native"),
    )),
    DimensionOptionGroup("Custom", (
        DimensionOption("custom", "Custom Size..."),
    )),
)
