"""Legacy newsletter dimension strings and their canonical replacements.

Keys are the exact free-text values found in publisher records (lookups
are case-sensitive). A value of NEEDS_REVIEW marks strings that were
judged too vague to translate automatically.
"""

from types import MappingProxyType
from typing import Mapping

from formats.constants import NEEDS_REVIEW

LEGACY_DIMENSION_MAP: Mapping[str, str] = MappingProxyType({
    # IAB Standard - keep as-is
    "300x250": "300x250",
    "728x90": "728x90",
    "300x600": "300x600",
    "160x600": "160x600",
    "320x50": "320x50",
    "970x250": "970x250",
    "336x280": "336x280",
    "120x600": "120x600",

    # Email Standard - keep as-is
    "600x150": "600x150",
    "600x100": "600x100",
    "600x200": "600x200",
    "600x300": "600x300",
    "728x100": "600x100",  # normalized to email leaderboard

    # Takeover variations
    "Full email": "full-newsletter",
    "Full newsletter": "full-newsletter",
    "full email": "full-newsletter",
    "Full newsletter sponsorship": "full-newsletter",
    "Full integration": "full-newsletter",
    "full edition": "full-newsletter",
    "Full edition": "full-newsletter",
    "custom": "full-newsletter",  # only ever seen on dedicated sends

    # Native
    "Text only": "text-only",
    "Text-based": "text-only",
    "text-only": "text-only",
    "250 characters": "text-only",
    "In-newsletter placement": "content-integration",
    "Thought leadership alignment": "sponsored-content",
    "News-adjacent advertising": "sponsored-content",
    "Lifestyle and entertainment brands": "sponsored-content",

    # Responsive
    "600px wide, responsive": "responsive",
    "Flexible": "responsive",
    "Responsive": "responsive",
    "responsive (600px width or phone screen)": "responsive",

    # Contact-based
    "Contact for details": "custom",
    "Contact for specifications": "custom",

    # Vague
    "multiple": NEEDS_REVIEW,
    "Display ads within content": NEEDS_REVIEW,
    "Email series": NEEDS_REVIEW,
})
