"""Category classification for placement dimension values.

Classification is a pure function of the dimension value. Arrays are
classified by their first element only, so a placement accepting
["300x250", "600x150"] is reported as IAB standard.

Example:
    >>> from formats.classifier import get_category
    >>> get_category("600x150").value
    'email-standard'
    >>> get_category(["300x250", "600x150"]).value
    'iab-standard'
"""

from typing import Optional

from formats.constants import (
    EMAIL_STANDARD_SIZES,
    IAB_STANDARD_SIZES,
    NATIVE_FORMATS,
    TAKEOVER_FORMATS,
)
from formats.models import AdFormatCategory, DimensionValue
from utils.size_normalization import is_pixel_size

CATEGORY_LABELS = {
    AdFormatCategory.IAB_STANDARD: "IAB Standard",
    AdFormatCategory.EMAIL_STANDARD: "Email Standard",
    AdFormatCategory.CUSTOM_DISPLAY: "Custom Display",
    AdFormatCategory.NATIVE: "Native Ad",
    AdFormatCategory.RESPONSIVE: "Responsive",
    AdFormatCategory.TAKEOVER: "Full Newsletter",
}

PIXEL_CATEGORIES = frozenset([
    AdFormatCategory.IAB_STANDARD,
    AdFormatCategory.EMAIL_STANDARD,
    AdFormatCategory.CUSTOM_DISPLAY,
])


def get_category(dimensions: Optional[DimensionValue]) -> AdFormatCategory:
    """
    Classify a dimension value into an AdFormatCategory.

    Rules are checked in order and the first match wins. A new standard size
    must be added to its set in formats.constants; the pixel fallback only
    ever yields custom-display.

    Args:
        dimensions: A pixel size, semantic label, or list of alternatives.

    Returns:
        The category. Unrecognized and empty values are custom-display.
    """
    dim = dimensions[0] if isinstance(dimensions, list) and dimensions else dimensions
    if not isinstance(dim, str) or not dim:
        return AdFormatCategory.CUSTOM_DISPLAY

    if dim in EMAIL_STANDARD_SIZES:
        return AdFormatCategory.EMAIL_STANDARD

    if dim in IAB_STANDARD_SIZES:
        return AdFormatCategory.IAB_STANDARD

    if dim in NATIVE_FORMATS:
        return AdFormatCategory.NATIVE

    if dim in TAKEOVER_FORMATS:
        return AdFormatCategory.TAKEOVER

    # Multi-size free text that slipped through as a single string
    if dim == "responsive" or "," in dim:
        return AdFormatCategory.RESPONSIVE

    if is_pixel_size(dim):
        return AdFormatCategory.CUSTOM_DISPLAY

    return AdFormatCategory.CUSTOM_DISPLAY


def category_label(category: AdFormatCategory) -> str:
    """Display label for a category, e.g. "Email Standard"."""
    return CATEGORY_LABELS[AdFormatCategory(category)]


def requires_pixel_dimensions(category: AdFormatCategory) -> bool:
    """True for categories whose creatives must match an exact pixel size."""
    return AdFormatCategory(category) in PIXEL_CATEGORIES
