"""Ad Format Dimensions - Format Module.

Classification, accessors and labels for placement dimension values.
A dimension value is a pixel size ("300x250"), a semantic label
("full-newsletter") or a list of alternative accepted sizes.

Example:
    >>> from formats import get_category, display_dimensions
    >>> get_category("full-newsletter").value
    'takeover'
    >>> display_dimensions({"format": {"dimensions": ["300x250", "600x150"]}})
    '300x250, 600x150'
"""

from .accessors import (
    all_dimensions,
    format_dimensions,
    get_ad_dimensions,
    is_dimension_set,
    primary_dimension,
    supports,
)
from .classifier import category_label, get_category, requires_pixel_dimensions
from .constants import (
    DIMENSION_LABELS,
    DIMENSION_OPTIONS,
    EMAIL_STANDARD_SIZES,
    IAB_STANDARD_SIZES,
    NATIVE_FORMATS,
    NEEDS_REVIEW,
    TAKEOVER_FORMATS,
)
from .labels import describe_dimensions, display_dimensions, label
from .models import AdDimensions, AdFormatCategory, DimensionValue

__all__ = [
    # Types
    "AdDimensions",
    "AdFormatCategory",
    "DimensionValue",
    # Classification
    "get_category",
    "category_label",
    "requires_pixel_dimensions",
    # Accessors
    "all_dimensions",
    "primary_dimension",
    "format_dimensions",
    "get_ad_dimensions",
    "is_dimension_set",
    "supports",
    # Labels
    "label",
    "describe_dimensions",
    "display_dimensions",
    # Vocabulary
    "DIMENSION_LABELS",
    "DIMENSION_OPTIONS",
    "EMAIL_STANDARD_SIZES",
    "IAB_STANDARD_SIZES",
    "NATIVE_FORMATS",
    "NEEDS_REVIEW",
    "TAKEOVER_FORMATS",
]
