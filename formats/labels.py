"""Human-readable rendering of dimension values."""

from typing import Any, Mapping

from formats.accessors import all_dimensions, get_ad_dimensions
from formats.constants import DIMENSION_LABELS
from formats.models import AdFormatCategory, DimensionValue

TAKEOVER_DISPLAY = "Full Newsletter"
NOT_SPECIFIED_DISPLAY = "Not specified"


def label(value: str) -> str:
    """
    Human-readable label for a dimension code.

    Unknown and custom codes are returned unchanged.

    Examples:
        >>> label('300x250')
        '300×250 - Medium Rectangle'

        >>> label('1200x675')
        '1200x675'
    """
    return DIMENSION_LABELS.get(value, value)


def describe_dimensions(value: DimensionValue) -> str:
    """Labels of every accepted dimension, comma separated."""
    return ", ".join(label(dim) for dim in all_dimensions(value))


def display_dimensions(ad: Mapping[str, Any]) -> str:
    """
    Display string for an advertising opportunity's dimensions.

    Takeover placements always render as "Full Newsletter" since pixel
    dimensions are meaningless for them. Otherwise all accepted values are
    joined with ", ".

    Args:
        ad: Advertising opportunity document (new or legacy shape).

    Returns:
        The display string, or "Not specified" when no dimensions are set.
    """
    resolved = get_ad_dimensions(ad)

    if resolved.category == AdFormatCategory.TAKEOVER:
        return TAKEOVER_DISPLAY

    if not resolved.is_specified:
        return NOT_SPECIFIED_DISPLAY

    return ", ".join(all_dimensions(resolved.dimensions))
