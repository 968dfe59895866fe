"""Accessors for the ``str | list[str]`` dimensions union.

Advertising opportunities are plain documents. The current shape stores
``format.dimensions``; legacy records only carry a scalar ``dimensions``
string, which is still read as a display fallback but never written.
"""

from typing import Any, List, Mapping, Optional

from formats.classifier import get_category
from formats.models import AdDimensions, DimensionValue


def is_dimension_set(value: Optional[DimensionValue]) -> bool:
    """True unless the value is missing or an empty string.

    An empty list counts as set; ``primary_dimension`` then yields None.
    """
    return value is not None and value != ""


def all_dimensions(value: DimensionValue) -> List[str]:
    """Every accepted dimension as a list. Lists are returned unchanged."""
    if isinstance(value, list):
        return value
    return [value]


def primary_dimension(value: DimensionValue) -> Optional[str]:
    """The representative dimension: the first element of a list.

    Returns None for an empty list, meaning "no format specified".
    """
    if isinstance(value, list):
        return value[0] if value else None
    return value


def format_dimensions(ad: Mapping[str, Any]) -> Optional[DimensionValue]:
    """The new-style ``format.dimensions`` value of an ad, if set.

    An empty list means no format was chosen and is treated as unset.
    """
    ad_format = ad.get("format")
    if not isinstance(ad_format, Mapping):
        return None
    value = ad_format.get("dimensions")
    return value if is_dimension_set(value) and value != [] else None


def get_ad_dimensions(ad: Mapping[str, Any]) -> AdDimensions:
    """
    Resolve the dimensions of an advertising opportunity.

    Prefers ``format.dimensions`` and falls back to the legacy
    ``dimensions`` field.

    Args:
        ad: Advertising opportunity document.

    Returns:
        AdDimensions with the value and its derived category, or an empty
        AdDimensions when neither field is set.
    """
    value = format_dimensions(ad)
    if value is None:
        legacy = ad.get("dimensions")
        value = legacy if is_dimension_set(legacy) and legacy != [] else None

    if value is None:
        return AdDimensions()
    return AdDimensions(dimensions=value, category=get_category(value))


def supports(ad: Mapping[str, Any], candidate: str) -> bool:
    """Check whether an ad placement accepts a specific dimension.

    Used to match an uploaded creative's detected size against the
    placement's accepted set.
    """
    resolved = get_ad_dimensions(ad)
    if not resolved.is_specified:
        return False
    return candidate in all_dimensions(resolved.dimensions)
