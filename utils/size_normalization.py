"""
Pixel size parsing for ad placement dimension strings.

Publishers typed placement sizes by hand for years, so the same size shows up
as "300x250", "300 X 250", "300×250" or "300x250px". This module recognizes
those spellings and reduces them to the canonical "WxH" form.

Example usage:
    >>> from utils.size_normalization import normalize_pixel_size, is_pixel_size
    >>> normalize_pixel_size('300 × 250px')
    '300x250'
    >>> is_pixel_size('300x250')
    True
"""

import re
from typing import Optional, Tuple

# Canonical stored form, e.g. "300x250" (case-insensitive x)
PIXEL_SIZE_PATTERN = re.compile(r"^\d+x\d+$", re.IGNORECASE)

# Hand-entered form: optional spaces, x/X/×, optional "px" suffix
LOOSE_PIXEL_SIZE_PATTERN = re.compile(r"^(\d+)\s*[xX×]\s*(\d+)(?:px)?$")


def is_pixel_size(value: str) -> bool:
    """
    Check whether a value is a canonical pixel size.

    Examples:
        >>> is_pixel_size('728x90')
        True

        >>> is_pixel_size('728X90')
        True

        >>> is_pixel_size('728 x 90')
        False

        >>> is_pixel_size('full-newsletter')
        False
    """
    return bool(PIXEL_SIZE_PATTERN.match(value))


def parse_pixel_size(value: str) -> Optional[Tuple[int, int]]:
    """
    Parse a hand-entered pixel size into (width, height).

    Args:
        value: Raw dimension text.

    Returns:
        A (width, height) tuple, or None if the text is not a pixel size.

    Examples:
        >>> parse_pixel_size('300x250')
        (300, 250)

        >>> parse_pixel_size(' 600 × 150px ')
        (600, 150)

        >>> parse_pixel_size('3 inches wide') is None
        True
    """
    match = LOOSE_PIXEL_SIZE_PATTERN.match(value.strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def normalize_pixel_size(value: str) -> Optional[str]:
    """
    Convert a hand-entered pixel size to canonical "WxH" form.

    Leading zeros are dropped along with whitespace and the "px" suffix.

    Examples:
        >>> normalize_pixel_size('300 X 250')
        '300x250'

        >>> normalize_pixel_size('0300x0250px')
        '300x250'

        >>> normalize_pixel_size('Responsive') is None
        True
    """
    parsed = parse_pixel_size(value)
    if parsed is None:
        return None
    width, height = parsed
    return f"{width}x{height}"
