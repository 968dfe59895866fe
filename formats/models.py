"""Types shared by the ad format helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

# A single accepted size/label, or alternative accepted sizes (OR semantics)
DimensionValue = Union[str, List[str]]


class AdFormatCategory(str, Enum):
    """Category derived from a dimension value. Never persisted."""

    IAB_STANDARD = "iab-standard"
    EMAIL_STANDARD = "email-standard"
    CUSTOM_DISPLAY = "custom-display"
    NATIVE = "native"
    RESPONSIVE = "responsive"
    TAKEOVER = "takeover"


@dataclass(frozen=True)
class AdDimensions:
    """Resolved dimensions of an advertising opportunity.

    Attributes:
        dimensions: The new ``format.dimensions`` value if set, otherwise the
            legacy ``dimensions`` string, otherwise None.
        category: Category of ``dimensions``; None when nothing is set.
    """

    dimensions: Optional[DimensionValue] = None
    category: Optional[AdFormatCategory] = None

    @property
    def is_specified(self) -> bool:
        return self.dimensions is not None
