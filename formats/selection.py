"""Selection helpers behind the ad format selector.

Each helper returns the payload handed to the selector's change callback:
``{"dimensions": value}`` for a selection, or None when the user cleared
the selector or switched to custom entry without typing anything yet.
"""

from typing import Dict, List, Optional, Sequence

from formats.constants import DIMENSION_OPTIONS, DimensionOption
from formats.models import DimensionValue

FormatPayload = Optional[Dict[str, DimensionValue]]

CUSTOM_OPTION = "custom"


def _payload(dimensions: Sequence[str]) -> FormatPayload:
    if not dimensions:
        return None
    if len(dimensions) == 1:
        return {"dimensions": dimensions[0]}
    return {"dimensions": list(dimensions)}


def predefined_options() -> List[DimensionOption]:
    """All selector options, flattened in display order."""
    return [option for group in DIMENSION_OPTIONS for option in group.options]


def is_predefined(value: str) -> bool:
    """True if the value is one of the selector's predefined options."""
    return any(option.value == value for option in predefined_options())


def select_primary(value: str) -> FormatPayload:
    """Payload for a change of the primary dropdown."""
    if not value or value == CUSTOM_OPTION:
        return None
    return {"dimensions": value}


def additional_options(primary: str) -> List[DimensionOption]:
    """Options offered as "also accept" once a primary value is chosen."""
    if not primary or primary == CUSTOM_OPTION:
        return []
    return [
        option for option in predefined_options()
        if option.value not in (primary, CUSTOM_OPTION)
    ]


def toggle_dimension(selected: Sequence[str], value: str) -> FormatPayload:
    """Add or remove an accepted dimension.

    A single remaining value collapses back to a scalar.
    """
    if value in selected:
        updated = [dim for dim in selected if dim != value]
    else:
        updated = list(selected) + [value]
    return _payload(updated)


def parse_custom_dimensions(text: str) -> FormatPayload:
    """Payload for free-text custom entry such as "1200x675, 1000x500"."""
    dims = [part.strip() for part in text.split(",")]
    return _payload([dim for dim in dims if dim])
