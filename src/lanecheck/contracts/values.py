# src/lanecheck/contracts/values.py
"""Shape classification for configuration payloads.

Field values arrive as whatever the pipeline file deserialized to: scalars,
mappings, lists of mappings, occasionally enum members when a pipeline is
built in code. Validators never use isinstance() on payloads directly;
they classify once with shape_of() and match on the ValueShape tag.

This matters in Python because bool is a subclass of int and str is a
sequence - naive isinstance checks would accept True as an INTEGER or
"abc" as a LIST.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from lanecheck.contracts.enums import ValueShape

# Signed 64-bit range; INTEGER fields map to a long in stage implementations.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def shape_of(value: Any) -> ValueShape:
    """Classify a payload into its ValueShape.

    Order matters: bool before int, Enum before str (StrEnum members are
    strings too, but choosers treat them as enum symbols).
    """
    if value is None:
        return ValueShape.NULL
    if isinstance(value, bool):
        return ValueShape.BOOLEAN
    if isinstance(value, Enum):
        return ValueShape.ENUM
    if isinstance(value, int):
        return ValueShape.INTEGER
    if isinstance(value, str):
        return ValueShape.STRING
    if isinstance(value, Mapping):
        return ValueShape.MAP
    if isinstance(value, (list, tuple)):
        return ValueShape.LIST
    return ValueShape.OTHER


def fits_int64(value: int) -> bool:
    """Check an integer fits a signed 64-bit representation."""
    return INT64_MIN <= value <= INT64_MAX


def type_name(value: Any) -> str:
    """Short type name used in issue arguments."""
    return type(value).__name__


def trigger_form(value: Any) -> str:
    """String form of a value for comparison against trigger values.

    Trigger values are authored as strings in stage definitions
    (``triggered_by: ["true", "JSON"]``), so booleans compare as
    lowercase ``true``/``false`` and enum members by their value.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
