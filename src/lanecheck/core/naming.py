# src/lanecheck/core/naming.py
"""Name rules for stage instances and lanes."""

import re

# Human-readable form used in issue arguments
VALID_NAME = "[0-9A-Za-z_]+"

_VALID_NAME_RE = re.compile(VALID_NAME)


def is_valid_name(name: str) -> bool:
    """Check a stage instance or lane name uses only letters, digits and underscores."""
    return isinstance(name, str) and _VALID_NAME_RE.fullmatch(name) is not None
