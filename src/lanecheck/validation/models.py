# src/lanecheck/validation/models.py
"""Structural checks for MODEL fields.

Each ModelKind has its own payload shape. Every violation blocks preview.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lanecheck.contracts import FieldDefinition, IssueCode, IssueCollector, ModelKind, ValueShape, shape_of

# Keys every predicate lane table row must carry, in reporting order
PREDICATE_TABLE_KEYS: tuple[str, ...] = ("outputLane", "predicate")


def validate_model(instance_name: str, definition: FieldDefinition, value: Any, issues: IssueCollector) -> bool:
    """Check a non-null MODEL payload against its model kind.

    Returns:
        True if the payload has the expected shape
    """
    shape = shape_of(value)

    match definition.model:
        case ModelKind.VALUE_CHOOSER:
            if shape in (ValueShape.STRING, ValueShape.ENUM):
                return True
            expected = "String"
        case ModelKind.MULTI_VALUED_SELECTOR:
            if shape == ValueShape.LIST:
                return True
            expected = "List"
        case ModelKind.VALUE_MAPPING:
            if shape == ValueShape.MAP:
                return True
            expected = "Map"
        case ModelKind.PREDICATE_LANE_TABLE:
            if shape == ValueShape.LIST:
                return _validate_predicate_table(instance_name, definition, value, issues)
            expected = "List<Map>"
        case _:
            raise ValueError(f"Field '{definition.name}' has unsupported model kind: {definition.model!r}")

    issues.field(instance_name, definition.group, definition.name, IssueCode.VALIDATION_0009, expected)
    return False


def _validate_predicate_table(
    instance_name: str,
    definition: FieldDefinition,
    rows: list[Any] | tuple[Any, ...],
    issues: IssueCollector,
) -> bool:
    """Check each row of a lane predicate table.

    The key checks are independent: a row missing ``outputLane`` and with an
    empty ``predicate`` reports both.
    """
    ok = True
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            issues.field(instance_name, definition.group, definition.name, IssueCode.VALIDATION_0019, index)
            ok = False
            continue
        for key in PREDICATE_TABLE_KEYS:
            code = _predicate_key_problem(row, key)
            if code is not None:
                issues.field(instance_name, definition.group, definition.name, code, index, key)
                ok = False
    return ok


def _predicate_key_problem(row: Mapping[str, Any], key: str) -> IssueCode | None:
    if key not in row:
        return IssueCode.VALIDATION_0020
    entry = row[key]
    if entry is None:
        return IssueCode.VALIDATION_0021
    if not isinstance(entry, str):
        return IssueCode.VALIDATION_0022
    if not entry:
        return IssueCode.VALIDATION_0023
    return None
