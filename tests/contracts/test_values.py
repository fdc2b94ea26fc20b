# tests/contracts/test_values.py
"""Tests for payload shape classification."""

from enum import Enum, StrEnum
from typing import Any

import pytest

from lanecheck.contracts import ValueShape, shape_of
from lanecheck.contracts.values import fits_int64, trigger_form, type_name


class _Mode(StrEnum):
    BASIC = "BASIC"


class _Level(Enum):
    HIGH = 3


class TestShapeOf:
    @pytest.mark.parametrize(
        ("value", "shape"),
        [
            (None, ValueShape.NULL),
            (True, ValueShape.BOOLEAN),
            (False, ValueShape.BOOLEAN),
            (0, ValueShape.INTEGER),
            (-(2**70), ValueShape.INTEGER),
            ("", ValueShape.STRING),
            (_Mode.BASIC, ValueShape.ENUM),
            (_Level.HIGH, ValueShape.ENUM),
            ({}, ValueShape.MAP),
            ([], ValueShape.LIST),
            (("a",), ValueShape.LIST),
            (1.5, ValueShape.OTHER),
            ({"a"}, ValueShape.OTHER),
            (b"bytes", ValueShape.OTHER),
        ],
    )
    def test_classification(self, value: Any, shape: ValueShape) -> None:
        assert shape_of(value) == shape


class TestHelpers:
    def test_int64_bounds(self) -> None:
        assert fits_int64(2**63 - 1)
        assert fits_int64(-(2**63))
        assert not fits_int64(2**63)
        assert not fits_int64(-(2**63) - 1)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, "true"), (False, "false"), (_Mode.BASIC, "BASIC"), (_Level.HIGH, "3"), (5, "5"), ("JSON", "JSON")],
    )
    def test_trigger_form(self, value: Any, expected: str) -> None:
        assert trigger_form(value) == expected

    def test_type_name(self) -> None:
        assert type_name(5) == "int"
        assert type_name("x") == "str"
