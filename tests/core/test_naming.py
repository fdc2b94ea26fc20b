# tests/core/test_naming.py
"""Tests for instance and lane name rules."""

import pytest

from lanecheck.core.naming import VALID_NAME, is_valid_name


class TestIsValidName:
    @pytest.mark.parametrize("name", ["a", "A1", "read_orders", "_", "0"])
    def test_valid(self, name: str) -> None:
        assert is_valid_name(name)

    @pytest.mark.parametrize("name", ["", "a b", "a-b", "a.b", "café", "a\n"])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_name(name)

    def test_pattern_text(self) -> None:
        assert VALID_NAME == "[0-9A-Za-z_]+"
