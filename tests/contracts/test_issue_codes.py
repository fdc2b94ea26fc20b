# tests/contracts/test_issue_codes.py
"""Tests for IssueCode templates and scopes."""

import pytest

from lanecheck.contracts import IssueCode, IssueScope


class TestIssueCode:
    """Issue codes are stable strings carrying a template and scope."""

    def test_codes_are_strings(self) -> None:
        assert IssueCode.VALIDATION_0001 == "VALIDATION_0001"
        assert IssueCode("VALIDATION_0015") is IssueCode.VALIDATION_0015

    def test_retired_codes_absent(self) -> None:
        values = {code.value for code in IssueCode}

        assert "VALIDATION_0027" not in values
        assert "VALIDATION_0028" not in values
        assert len(values) == 30

    @pytest.mark.parametrize(
        ("code", "scope"),
        [
            (IssueCode.VALIDATION_0001, IssueScope.PIPELINE),
            (IssueCode.VALIDATION_0002, IssueScope.PIPELINE),
            (IssueCode.VALIDATION_0005, IssueScope.STAGE),
            (IssueCode.VALIDATION_0011, IssueScope.STAGE),
            (IssueCode.VALIDATION_0032, IssueScope.STAGE),
            (IssueCode.VALIDATION_0007, IssueScope.FIELD),
            (IssueCode.VALIDATION_0023, IssueScope.FIELD),
        ],
    )
    def test_scope(self, code: IssueCode, scope: IssueScope) -> None:
        assert code.scope == scope

    def test_render_fills_positional_arguments(self) -> None:
        message = IssueCode.VALIDATION_0006.render("basic", "file_source", "1")

        assert message == "Stage definition does not exist, library 'basic', name 'file_source', version '1'"

    def test_render_keeps_literal_braces(self) -> None:
        assert IssueCode.VALIDATION_0030.render("abc") == "Expression 'abc' must be wrapped in '${...}'"

    def test_every_template_renders_with_enough_arguments(self) -> None:
        for code in IssueCode:
            assert code.render("a", "b", "c")
