"""Tests for contracts package: issue codes, issues, definitions, value shapes."""
