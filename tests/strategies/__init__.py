# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests."""
