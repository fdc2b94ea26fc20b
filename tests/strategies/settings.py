# tests/strategies/settings.py
"""Hypothesis settings tiers for property tests.

Usage:
    from tests.strategies.settings import STANDARD_SETTINGS

    @given(pipeline=shuffled_linear_pipelines())
    @STANDARD_SETTINGS
    def test_something(pipeline):
        ...
"""

from hypothesis import settings

# Regular property tests
STANDARD_SETTINGS = settings(max_examples=100, deadline=None)

# Determinism checks validate the same pipeline several times per example
DETERMINISM_SETTINGS = settings(max_examples=200, deadline=None)
