# tests/property/__init__.py
"""Property-based tests for lanecheck.

Invariants that must hold for all inputs: ordering of acyclic pipelines,
no stage lost by the sorter, identical results for identical inputs.
"""
