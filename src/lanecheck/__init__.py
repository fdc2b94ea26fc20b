"""
Lanecheck: static validation for stage/lane data-pipeline configurations.

Checks that a pipeline of sources, processors and targets wired together by
named lanes can be ordered, is wired consistently, and that every stage's
configuration matches the schema published by its stage definition.
"""

__version__ = "0.1.0"
