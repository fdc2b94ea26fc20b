# src/lanecheck/core/__init__.py
"""Core infrastructure: Configuration, Logging, Naming."""

from lanecheck.core.config import (
    CatalogSettings,
    LanecheckSettings,
    PipelineSettings,
    StageDefinitionSettings,
    StageSettings,
    load_catalog,
    load_pipeline,
    load_settings,
)
from lanecheck.core.logging import configure_logging, get_logger
from lanecheck.core.naming import VALID_NAME, is_valid_name

__all__ = [
    "VALID_NAME",
    "CatalogSettings",
    "LanecheckSettings",
    "PipelineSettings",
    "StageDefinitionSettings",
    "StageSettings",
    "configure_logging",
    "get_logger",
    "is_valid_name",
    "load_catalog",
    "load_pipeline",
    "load_settings",
]
