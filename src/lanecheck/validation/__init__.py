"""Pipeline validation passes and the orchestrating validator."""

from lanecheck.validation.lanes import check_lanes
from lanecheck.validation.models import validate_model
from lanecheck.validation.sorter import sort_stages
from lanecheck.validation.stages import is_field_active, validate_stages
from lanecheck.validation.validator import PipelineValidator, validate_pipeline

__all__ = [
    "PipelineValidator",
    "check_lanes",
    "is_field_active",
    "sort_stages",
    "validate_model",
    "validate_pipeline",
    "validate_stages",
]
