"""Shared contracts for cross-boundary data types.

All dataclasses and enums that cross subsystem boundaries are defined here.
This package is a LEAF MODULE with no outbound dependencies to core,
plugins or validation.

Import patterns:
    from lanecheck.contracts import StageInstance, PipelineDescription, IssueCode

    # Settings classes live in core
    from lanecheck.core.config import PipelineSettings
"""

from lanecheck.contracts.enums import (
    FieldType,
    IssueScope,
    ModelKind,
    StageType,
    ValueShape,
)
from lanecheck.contracts.errors import IssueCode, ValidatorStateError
from lanecheck.contracts.issues import (
    FieldIssue,
    Issue,
    IssueCollector,
    Issues,
    IssueSet,
    PipelineIssue,
    StageIssue,
)
from lanecheck.contracts.pipeline import FieldValue, PipelineDescription, StageInstance
from lanecheck.contracts.report import ValidationReport
from lanecheck.contracts.stage_definition import FieldDefinition, FieldDependency, StageDefinition
from lanecheck.contracts.values import shape_of

__all__ = [
    "FieldDefinition",
    "FieldDependency",
    "FieldIssue",
    "FieldType",
    "FieldValue",
    "Issue",
    "IssueCode",
    "IssueCollector",
    "IssueScope",
    "IssueSet",
    "Issues",
    "ModelKind",
    "PipelineDescription",
    "PipelineIssue",
    "StageDefinition",
    "StageInstance",
    "StageIssue",
    "StageType",
    "ValidationReport",
    "ValidatorStateError",
    "ValueShape",
    "shape_of",
]
