# src/lanecheck/contracts/report.py
"""Final result of a pipeline validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lanecheck.contracts.issues import IssueSet


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Immutable summary of one validation run.

    Attributes:
        pipeline_name: Name the validator was created with
        valid: True when no issue of any kind was recorded
        can_preview: False when any structural defect was found; open
            lanes, unknown fields and character warnings do not clear it
        issues: Read-only snapshot of every recorded issue, pipeline-level
            and per stage
        open_lanes: Lanes produced but never consumed, first-seen order
        stage_order: Instance names in final (sorted) order
    """

    pipeline_name: str
    valid: bool
    can_preview: bool
    issues: IssueSet
    open_lanes: tuple[str, ...] = ()
    stage_order: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "pipeline": self.pipeline_name,
            "valid": self.valid,
            "can_preview": self.can_preview,
            "issue_count": self.issues.issue_count,
            "open_lanes": list(self.open_lanes),
            "stage_order": list(self.stage_order),
            "issues": self.issues.to_dict(),
        }
