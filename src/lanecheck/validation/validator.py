# src/lanecheck/validation/validator.py
"""PipelineValidator: runs every validation pass over one pipeline.

Pass order is fixed:
1. sort_stages      - order stages by lane dependencies (in place)
2. empty check      - a pipeline needs at least one stage
3. validate_stages  - definitions, placement, names, arity, fields
4. check_lanes      - shared output lanes, open lanes

Every problem becomes an issue; passes never raise for bad input. The
validator is single-use: validate() runs once, results are readable only
afterwards.
"""

from __future__ import annotations

from lanecheck.contracts import (
    IssueCode,
    IssueCollector,
    Issues,
    IssueSet,
    PipelineDescription,
    ValidationReport,
    ValidatorStateError,
)
from lanecheck.core.logging import get_logger
from lanecheck.plugins.catalog import StageCatalog
from lanecheck.validation.lanes import check_lanes
from lanecheck.validation.sorter import sort_stages
from lanecheck.validation.stages import validate_stages

logger = get_logger(__name__)


class PipelineValidator:
    """Validates one pipeline configuration against a stage catalog.

    Usage:
        validator = PipelineValidator(catalog, "orders", pipeline)
        if not validator.validate():
            for issue in validator.issues:
                print(issue.message)
        validator.can_preview  # structural problems block preview
    """

    def __init__(self, catalog: StageCatalog, name: str, pipeline: PipelineDescription) -> None:
        if catalog is None:
            raise ValueError("catalog cannot be None")
        if name is None:
            raise ValueError("name cannot be None")
        if pipeline is None:
            raise ValueError("pipeline cannot be None")
        self._catalog = catalog
        self._name = name
        self._pipeline = pipeline
        self._issues = Issues()
        self._open_lanes: list[str] = []
        self._validated = False
        self._can_preview = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def pipeline(self) -> PipelineDescription:
        """The pipeline under validation (stage order is final after validate())."""
        return self._pipeline

    def validate(self) -> bool:
        """Run all validation passes.

        Returns:
            True if no issue of any kind was found

        Raises:
            ValidatorStateError: If called more than once
        """
        if self._validated:
            raise ValidatorStateError("Already validated")
        self._validated = True

        log = logger.bind(pipeline=self._name)
        log.debug("Starting validation", stages=len(self._pipeline.stages))

        collector = IssueCollector(self._issues)
        preview = sort_stages(self._pipeline, collector)
        preview &= self._check_not_empty(collector)
        preview &= validate_stages(self._pipeline.stages, self._catalog, collector)
        lanes_ok, self._open_lanes = check_lanes(self._pipeline.stages, collector)
        preview &= lanes_ok
        self._can_preview = preview

        for issue in self._issues:
            log.debug("Validation issue", issue=str(issue))
        log.debug(
            "Validation finished",
            valid=not self._issues.has_issues,
            can_preview=self._can_preview,
            issue_count=self._issues.issue_count,
        )
        return not self._issues.has_issues

    def _check_not_empty(self, collector: IssueCollector) -> bool:
        if not self._pipeline.stages:
            collector.pipeline(IssueCode.VALIDATION_0001)
            return False
        return True

    def _require_validated(self) -> None:
        if not self._validated:
            raise ValidatorStateError("validate() has not been called")

    @property
    def can_preview(self) -> bool:
        self._require_validated()
        return self._can_preview

    @property
    def issues(self) -> IssueSet:
        """Snapshot of the recorded issues; later changes never reach it."""
        self._require_validated()
        return self._issues.snapshot()

    @property
    def open_lanes(self) -> list[str]:
        self._require_validated()
        return list(self._open_lanes)

    def report(self) -> ValidationReport:
        """Immutable summary of the validation.

        Raises:
            ValidatorStateError: If validate() has not been called
        """
        self._require_validated()
        issues = self._issues.snapshot()
        return ValidationReport(
            pipeline_name=self._name,
            valid=not issues.has_issues,
            can_preview=self._can_preview,
            issues=issues,
            open_lanes=tuple(self._open_lanes),
            stage_order=tuple(self._pipeline.instance_names),
        )


def validate_pipeline(
    catalog: StageCatalog,
    pipeline: PipelineDescription,
    name: str | None = None,
) -> ValidationReport:
    """Validate a pipeline and return its report.

    Args:
        catalog: Stage catalog to resolve definitions from
        pipeline: Pipeline to validate (its stage order is replaced)
        name: Name for logs and the report; defaults to pipeline.name
    """
    resolved_name = name if name is not None else (pipeline.name or "pipeline")
    validator = PipelineValidator(catalog, resolved_name, pipeline)
    validator.validate()
    return validator.report()
