# src/lanecheck/contracts/issues.py
"""Validation issues and the collection they are recorded into.

Issues are immutable values: a code plus positional arguments for the
code's template, and the location (pipeline, stage instance, or field of a
stage instance) it applies to. Rendering is a convenience; callers that
localize messages key on ``code`` and ``args`` instead.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias

from lanecheck.contracts.enums import IssueScope
from lanecheck.contracts.errors import IssueCode


def _freeze_arg(arg: Any) -> Any:
    """Convert list/set arguments to tuples so issues stay hashable and stable.

    Set members are ordered by repr(): payloads can mix types ({1, "a"}),
    which have no natural ordering.
    """
    if isinstance(arg, (list, tuple)):
        return tuple(_freeze_arg(a) for a in arg)
    if isinstance(arg, (set, frozenset)):
        return tuple(sorted((_freeze_arg(a) for a in arg), key=repr))
    return arg


def _render_arg(arg: Any) -> str:
    if isinstance(arg, tuple):
        return "[" + ", ".join(str(a) for a in arg) + "]"
    return str(arg)


@dataclass(frozen=True, slots=True)
class PipelineIssue:
    """Issue affecting the pipeline as a whole."""

    code: IssueCode
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", _freeze_arg(self.args))

    @property
    def scope(self) -> IssueScope:
        return IssueScope.PIPELINE

    @property
    def message(self) -> str:
        return self.code.render(*(_render_arg(a) for a in self.args))

    def to_dict(self) -> dict[str, Any]:
        return {"scope": self.scope.value, "code": self.code.value, "args": list(self.args), "message": self.message}

    def __str__(self) -> str:
        return f"Issue[code={self.code.value}, message='{self.message}']"


@dataclass(frozen=True, slots=True)
class StageIssue:
    """Issue attached to one stage instance."""

    instance_name: str
    code: IssueCode
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", _freeze_arg(self.args))

    @property
    def scope(self) -> IssueScope:
        return IssueScope.STAGE

    @property
    def message(self) -> str:
        return self.code.render(*(_render_arg(a) for a in self.args))

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope.value,
            "code": self.code.value,
            "instance_name": self.instance_name,
            "args": list(self.args),
            "message": self.message,
        }

    def __str__(self) -> str:
        return f"StageIssue[instance='{self.instance_name}', code={self.code.value}, message='{self.message}']"


@dataclass(frozen=True, slots=True)
class FieldIssue:
    """Issue attached to one configuration field of a stage instance."""

    instance_name: str
    group: str
    field_name: str
    code: IssueCode
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", _freeze_arg(self.args))

    @property
    def scope(self) -> IssueScope:
        return IssueScope.FIELD

    @property
    def message(self) -> str:
        return self.code.render(*(_render_arg(a) for a in self.args))

    def to_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope.value,
            "code": self.code.value,
            "instance_name": self.instance_name,
            "group": self.group,
            "field_name": self.field_name,
            "args": list(self.args),
            "message": self.message,
        }

    def __str__(self) -> str:
        return (
            f"FieldIssue[instance='{self.instance_name}', group='{self.group}', field='{self.field_name}', "
            f"code={self.code.value}, message='{self.message}']"
        )


Issue: TypeAlias = PipelineIssue | StageIssue | FieldIssue


class IssueSet:
    """Read-only view of the issues found by one validation.

    Pipeline issues are kept in a list; stage and field issues are bucketed
    by instance name in first-reported order. ``all()`` yields every issue
    in recording order. Every accessor returns a copy, so a set handed out
    in a report never changes.
    """

    def __init__(self, issues: Iterable[Issue] = ()) -> None:
        self._pipeline: list[PipelineIssue] = []
        self._stages: dict[str, list[StageIssue | FieldIssue]] = {}
        self._ordered: list[Issue] = []
        for issue in issues:
            self._record(issue)

    def _record(self, issue: Issue) -> None:
        if isinstance(issue, PipelineIssue):
            self._pipeline.append(issue)
        else:
            self._stages.setdefault(issue.instance_name, []).append(issue)
        self._ordered.append(issue)

    @property
    def pipeline_issues(self) -> list[PipelineIssue]:
        return list(self._pipeline)

    @property
    def stage_issues(self) -> dict[str, list[StageIssue | FieldIssue]]:
        return {name: list(issues) for name, issues in self._stages.items()}

    def for_instance(self, instance_name: str) -> list[StageIssue | FieldIssue]:
        """Issues recorded against one stage instance."""
        return list(self._stages.get(instance_name, []))

    def codes(self) -> list[IssueCode]:
        """Codes of all issues, in recording order."""
        return [issue.code for issue in self._ordered]

    def all(self) -> list[Issue]:
        return list(self._ordered)

    @property
    def has_issues(self) -> bool:
        return bool(self._ordered)

    @property
    def issue_count(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Issue]:
        return iter(list(self._ordered))

    def __len__(self) -> int:
        return len(self._ordered)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pipeline": [issue.to_dict() for issue in self._pipeline],
            "stages": {name: [issue.to_dict() for issue in issues] for name, issues in self._stages.items()},
        }


class Issues(IssueSet):
    """Mutable collection that validation passes record into.

    Only the orchestrator holds one; callers receive ``snapshot()`` copies.
    """

    def add_pipeline_issue(self, issue: PipelineIssue) -> None:
        self._record(issue)

    def add(self, issue: StageIssue | FieldIssue) -> None:
        """Record a stage or field issue under its instance name."""
        self._record(issue)

    def snapshot(self) -> IssueSet:
        """Independent read-only copy of the issues recorded so far."""
        return IssueSet(self._ordered)


class IssueCollector:
    """Write side of an Issues collection, handed to each validation pass.

    Passes record through the helpers here so location data is filled in
    consistently. The orchestrator owns the collector for the duration of
    one validate() call.
    """

    def __init__(self, issues: Issues | None = None) -> None:
        self.issues = issues if issues is not None else Issues()

    def pipeline(self, code: IssueCode, *args: Any) -> PipelineIssue:
        issue = PipelineIssue(code, args)
        self.issues.add_pipeline_issue(issue)
        return issue

    def stage(self, instance_name: str, code: IssueCode, *args: Any) -> StageIssue:
        issue = StageIssue(instance_name, code, args)
        self.issues.add(issue)
        return issue

    def field(self, instance_name: str, group: str, field_name: str, code: IssueCode, *args: Any) -> FieldIssue:
        issue = FieldIssue(instance_name, group, field_name, code, args)
        self.issues.add(issue)
        return issue
