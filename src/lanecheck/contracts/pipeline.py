# src/lanecheck/contracts/pipeline.py
"""Pipeline description under validation.

A pipeline is an ordered list of stage instances. Instances are frozen;
the pipeline's stage list is the one thing validation changes - the
topological sort replaces it with the validated (or best-effort) order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class FieldValue:
    """Configured value of one stage field. ``value`` may be None."""

    name: str
    value: Any = None


@dataclass(frozen=True, slots=True)
class StageInstance:
    """One stage as wired into a pipeline.

    Attributes:
        instance_name: Unique name within the pipeline
        library: Library of the stage definition
        stage_name: Name of the stage definition
        stage_version: Version of the stage definition
        input_lanes: Lanes this instance consumes, in declaration order
        output_lanes: Lanes this instance produces, in declaration order
        configuration: Field values, in declaration order
        system_generated: Name was generated by tooling, not typed by a user
    """

    instance_name: str
    library: str
    stage_name: str
    stage_version: str
    input_lanes: tuple[str, ...] = ()
    output_lanes: tuple[str, ...] = ()
    configuration: tuple[FieldValue, ...] = ()
    system_generated: bool = False

    def __post_init__(self) -> None:
        for attr in ("input_lanes", "output_lanes", "configuration"):
            value = getattr(self, attr)
            if not isinstance(value, tuple):
                object.__setattr__(self, attr, tuple(value))

    def config(self, name: str) -> FieldValue | None:
        """Get the field value with the given name, if configured."""
        for value in self.configuration:
            if value.name == name:
                return value
        return None

    def config_value(self, name: str) -> Any:
        """Get the payload of a configured field, None if absent or null."""
        configured = self.config(name)
        return None if configured is None else configured.value


@dataclass
class PipelineDescription:
    """Ordered stages of a pipeline.

    Not frozen: validation writes the sorted stage order back to ``stages``.
    """

    stages: list[StageInstance] = field(default_factory=list)
    name: str | None = None

    @property
    def instance_names(self) -> list[str]:
        """Instance names in current stage order."""
        return [stage.instance_name for stage in self.stages]
