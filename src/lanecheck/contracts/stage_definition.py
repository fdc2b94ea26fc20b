# src/lanecheck/contracts/stage_definition.py
"""Stage and field definitions published by a stage catalog.

Definitions are schema data: the validator reads them but never inspects
stage implementation classes. Frozen after construction so catalogs can be
shared between concurrent validations.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lanecheck.contracts.enums import FieldType, ModelKind, StageType


@dataclass(frozen=True, slots=True)
class FieldDependency:
    """Conditional activation of a field.

    The field only matters when the configuration named ``depends_on``
    currently holds one of ``triggered_by`` (compared in string form).
    """

    depends_on: str
    triggered_by: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Accept any iterable of strings from callers, store a frozenset
        if not isinstance(self.triggered_by, frozenset):
            object.__setattr__(self, "triggered_by", frozenset(self.triggered_by))


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """Schema of one configuration field of a stage."""

    name: str
    type: FieldType
    group: str = ""
    required: bool = False
    dependency: FieldDependency | None = None
    model: ModelKind | None = None

    def __post_init__(self) -> None:
        if self.type == FieldType.MODEL and self.model is None:
            raise ValueError(f"Field '{self.name}' has type MODEL but declares no model kind")
        if self.type != FieldType.MODEL and self.model is not None:
            raise ValueError(f"Field '{self.name}' declares model kind '{self.model}' but has type '{self.type}'")

    @property
    def is_conditional(self) -> bool:
        """Whether activation depends on another field's value."""
        return self.dependency is not None and bool(self.dependency.depends_on) and bool(self.dependency.triggered_by)


@dataclass(frozen=True, slots=True)
class StageDefinition:
    """Definition of a stage as registered in a catalog.

    Attributes:
        library: Library the stage ships in
        name: Stage name within the library
        version: Stage version string
        type: SOURCE, PROCESSOR or TARGET
        output_streams: Number of output lanes an instance must declare
        variable_output_streams: If True, the instance decides its output
            lane count (at least one); output_streams is ignored
        fields: Configuration field schemas, in declaration order
    """

    library: str
    name: str
    version: str
    type: StageType
    output_streams: int = 1
    variable_output_streams: bool = False
    fields: tuple[FieldDefinition, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Stage '{self.library}:{self.name}:{self.version}' defines field(s) more than once: {duplicates}")

    @property
    def key(self) -> tuple[str, str, str]:
        """Catalog key (library, name, version)."""
        return (self.library, self.name, self.version)

    def field_definition(self, name: str) -> FieldDefinition | None:
        """Get the field schema with the given name."""
        for definition in self.fields:
            if definition.name == name:
                return definition
        return None
