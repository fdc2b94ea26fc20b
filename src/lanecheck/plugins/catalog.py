# src/lanecheck/plugins/catalog.py
"""Stage catalog protocol and an in-memory implementation.

The validator only ever calls StageCatalog.resolve(). Anything that can
answer "which definition does (library, name, version) refer to?" is a
catalog: a static table, the pluggy-backed StageCatalogManager, or a
caller's own service client.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from lanecheck.contracts import StageDefinition


@runtime_checkable
class StageCatalog(Protocol):
    """Read-only lookup of stage definitions.

    Implementations must tolerate concurrent calls; the validator calls
    resolve() once per stage instance and never mutates the catalog.
    """

    def resolve(self, library: str, stage_name: str, version: str) -> StageDefinition | None:
        """Get the definition for a stage, or None if the catalog has none."""
        ...


class StaticStageCatalog:
    """Catalog backed by a fixed table of definitions.

    Usage:
        catalog = StaticStageCatalog([FILE_SOURCE, FILE_TARGET])
        definition = catalog.resolve("basic", "file_source", "1")
    """

    def __init__(self, definitions: Iterable[StageDefinition] = ()) -> None:
        self._definitions: dict[tuple[str, str, str], StageDefinition] = {}
        for definition in definitions:
            if definition.key in self._definitions:
                library, name, version = definition.key
                raise ValueError(f"Duplicate stage definition: library '{library}', name '{name}', version '{version}'")
            self._definitions[definition.key] = definition

    def resolve(self, library: str, stage_name: str, version: str) -> StageDefinition | None:
        return self._definitions.get((library, stage_name, version))

    def definitions(self) -> list[StageDefinition]:
        """All definitions, in registration order."""
        return list(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
