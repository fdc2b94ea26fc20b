# src/lanecheck/plugins/manager.py
"""Stage catalog built from registered stage libraries.

Uses pluggy for hook-based library registration. Each registered library
publishes StageDefinitions through the lanecheck_get_stage_definitions
hook; the manager indexes them by (library, name, version).
"""

from typing import Any

import pluggy

from lanecheck.contracts import StageDefinition
from lanecheck.core.logging import get_logger
from lanecheck.plugins.hookspecs import PROJECT_NAME, LanecheckStageLibrarySpec

logger = get_logger(__name__)


class StageCatalogManager:
    """Manages stage library registration and definition lookup.

    Implements the StageCatalog protocol.

    Usage:
        manager = StageCatalogManager()
        manager.register(BasicLibrary())

        definition = manager.resolve("basic", "file_source", "1")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(LanecheckStageLibrarySpec)

        # Index rebuilt on every registration
        self._definitions: dict[tuple[str, str, str], StageDefinition] = {}

    def register(self, library: Any) -> None:
        """Register a stage library.

        Args:
            library: Object implementing lanecheck_get_stage_definitions

        Raises:
            ValueError: If the library publishes a definition whose
                (library, name, version) is already registered. The library
                is unregistered again so the manager stays consistent.
        """
        self._pm.register(library)
        try:
            self._refresh_index()
        except ValueError:
            self._pm.unregister(library)
            raise

    def _refresh_index(self) -> None:
        """Rebuild the definition index from hooks.

        Raises:
            ValueError: If two definitions share a catalog key
        """
        new_definitions: dict[tuple[str, str, str], StageDefinition] = {}

        for definitions in self._pm.hook.lanecheck_get_stage_definitions():
            for definition in definitions:
                if definition.key in new_definitions:
                    library, name, version = definition.key
                    raise ValueError(
                        f"Duplicate stage definition: library '{library}', name '{name}', version '{version}'"
                    )
                new_definitions[definition.key] = definition

        self._definitions = new_definitions
        logger.debug("Stage catalog indexed", definitions=len(new_definitions))

    def resolve(self, library: str, stage_name: str, version: str) -> StageDefinition | None:
        """Get a stage definition by catalog key."""
        return self._definitions.get((library, stage_name, version))

    def get_definitions(self) -> list[StageDefinition]:
        """Get all registered stage definitions."""
        return list(self._definitions.values())
