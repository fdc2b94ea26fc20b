# src/lanecheck/plugins/hookspecs.py
"""pluggy hook specifications for stage libraries.

Stage libraries implement these hooks to publish their stage definitions.
The catalog manager calls them when a library is registered.

Usage (publishing a library):
    from lanecheck.plugins.hookspecs import hookimpl

    class BasicLibrary:
        @hookimpl  # NOT @hookspec - that's for defining specs
        def lanecheck_get_stage_definitions(self):
            return [FILE_SOURCE, FILTER, FILE_TARGET]

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks library implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from lanecheck.contracts import StageDefinition

# Project name for pluggy
PROJECT_NAME = "lanecheck"

# Hook specification marker
hookspec = pluggy.HookspecMarker(PROJECT_NAME)

# Hook implementation marker (for libraries to use)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class LanecheckStageLibrarySpec:
    """Hook specifications for stage libraries."""

    @hookspec
    def lanecheck_get_stage_definitions(self) -> list["StageDefinition"]:  # type: ignore[empty-body]
        """Return the stage definitions this library provides.

        Returns:
            List of StageDefinition (one per library/name/version)
        """
