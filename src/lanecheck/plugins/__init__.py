"""Stage catalogs: where the validator looks up stage definitions.

- StageCatalog: Protocol the validator depends on
- StaticStageCatalog: Fixed in-memory table
- StageCatalogManager: Catalog assembled from pluggy-registered libraries
- hookimpl: Marker for library hook implementations
"""

from lanecheck.plugins.catalog import StageCatalog, StaticStageCatalog
from lanecheck.plugins.hookspecs import hookimpl
from lanecheck.plugins.manager import StageCatalogManager

__all__ = [
    "StageCatalog",
    "StageCatalogManager",
    "StaticStageCatalog",
    "hookimpl",
]
