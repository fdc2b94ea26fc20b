# tests/plugins/test_catalog.py
"""Tests for the static stage catalog."""

import pytest

from lanecheck.plugins import StageCatalog, StaticStageCatalog
from tests.helpers.builders import ALL_DEFINITIONS, FILE_SOURCE, FILE_TARGET


class TestStaticStageCatalog:
    def test_resolve_by_key(self) -> None:
        catalog = StaticStageCatalog(ALL_DEFINITIONS)

        assert catalog.resolve("basic", "file_target", "1") is FILE_TARGET
        assert catalog.resolve("other", "file_target", "1") is None
        assert len(catalog) == len(ALL_DEFINITIONS)

    def test_definitions_in_registration_order(self) -> None:
        catalog = StaticStageCatalog([FILE_TARGET, FILE_SOURCE])

        assert catalog.definitions() == [FILE_TARGET, FILE_SOURCE]

    def test_duplicate_key_rejected(self) -> None:
        with pytest.raises(ValueError, match="library 'basic', name 'file_source', version '1'"):
            StaticStageCatalog([FILE_SOURCE, FILE_SOURCE])

    def test_empty_catalog(self) -> None:
        catalog = StaticStageCatalog()

        assert len(catalog) == 0
        assert isinstance(catalog, StageCatalog)
