# tests/cli/test_validate_command.py
"""Tests for lanecheck validate command."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml
from typer.testing import CliRunner

from lanecheck import __version__
from lanecheck.cli import app

runner = CliRunner()

CATALOG: dict[str, Any] = {
    "stages": [
        {
            "library": "basic",
            "name": "file_source",
            "version": "1",
            "type": "source",
            "output_streams": 1,
            "fields": [{"name": "path", "type": "string", "group": "FILE", "required": True}],
        },
        {
            "library": "basic",
            "name": "filter",
            "version": "1",
            "type": "processor",
            "fields": [{"name": "condition", "type": "expr_boolean", "required": True}],
        },
        {
            "library": "basic",
            "name": "file_target",
            "version": "1",
            "type": "target",
            "output_streams": 0,
            "fields": [{"name": "path", "type": "string", "required": True}],
        },
    ]
}


def _stage(name: str, stage_name: str, inputs: list[str], outputs: list[str], config: dict[str, Any]) -> dict[str, Any]:
    return {
        "instance_name": name,
        "library": "basic",
        "stage_name": stage_name,
        "stage_version": "1",
        "input_lanes": inputs,
        "output_lanes": outputs,
        "configuration": config,
    }


VALID_PIPELINE: dict[str, Any] = {
    "name": "orders",
    "stages": [
        _stage("sink", "file_target", ["filtered"], [], {"path": "/data/out.csv"}),
        _stage("src", "file_source", [], ["raw"], {"path": "/data/in.csv"}),
        _stage("keep", "filter", ["raw"], ["filtered"], {"condition": "${true}"}),
    ],
}


class TestValidateCommand:
    """Tests for validate command."""

    @pytest.fixture
    def catalog_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.dump(CATALOG))
        return path

    @pytest.fixture
    def valid_pipeline(self, tmp_path: Path) -> Path:
        path = tmp_path / "pipeline.yaml"
        path.write_text(yaml.dump(VALID_PIPELINE))
        return path

    @pytest.fixture
    def invalid_pipeline(self, tmp_path: Path) -> Path:
        """Filter without condition and an unconsumed output lane."""
        pipeline = {
            "name": "broken",
            "stages": [
                _stage("src", "file_source", [], ["raw"], {"path": "/data/in.csv"}),
                _stage("keep", "filter", ["raw"], ["filtered"], {"condition": "true"}),
            ],
        }
        path = tmp_path / "broken.yaml"
        path.write_text(yaml.dump(pipeline))
        return path

    def test_valid_pipeline_console(self, valid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(app, ["validate", "-p", str(valid_pipeline), "-c", str(catalog_file)])

        assert result.exit_code == 0
        assert "orders" in result.output
        assert "valid" in result.output

    def test_valid_pipeline_json(self, valid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(
            app, ["validate", "--pipeline", str(valid_pipeline), "--catalog", str(catalog_file), "--format", "json"]
        )

        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["valid"] is True
        assert report["can_preview"] is True
        assert report["stage_order"] == ["src", "keep", "sink"]

    def test_debug_logs_stay_off_json_stdout(self, valid_pipeline: Path, catalog_file: Path) -> None:
        """Log lines go to stderr, so the JSON report on stdout still parses."""
        result = runner.invoke(
            app, ["validate", "-p", str(valid_pipeline), "-c", str(catalog_file), "-f", "json", "--log-level", "DEBUG"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["valid"] is True
        assert "Validation finished" in result.stderr
        assert "Validation finished" not in result.stdout

    def test_invalid_pipeline_json(self, invalid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(
            app, ["validate", "-p", str(invalid_pipeline), "-c", str(catalog_file), "-f", "json"]
        )

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["valid"] is False
        assert report["can_preview"] is False
        assert report["open_lanes"] == ["filtered"]
        codes = [issue["code"] for issue in report["issues"]["stages"]["keep"]]
        assert codes == ["VALIDATION_0030", "VALIDATION_0011"]

    def test_invalid_pipeline_console_summary(self, invalid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(app, ["validate", "-p", str(invalid_pipeline), "-c", str(catalog_file)])

        assert result.exit_code == 1
        assert "2 issue(s)" in result.output
        assert "preview allowed: no" in result.output

    def test_unknown_format(self, valid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(
            app, ["validate", "-p", str(valid_pipeline), "-c", str(catalog_file), "-f", "xml"]
        )

        assert result.exit_code == 2
        assert "Unknown format" in result.output

    def test_missing_pipeline_file(self, tmp_path: Path, catalog_file: Path) -> None:
        result = runner.invoke(app, ["validate", "-p", str(tmp_path / "nope.yaml"), "-c", str(catalog_file)])

        assert result.exit_code == 1
        assert "File Not Found" in result.output

    def test_invalid_yaml(self, tmp_path: Path, catalog_file: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("stages: [unclosed")

        result = runner.invoke(app, ["validate", "-p", str(path), "-c", str(catalog_file)])

        assert result.exit_code == 1
        assert "YAML Syntax Error" in result.output

    def test_schema_error(self, tmp_path: Path, catalog_file: Path) -> None:
        path = tmp_path / "schema.yaml"
        path.write_text(yaml.dump({"stages": [{"library": "basic"}]}))

        result = runner.invoke(app, ["validate", "-p", str(path), "-c", str(catalog_file)])

        assert result.exit_code == 1
        assert "Invalid Pipeline File" in result.output

    def test_duplicate_catalog_entries(self, tmp_path: Path, valid_pipeline: Path) -> None:
        catalog = {"stages": [CATALOG["stages"][0], CATALOG["stages"][0]]}
        path = tmp_path / "dupes.yaml"
        path.write_text(yaml.dump(catalog))

        result = runner.invoke(app, ["validate", "-p", str(valid_pipeline), "-c", str(path)])

        assert result.exit_code == 1
        assert "Invalid Catalog File" in result.output

    def test_invalid_log_level(self, valid_pipeline: Path, catalog_file: Path) -> None:
        result = runner.invoke(
            app, ["validate", "-p", str(valid_pipeline), "-c", str(catalog_file), "--log-level", "loud"]
        )

        assert result.exit_code == 1
        assert "Invalid Settings" in result.output

    def test_missing_required_option(self, valid_pipeline: Path) -> None:
        result = runner.invoke(app, ["validate", "-p", str(valid_pipeline)])

        assert result.exit_code != 0


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"lanecheck version {__version__}" in result.output
