# src/lanecheck/cli.py
"""lanecheck Command Line Interface.

Entry point for the lanecheck CLI tool.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError

from lanecheck import __version__
from lanecheck.cli_formatters import format_error, render_report_console, render_report_json
from lanecheck.core.config import (
    CatalogSettings,
    LanecheckSettings,
    PipelineSettings,
    load_catalog,
    load_pipeline,
    load_settings,
)
from lanecheck.core.logging import configure_logging
from lanecheck.plugins.catalog import StaticStageCatalog
from lanecheck.validation import validate_pipeline

__all__ = ["app"]

app = typer.Typer(
    name="lanecheck",
    help="lanecheck: validate stage/lane pipeline configurations.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"lanecheck version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """lanecheck: validate stage/lane pipeline configurations."""


def _pydantic_details(error: ValidationError) -> list[str]:
    details = []
    for item in error.errors():
        loc = ".".join(str(x) for x in item["loc"])
        details.append(f"{loc}: {item['msg']}")
    return details


def _load_or_exit(kind: str, path: Path) -> PipelineSettings | CatalogSettings:
    """Load a pipeline or catalog file, rendering load errors and exiting 1."""
    loader = load_pipeline if kind == "pipeline" else load_catalog
    try:
        return loader(path)
    except FileNotFoundError:
        format_error(
            title="File Not Found",
            message=f"{kind.capitalize()} file does not exist: {path}",
            hint="Check the path and ensure the file exists.",
        )
        raise typer.Exit(1) from None
    except yaml.YAMLError as e:
        format_error(
            title="YAML Syntax Error",
            message=f"Failed to parse {path.name}",
            details=[str(e)],
            hint="Check for unclosed brackets, incorrect indentation, or invalid characters.",
        )
        raise typer.Exit(1) from None
    except ValidationError as e:
        # Must be before ValueError - ValidationError inherits from it
        format_error(
            title=f"Invalid {kind.capitalize()} File",
            message=f"{path.name} does not match the {kind} file schema",
            details=_pydantic_details(e),
            hint="Check field names, types, and required values.",
        )
        raise typer.Exit(1) from None
    except ValueError as e:
        format_error(title=f"Invalid {kind.capitalize()} File", message=str(e))
        raise typer.Exit(1) from None


def _settings_or_exit(settings: Path | None, log_level: str | None) -> LanecheckSettings:
    try:
        loaded = load_settings(settings)
        if log_level is not None:
            loaded = LanecheckSettings(**{**loaded.model_dump(), "log_level": log_level})
    except FileNotFoundError:
        format_error(title="File Not Found", message=f"Settings file does not exist: {settings}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        format_error(title="Invalid Settings", message="Settings failed validation", details=_pydantic_details(e))
        raise typer.Exit(1) from None
    return loaded


@app.command()
def validate(
    pipeline: Path = typer.Option(
        ...,
        "--pipeline",
        "-p",
        help="Path to pipeline YAML file.",
    ),
    catalog: Path = typer.Option(
        ...,
        "--catalog",
        "-c",
        help="Path to stage catalog YAML file.",
    ),
    output_format: str = typer.Option(
        "console",
        "--format",
        "-f",
        help="Output format: console or json.",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to lanecheck settings file (logging).",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override log level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Validate a pipeline file against a stage catalog.

    Exits 0 when the pipeline has no issues, 1 otherwise.
    """
    if output_format not in ("console", "json"):
        format_error(title="Invalid Option", message=f"Unknown format '{output_format}'", hint="Use 'console' or 'json'.")
        raise typer.Exit(2)

    tool_settings = _settings_or_exit(settings, log_level)
    configure_logging(json_output=tool_settings.json_logs, level=tool_settings.log_level)

    pipeline_settings = _load_or_exit("pipeline", pipeline.expanduser())
    catalog_settings = _load_or_exit("catalog", catalog.expanduser())
    assert isinstance(pipeline_settings, PipelineSettings)
    assert isinstance(catalog_settings, CatalogSettings)

    try:
        stage_catalog = StaticStageCatalog(catalog_settings.to_definitions())
    except ValueError as e:
        format_error(title="Invalid Catalog File", message=str(e))
        raise typer.Exit(1) from None

    report = validate_pipeline(stage_catalog, pipeline_settings.to_description(), name=pipeline_settings.name)

    if output_format == "json":
        render_report_json(report)
    else:
        render_report_console(report)

    if not report.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
