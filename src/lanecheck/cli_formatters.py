# src/lanecheck/cli_formatters.py
"""Report and error rendering for the lanecheck CLI.

Console output uses rich; JSON output is the report's to_dict() so other
tools can consume it.
"""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lanecheck.contracts import FieldIssue, ValidationReport


def format_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Display a formatted error panel on stderr with optional hint and details."""
    console = Console(stderr=True)

    content = Text()
    content.append(message, style="white")

    if details:
        content.append("\n\n")
        for detail in details:
            content.append(f"  • {detail}\n", style="dim")

    if hint:
        content.append("\n")
        content.append("Hint: ", style="yellow bold")
        content.append(hint, style="yellow")

    console.print(Panel(content, title=f"[red bold]{title}[/]", border_style="red", expand=False))


def render_report_json(report: ValidationReport) -> None:
    """Print the report as JSON on stdout."""
    typer.echo(json.dumps(report.to_dict(), indent=2, default=str))


def render_report_console(report: ValidationReport, console: Console | None = None) -> None:
    """Print a human-readable report."""
    console = console or Console()

    if report.valid:
        console.print(f"[green bold]✓[/] Pipeline '{report.pipeline_name}' is valid ({len(report.stage_order)} stages)")
        return

    preview = "[green]yes[/]" if report.can_preview else "[red]no[/]"
    console.print(
        f"[red bold]✗[/] Pipeline '{report.pipeline_name}': {report.issues.issue_count} issue(s), preview allowed: {preview}"
    )

    pipeline_issues = report.issues.pipeline_issues
    if pipeline_issues:
        console.print("\n[bold]Pipeline[/]")
        for issue in pipeline_issues:
            console.print(f"  {issue.code.value}  {issue.message}")

    stage_issues = report.issues.stage_issues
    if stage_issues:
        table = Table(title="Stage issues", show_lines=False)
        table.add_column("Stage", style="cyan")
        table.add_column("Field")
        table.add_column("Code", style="magenta")
        table.add_column("Message")
        for instance_name, issues in stage_issues.items():
            for issue in issues:
                field = ""
                if isinstance(issue, FieldIssue):
                    field = f"{issue.group}.{issue.field_name}" if issue.group else issue.field_name
                table.add_row(instance_name, field, issue.code.value, issue.message)
        console.print()
        console.print(table)

    if report.open_lanes:
        console.print(f"\n[yellow]Open lanes:[/] {', '.join(report.open_lanes)}")
