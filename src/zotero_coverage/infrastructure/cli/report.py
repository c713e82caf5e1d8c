"""Render coverage check results."""

from __future__ import annotations

from enum import Enum

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...application.dto.check import CheckResult

console = Console(emoji=False)

ALL_CITED_MESSAGE = "All sources cited"


class ReportFormat(str, Enum):
    text = "text"
    table = "table"


def report_lines(result: CheckResult) -> list[str]:
    """Plain-text report: confirmation line, or count line followed by one key per line."""
    if result.all_cited:
        return [ALL_CITED_MESSAGE]
    return [f"{len(result.items)} Sources not cited:"] + [item.citation_key for item in result.items]


def render_report(result: CheckResult, output_format: ReportFormat = ReportFormat.text) -> None:
    """Write the report to stdout; keys are echoed verbatim, only the table goes through rich."""
    if output_format is ReportFormat.table and not result.all_cited:
        _render_table(result)
        return

    for line in report_lines(result):
        typer.echo(line)


def _render_table(result: CheckResult) -> None:
    table = Table(
        title=f"{len(result.items)} Sources not cited",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Citation Key", style="green", no_wrap=True)
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")

    for item in result.items:
        table.add_row(escape(item.citation_key), escape(item.entry_type or "-"), escape(item.title or "-"))

    console.print(table)
