"""Check that every bibliography entry is cited in a document."""

from __future__ import annotations

import logging
import tomllib
import uuid

import typer
from pydantic import ValidationError

from ....application.dto.check import CheckRequest
from ....application.use_cases.check_citations import check_citations
from ....domain.errors import CoverageError
from ...adapters.bibliography_locator import locate_bibliography
from ...adapters.csl_json_bibliography import CslJsonBibliographyParser
from ...adapters.text_reader import STDIN_SOURCE, read_bibliography_file, read_text
from ...config.environment import get_config_path
from ...config.settings import Settings
from ...logging import configure_logging, set_correlation_id
from ..report import ReportFormat, render_report

logger = logging.getLogger(__name__)


def check(
    document: str = typer.Option(
        ...,
        "--document",
        "-d",
        help="Path to the document (markdown or any plain text), '-' for stdin",
    ),
    zotero_lib: str | None = typer.Option(
        None,
        "--zotero-lib",
        "-z",
        "--bibliography",
        "-b",
        help="Path to the Zotero library export (CSL-JSON). Defaults to the 'bibliography' entry of the document header",
    ),
    config_path: str | None = typer.Option(
        None,
        "--config",
        help="Path to zotero-coverage.toml (defaults to $ZOTERO_COVERAGE_CONFIG or ./zotero-coverage.toml)",
    ),
    output_format: ReportFormat = typer.Option(
        ReportFormat.text,
        "--format",
        "-f",
        case_sensitive=False,
        help="Report format",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr"),
) -> None:
    """
    Report bibliography entries that are never cited in the document.

    Examples:
        zotero-coverage check -d thesis.md -z library.json
        zotero-coverage check -d thesis.md
        cat thesis.md | zotero-coverage check -d - -z library.json
    """
    configure_logging(verbose=verbose)
    set_correlation_id(str(uuid.uuid4()))

    try:
        settings = Settings.from_toml(get_config_path(config_path))
    except (tomllib.TOMLDecodeError, ValidationError, OSError) as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(1)

    if document == STDIN_SOURCE and zotero_lib == STDIN_SOURCE:
        typer.echo("Error: document and bibliography cannot both be read from stdin", err=True)
        raise typer.Exit(1)

    encoding = settings.check.encoding
    try:
        document_text = read_text(document, encoding=encoding)

        if zotero_lib is not None:
            bibliography_payload = read_text(zotero_lib, encoding=encoding)
        else:
            bibliography_path = locate_bibliography(
                document_text,
                document_path=document,
                metadata_key=settings.check.metadata_key,
                default=settings.check.bibliography,
                tab_replacement=settings.check.tab_replacement,
            )
            typer.echo(f"Trying to open {bibliography_path}")
            bibliography_payload = read_bibliography_file(bibliography_path, encoding=encoding)

        result = check_citations(
            CheckRequest(document_text=document_text, bibliography_payload=bibliography_payload),
            CslJsonBibliographyParser(),
        )
    except CoverageError as e:
        logger.debug(f"Coverage check aborted: {type(e).__name__}", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    render_report(result, output_format)
