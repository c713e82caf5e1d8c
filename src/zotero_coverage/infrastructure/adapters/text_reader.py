"""Read documents and bibliographies fully into memory."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ...domain.errors import InputReadError, MissingBibliographyReference

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"


def read_text(source: str | Path, encoding: str = "utf-8") -> str:
    """
    Read a file, or standard input when source is '-', into a string.

    Args:
        source: File path or '-' for standard input
        encoding: Text encoding of the source

    Returns:
        Full content of the source

    Raises:
        InputReadError: If the source cannot be opened, read or decoded
    """
    name = STDIN_SOURCE if str(source) == STDIN_SOURCE else str(Path(source))
    try:
        text = _read_source(name, encoding)
    except UnicodeDecodeError as e:
        raise InputReadError(
            name,
            f"not valid {encoding} text ({e.reason})",
            hint="Set [check] encoding in zotero-coverage.toml or ZOTERO_COVERAGE_ENCODING",
        ) from e
    except OSError as e:
        raise InputReadError(name, e.strerror or str(e)) from e

    logger.debug(f"Read {len(text)} characters from {name}")
    return text


def read_bibliography_file(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a bibliography path that was located from the document header or settings.

    Raises:
        MissingBibliographyReference: If the located path does not exist
        InputReadError: If the file exists but cannot be read
    """
    if not path.is_file():
        raise MissingBibliographyReference(
            "referenced bibliography cannot be opened",
            path=str(path),
            hint="Check the 'bibliography' entry in the document header or pass --zotero-lib",
        )
    return read_text(path, encoding=encoding)


def _read_source(name: str, encoding: str) -> str:
    if name == STDIN_SOURCE:
        # Raw bytes, decoded with the configured encoding
        return sys.stdin.buffer.read().decode(encoding)
    return Path(name).read_text(encoding=encoding)
