"""Locate the bibliography file named in a document's YAML metadata header."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ...domain.errors import MissingBibliographyReference
from .text_reader import STDIN_SOURCE

logger = logging.getLogger(__name__)

HEADER_START = "---"
HEADER_END = ("---", "...")


def read_front_matter(document_text: str, tab_replacement: str = "  ") -> dict[str, Any]:
    """
    Parse the YAML front matter at the start of a markdown document.

    YAML does not allow tab indentation, so tabs are replaced before parsing.

    Args:
        document_text: Full document text
        tab_replacement: Text substituted for each tab character

    Returns:
        Header mapping, or an empty dict if the document has no header

    Raises:
        MissingBibliographyReference: If the header is unterminated, not valid YAML,
                                      or not a mapping
    """
    lines = document_text.replace("\t", tab_replacement).splitlines()
    if not lines or lines[0].lstrip("\ufeff").rstrip() != HEADER_START:
        return {}

    for end, line in enumerate(lines[1:], start=1):
        if line.rstrip() in HEADER_END:
            block = "\n".join(lines[1:end])
            break
    else:
        raise MissingBibliographyReference(
            "metadata header is not terminated",
            hint="Close the YAML header with a '---' line",
        )

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise MissingBibliographyReference(f"metadata header is not valid YAML ({e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MissingBibliographyReference("metadata header is not a key/value mapping")
    return data


def locate_bibliography(
    document_text: str,
    document_path: str | Path | None = None,
    metadata_key: str = "bibliography",
    default: str | None = None,
    tab_replacement: str = "  ",
) -> Path:
    """
    Resolve the bibliography path for a document.

    The path under metadata_key in the document header wins; the configured
    default is used when the header names none. Relative paths are taken from
    the working directory, falling back to the document's directory.

    Args:
        document_text: Full document text
        document_path: Where the document was read from ('-' or None for stdin)
        metadata_key: Header key holding the bibliography path
        default: Configured fallback bibliography path
        tab_replacement: Text substituted for tabs before parsing the header

    Returns:
        Path of the bibliography file (not checked for existence)

    Raises:
        MissingBibliographyReference: If no usable bibliography path can be found
    """
    header = read_front_matter(document_text, tab_replacement=tab_replacement)
    value = header.get(metadata_key)

    if value is None or value == "":
        if not default:
            raise MissingBibliographyReference(
                f"document header has no '{metadata_key}' entry",
                hint="Add 'bibliography: <file>.json' to the YAML header or pass --zotero-lib",
            )
        logger.debug(f"Using configured default bibliography: {default}")
        value = default
    elif not isinstance(value, str):
        raise MissingBibliographyReference(
            f"'{metadata_key}' in document header must be a single path, got {type(value).__name__}",
            hint="Pass the bibliography explicitly with --zotero-lib",
        )

    path = Path(value).expanduser()
    if path.is_absolute() or path.exists():
        return path

    if document_path is not None and str(document_path) != STDIN_SOURCE:
        candidate = Path(document_path).parent / path
        if candidate.exists():
            logger.debug(f"Resolved bibliography relative to document: {candidate}")
            return candidate
    return path
