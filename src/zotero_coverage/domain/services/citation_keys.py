"""Domain service for extracting in-text citation keys from document text."""

from __future__ import annotations

from typing import Iterator

from ..types import CITATION_PATTERN, CitationKey


def iter_citation_keys(text: str) -> Iterator[CitationKey]:
    """
    Lazily yield citation keys referenced in text, in order of appearance.

    Matches pandoc-style citations such as ``@Alexander.2024a`` anywhere in the
    text, including inside bracketed groups like ``[@BGH.2024 Rn. 45; @BGH.2010c]``.
    The '@' sigil is not part of the yielded key. Repeated citations are yielded
    every time they occur; candidates without a four-digit year (``@key.``) are skipped.

    Args:
        text: Full document text

    Yields:
        Citation keys in left-to-right scan order
    """
    for match in CITATION_PATTERN.finditer(text):
        yield match.group("key")


def extract_citation_keys(text: str) -> list[CitationKey]:
    """Return all citation keys referenced in text (duplicates preserved)."""
    return list(iter_citation_keys(text))
