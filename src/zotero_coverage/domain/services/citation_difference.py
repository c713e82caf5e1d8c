"""Domain service for finding bibliography entries that are never cited."""

from __future__ import annotations

from typing import Iterable, Sequence

from ..models.bibliography_entry import BibliographyEntry
from ..types import CitationKey


def find_uncited_entries(
    cited_keys: Iterable[CitationKey],
    entries: Sequence[BibliographyEntry],
) -> list[BibliographyEntry]:
    """
    Return bibliography entries whose citation key is not cited in the document.

    Pure and total: keys are compared by exact string equality and duplicates
    in cited_keys have no effect. Runs in O(n + m).

    Args:
        cited_keys: Citation keys extracted from the document text
        entries: Bibliography entries in their original order

    Returns:
        Uncited entries, preserving bibliography order
    """
    cited = set(cited_keys)
    return [entry for entry in entries if entry.citation_key not in cited]
