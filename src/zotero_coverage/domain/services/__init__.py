"""Pure domain services (no I/O)."""

from .citation_difference import find_uncited_entries
from .citation_keys import extract_citation_keys, iter_citation_keys

__all__ = ["extract_citation_keys", "find_uncited_entries", "iter_citation_keys"]
