"""Domain models for citation coverage."""

from .bibliography_entry import BibliographyEntry

__all__ = [
    "BibliographyEntry",
]
