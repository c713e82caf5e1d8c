from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ..types import CitationKey


@dataclass(frozen=True)
class BibliographyEntry:
    """
    One record of a bibliography, identified by its citation key.

    Fields:
        citation_key: Citation key from Better BibTeX (e.g., 'Alexander.2024a')
        metadata: Remaining CSL-JSON fields (authors, title, DOI, ...); never
                  interpreted by the coverage check and ignored for equality
    """

    citation_key: CitationKey
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate entry and freeze metadata."""
        if not isinstance(self.citation_key, str):
            raise TypeError(f"citation_key must be a string, got {type(self.citation_key).__name__}")
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def title(self) -> str | None:
        value = self.metadata.get("title")
        return value if isinstance(value, str) else None

    @property
    def entry_type(self) -> str | None:
        """CSL item type (e.g., 'article-journal', 'legal_case')."""
        value = self.metadata.get("type")
        return value if isinstance(value, str) else None

    def __str__(self) -> str:
        return self.citation_key
