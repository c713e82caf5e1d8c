from typing import Protocol, runtime_checkable

from ...domain.models.bibliography_entry import BibliographyEntry


@runtime_checkable
class BibliographyParserPort(Protocol):
    """Protocol for decoding a bibliography payload into entries."""

    def parse(self, payload: str) -> list[BibliographyEntry]:
        """
        Decode a bibliography payload (e.g., CSL-JSON exported by Better BibTeX).

        Args:
            payload: Full bibliography content as text

        Returns:
            Bibliography entries in payload order

        Raises:
            MalformedBibliography: If the payload is not an array of records with
                                   a string citation key
        """
        ...
