"""CSL-JSON bibliography parser (Better BibTeX / Zotero export)."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError

from ...domain.errors import MalformedBibliography
from ...domain.models.bibliography_entry import BibliographyEntry

logger = logging.getLogger(__name__)

CITATION_KEY_FIELD = "citation-key"


class CslRecord(BaseModel):
    """One CSL-JSON item; only the citation key is required, other fields pass through."""

    model_config = ConfigDict(extra="allow")

    citation_key: StrictStr = Field(alias=CITATION_KEY_FIELD)


_records_adapter: TypeAdapter[list[CslRecord]] = TypeAdapter(list[CslRecord])


class CslJsonBibliographyParser:
    """
    Adapter decoding a CSL-JSON array into bibliography entries.

    Unknown fields are kept as entry metadata and never cause a failure, so
    exports from newer Zotero/Better BibTeX versions remain readable.
    """

    def parse(self, payload: str) -> list[BibliographyEntry]:
        """
        Decode a CSL-JSON payload, preserving record order.

        Args:
            payload: JSON text holding an array of records

        Returns:
            Bibliography entries, one per record

        Raises:
            MalformedBibliography: If the payload is not a JSON array of objects
                                   each carrying a string 'citation-key'
        """
        try:
            records = _records_adapter.validate_json(payload)
        except ValidationError as e:
            raise _to_malformed(e) from e

        entries = [
            BibliographyEntry(
                citation_key=record.citation_key,
                metadata=dict(record.model_extra or {}),
            )
            for record in records
        ]
        logger.debug(f"Parsed {len(entries)} CSL-JSON records")
        return entries


def _to_malformed(error: ValidationError) -> MalformedBibliography:
    """Translate the first pydantic validation error into a MalformedBibliography."""
    first: dict[str, Any] = dict(error.errors()[0])
    err_type = first.get("type", "")
    loc = tuple(first.get("loc", ()))
    message = first.get("msg", str(error))

    if err_type == "json_invalid":
        return MalformedBibliography(
            f"not valid JSON ({message})",
            hint="Export the library from Zotero as 'Better CSL JSON'",
        )
    if not loc:
        return MalformedBibliography(
            f"expected a JSON array of records ({message})",
            hint="Export the library from Zotero as 'Better CSL JSON'",
        )

    index = loc[0] if isinstance(loc[0], int) else None
    if len(loc) > 1 and loc[1] == CITATION_KEY_FIELD:
        if err_type == "missing":
            reason = f"missing '{CITATION_KEY_FIELD}' field"
        else:
            reason = f"'{CITATION_KEY_FIELD}' must be a string ({message})"
        return MalformedBibliography(
            reason,
            index=index,
            hint="Enable Better BibTeX citation keys in the Zotero export",
        )
    return MalformedBibliography(f"record is not an object ({message})", index=index)
