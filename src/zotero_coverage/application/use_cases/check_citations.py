from __future__ import annotations

import logging

from ...domain.services.citation_difference import find_uncited_entries
from ...domain.services.citation_keys import extract_citation_keys
from ..dto.check import CheckRequest, CheckResult, UncitedEntryItem
from ..ports.bibliography_parser import BibliographyParserPort

logger = logging.getLogger(__name__)


def check_citations(
    request: CheckRequest,
    parser: BibliographyParserPort,
) -> CheckResult:
    """
    Report bibliography entries that are never cited in the document text.

    The bibliography is decoded before any citation work so that a malformed
    payload aborts the check without partial results.

    Args:
        request: CheckRequest with document_text and bibliography_payload
        parser: BibliographyParserPort for decoding the bibliography payload

    Returns:
        CheckResult with uncited entries in bibliography order

    Raises:
        MalformedBibliography: If the bibliography payload cannot be decoded
    """
    entries = parser.parse(request.bibliography_payload)
    logger.debug(f"Decoded {len(entries)} bibliography entries")

    cited_keys = extract_citation_keys(request.document_text)
    logger.debug(
        f"Extracted {len(cited_keys)} in-text citations ({len(set(cited_keys))} distinct keys)"
    )

    uncited = find_uncited_entries(cited_keys, entries)
    logger.info(
        f"{len(uncited)} of {len(entries)} bibliography entries not cited",
        extra={"uncited": len(uncited), "bibliography_size": len(entries)},
    )

    items = [
        UncitedEntryItem(
            citation_key=entry.citation_key,
            title=entry.title,
            entry_type=entry.entry_type,
        )
        for entry in uncited
    ]
    return CheckResult(
        items=items,
        cited_keys=cited_keys,
        bibliography_size=len(entries),
    )
