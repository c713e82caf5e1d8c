"""Unit tests for finding uncited bibliography entries."""

from zotero_coverage.domain.models.bibliography_entry import BibliographyEntry
from zotero_coverage.domain.services.citation_difference import find_uncited_entries


def _entries(*keys: str) -> list[BibliographyEntry]:
    return [BibliographyEntry(citation_key=key) for key in keys]


def test_uncited_entries_keep_bibliography_order(legal_text_keys: list[str]):
    entries = _entries(".2024", ".2024a", "AGGelnhausen.2024", "Alexander.2024", "Alexander.2024a")

    result = find_uncited_entries(legal_text_keys, entries)

    assert [e.citation_key for e in result] == [".2024", ".2024a", "AGGelnhausen.2024"]


def test_empty_document_reports_every_entry():
    entries = _entries("key1", "key2")

    result = find_uncited_entries([], entries)

    assert result == entries
    assert result[0].citation_key == "key1"
    assert result[1].citation_key == "key2"


def test_all_entries_cited():
    assert find_uncited_entries(["key1", "key2"], _entries("key1", "key2")) == []


def test_duplicates_in_document_have_no_effect():
    entries = _entries("key1", "key2", "key3")

    result = find_uncited_entries(["key1", "key1", "key3"], entries)

    assert len(result) == 1
    assert result[0].citation_key == "key2"


def test_doubling_cited_keys_does_not_change_result(legal_text_keys: list[str]):
    entries = _entries(".2024", "BGH.2024", "Alexander.2024a", "Unused.1999")

    once = find_uncited_entries(legal_text_keys, entries)
    twice = find_uncited_entries(legal_text_keys + legal_text_keys, entries)

    assert once == twice


def test_repeated_runs_are_identical():
    entries = _entries("a.2001", "b.2002", "c.2003")
    cited = ["b.2002"]

    assert find_uncited_entries(cited, entries) == find_uncited_entries(cited, entries)


def test_empty_bibliography():
    assert find_uncited_entries(["A.2000"], []) == []


def test_matching_is_case_sensitive_and_exact():
    entries = _entries("Smith.2020", "smith.2020", "Smith.2020a")

    result = find_uncited_entries(["Smith.2020"], entries)

    assert [e.citation_key for e in result] == ["smith.2020", "Smith.2020a"]


def test_duplicate_bibliography_keys_are_reported_each_time():
    entries = _entries("Dup.2020", "Dup.2020", "Cited.2021")

    result = find_uncited_entries(["Cited.2021"], entries)

    assert [e.citation_key for e in result] == ["Dup.2020", "Dup.2020"]


def test_accepts_lazy_key_iterable():
    entries = _entries("A.2000", "B.2001")
    assert find_uncited_entries(iter(["A.2000"]), entries) == _entries("B.2001")
