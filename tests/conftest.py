"""Shared fixtures: a Better CSL JSON export and a German legal text excerpt."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

LIBRARY_RECORDS = [
    {
        "id": ".2024",
        "accessed": {"date-parts": [["2025", 1, 29]]},
        "citation-key": ".2024",
        "container-title": "JuristenZeitung",
        "container-title-short": "JZ",
        "DOI": "10.1628/jz-2024-0306",
        "ISSN": "0022-6882",
        "issue": "22",
        "issued": {"date-parts": [["2024"]]},
        "language": "de",
        "page": "1007",
        "source": "DOI.org (Crossref)",
        "title": "Potenzial und Grenzen eines Einsatzes von Large Language Models in der öffentlichen Verwaltung",
        "type": "article-journal",
        "URL": "https://www.mohrsiebeck.com/10.1628/jz-2024-0306",
        "volume": "79",
    },
    {
        "id": ".2024a",
        "accessed": {"date-parts": [["2025", 1, 29]]},
        "citation-key": ".2024a",
        "container-title": "Archiv für die civilistische Praxis",
        "container-title-short": "AcP",
        "DOI": "10.1628/acp-2024-0020",
        "ISSN": "0003-8997",
        "issue": "4-5",
        "issued": {"date-parts": [["2024"]]},
        "language": "de",
        "page": "477",
        "source": "DOI.org (Crossref)",
        "title": "Kryptowerte als Sachen",
        "type": "article-journal",
        "URL": "https://www.mohrsiebeck.com/10.1628/acp-2024-0020",
        "volume": "224",
    },
    {
        "id": "AGGelnhausen.2024",
        "authority": "AG Gelnhausen",
        "citation-key": "AGGelnhausen.2024",
        "genre": "Urt.",
        "issued": {"date-parts": [["2024", 3, 4]]},
        "jurisdiction": "de",
        "number": "52 C 76/24",
        "title": "AG Gelnhausen, 04.03.2024 - 52 C 76/24",
        "type": "legal_case",
    },
    {
        "id": "Alexander.2024",
        "author": [{"family": "Alexander", "given": ""}],
        "citation-key": "Alexander.2024",
        "container-title": "UWG",
        "edition": "42",
        "editor": [
            {"family": "Köhler", "given": ""},
            {"family": "Bornkamm", "given": ""},
            {"family": "Feddersen", "given": ""},
        ],
        "issued": {"date-parts": [["2024"]]},
        "source": "beck-online",
        "title": "§ 2 GeschGehG",
        "type": "entry-encyclopedia",
    },
    {
        "id": "Alexander.2024a",
        "author": [{"family": "Alexander", "given": ""}],
        "citation-key": "Alexander.2024a",
        "container-title": "UWG",
        "edition": "42",
        "editor": [
            {"family": "Köhler", "given": ""},
            {"family": "Bornkamm", "given": ""},
            {"family": "Feddersen", "given": ""},
        ],
        "issued": {"date-parts": [["2024"]]},
        "source": "beck-online",
        "title": "§ 6 GeschGehG",
        "type": "entry-encyclopedia",
    },
]

LEGAL_TEXT = """Gemeinsame Voraussetzung beider Schranken ist zunächst, dass der
Zugang zu den Daten rechtmäßig erfolgt.[@Bomhard.2024b Rn. 15] Dieser
kann etwa auf einer dahingegenden Lizenz beruhen (welche aber etwa
kein TDM zulässt) oder auch auf einer Einwilligung der:des
Berechtigten. Eine solche kann sich (konkludent) durch öffentliche
Zugänglichmachung im Internet ergeben.[@BGH.2024 Rn. 45--47;
@BGH.2010c Rn. 36; so auch @LGHamburg.2024 Rn. 86] Das wird meist der
Fall sein, zumindest, was den Zugang zu den Daten betrifft. @Alexander.2024; @Alexander.2024a
"""

LEGAL_TEXT_KEYS = [
    "Bomhard.2024b",
    "BGH.2024",
    "BGH.2010c",
    "LGHamburg.2024",
    "Alexander.2024",
    "Alexander.2024a",
]


@pytest.fixture
def library_json() -> str:
    """Five-record Better CSL JSON export."""
    return json.dumps(LIBRARY_RECORDS, ensure_ascii=False, indent=2)


@pytest.fixture
def legal_text() -> str:
    return LEGAL_TEXT


@pytest.fixture
def library_file(tmp_path: Path, library_json: str) -> Path:
    path = tmp_path / "library.json"
    path.write_text(library_json, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host configuration out of tests."""
    for key in ("ZOTERO_COVERAGE_CONFIG", "ZOTERO_COVERAGE_BIBLIOGRAPHY", "ZOTERO_COVERAGE_ENCODING"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def legal_text_keys() -> list[str]:
    return list(LEGAL_TEXT_KEYS)
