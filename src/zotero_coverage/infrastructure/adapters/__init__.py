"""Adapters for bibliography decoding and document I/O."""

from .bibliography_locator import locate_bibliography, read_front_matter
from .csl_json_bibliography import CslJsonBibliographyParser
from .text_reader import read_bibliography_file, read_text

__all__ = [
    "CslJsonBibliographyParser",
    "locate_bibliography",
    "read_bibliography_file",
    "read_front_matter",
    "read_text",
]
