from .bibliography_parser import BibliographyParserPort

__all__ = ["BibliographyParserPort"]
