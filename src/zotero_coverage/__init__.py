"""Check that every bibliography entry is cited in a markdown document."""

__version__ = "0.1.0"
