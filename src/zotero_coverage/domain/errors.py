"""Domain errors for citation coverage checks."""


class CoverageError(Exception):
    """
    Base class for errors that abort a coverage check.

    Attributes:
        hint: Actionable hint for resolution (optional)
    """

    hint: str | None = None


class InputReadError(CoverageError):
    """
    Raised when a document or bibliography cannot be read from its source.

    Attributes:
        source: Path (or '-' for standard input) that failed to read
        reason: Underlying I/O failure
        hint: Actionable hint for resolution
    """

    def __init__(self, source: str, reason: str, hint: str | None = None) -> None:
        self.source = source
        self.reason = reason
        self.hint = hint
        msg = f"Cannot read '{source}': {reason}"
        if hint:
            msg += f". {hint}"
        super().__init__(msg)


class MalformedBibliography(CoverageError):
    """
    Raised when a bibliography payload is not a JSON array of records with citation keys.

    Attributes:
        reason: What is wrong with the payload
        index: Position of the first offending record (None if the payload itself is invalid)
        hint: Actionable hint for resolution
    """

    def __init__(self, reason: str, index: int | None = None, hint: str | None = None) -> None:
        self.reason = reason
        self.index = index
        self.hint = hint
        msg = "Malformed bibliography"
        if index is not None:
            msg += f" (record {index})"
        msg += f": {reason}"
        if hint:
            msg += f". {hint}"
        super().__init__(msg)


class MissingBibliographyReference(CoverageError):
    """
    Raised when no bibliography was given and none can be located from the document header.

    Attributes:
        reason: Why the bibliography could not be located
        path: Located bibliography path that could not be opened (optional)
        hint: Actionable hint for resolution
    """

    def __init__(self, reason: str, path: str | None = None, hint: str | None = None) -> None:
        self.reason = reason
        self.path = path
        self.hint = hint
        msg = f"Bibliography not found: {reason}"
        if path:
            msg += f" ({path})"
        if hint:
            msg += f". {hint}"
        super().__init__(msg)
