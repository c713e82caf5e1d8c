from pydantic import BaseModel


class CheckRequest(BaseModel):
    """Request DTO for citation coverage check use case."""

    document_text: str
    bibliography_payload: str


class UncitedEntryItem(BaseModel):
    """Bibliography entry that is never cited in the document."""

    citation_key: str
    title: str | None = None
    entry_type: str | None = None


class CheckResult(BaseModel):
    """Result DTO for citation coverage check use case."""

    items: list[UncitedEntryItem]
    cited_keys: list[str] = []
    bibliography_size: int = 0

    @property
    def all_cited(self) -> bool:
        return not self.items
