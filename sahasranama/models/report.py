"""Corpus audit data models."""

from pydantic import BaseModel, Field

from sahasranama.models.entry import DataQualityIssue


class MissingCommentary(BaseModel):
    """An entry with no non-empty commentary in any source."""

    entry_number: int | None = None
    devanagari: str = ""
    iast: str = ""
    empty_sources: list[str] = Field(default_factory=list)  # Empty when no section at all


class EntryIssues(BaseModel):
    """Data-quality issues recorded for one entry."""

    entry_number: int | None = None
    devanagari: str = ""
    issues: list[DataQualityIssue] = Field(default_factory=list)


class AuditReport(BaseModel):
    """Result of auditing an extracted corpus."""

    total_entries: int = 0
    unique_names: int = 0
    missing: list[MissingCommentary] = Field(default_factory=list)
    issues: list[EntryIssues] = Field(default_factory=list)

    @property
    def with_commentary(self) -> int:
        return self.total_entries - len(self.missing)
