"""Structured name-entry data models produced by the markdown extractor."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Meaning(BaseModel):
    """Literal and contextual meaning of a compound."""

    literal: str = ""
    contextual: str = ""


class NameForm(BaseModel):
    """A name in Devanagari and IAST, with its whitespace tokens."""

    devanagari: str = ""
    iast: str = ""
    tokens: list[str] = Field(default_factory=list)


class RootBreakdownRow(BaseModel):
    """One row of the ROOT BREAKDOWN table."""

    compound: str
    sandhi: str | None = None  # None when the cell is a placeholder or "none"
    components: list[str] = Field(default_factory=list)
    grammar: str | None = None
    meaning: Meaning = Field(default_factory=Meaning)


class Dhatu(BaseModel):
    """Verbal root of a compound, e.g. √bhā "to shine" (Class 2P)."""

    syllable: str = ""
    meaning: str = ""
    class_: str = Field(default="", alias="class")

    model_config = ConfigDict(populate_by_name=True)


class EtymologyDetail(BaseModel):
    """Etymology of one compound, merged from prose and table."""

    breakdown: list[str] = Field(default_factory=list)
    root: Dhatu = Field(default_factory=Dhatu)
    prefixes: list[str] = Field(default_factory=list)
    suffix: str = ""
    sandhi: str | None = None
    formation: str = ""
    grammar: str = ""
    meaning: Meaning = Field(default_factory=Meaning)


class WordMeaning(BaseModel):
    """A word-by-word gloss line of the COMPOSITIONS section."""

    compound: str
    meaning: str = ""


class Composition(BaseModel):
    """Prose summary plus word-by-word glosses."""

    summary: str = ""
    word_by_word: list[WordMeaning] = Field(default_factory=list)


class Commentary(BaseModel):
    """One commentary on a name from a single source."""

    author: str
    period: str = "Unknown"
    source: str = ""
    text: str = ""


class IssueKind(str, Enum):
    """Kinds of data-quality facts recorded during extraction."""

    MISSING_NUMBER = "missing_number"
    NUMBER_MISMATCH = "number_mismatch"
    MISSING_ETYMOLOGY = "missing_etymology"
    UNCOVERED_TOKEN = "uncovered_token"
    MISSING_SECTION = "missing_section"


class DataQualityIssue(BaseModel):
    """A structural inconsistency found in one block, kept as data."""

    kind: IssueKind
    detail: str = ""


class NameEntry(BaseModel):
    """The structured record extracted from one ``# NAME <n>`` block.

    ``entry_number`` is the number declared by the block's verse marker
    when present, else the header number. ``header_number`` keeps the
    header's own number so a disagreement stays visible.
    """

    entry_number: int | None = None
    header_number: int | None = None
    name: NameForm = Field(default_factory=NameForm)
    root_breakdown: list[RootBreakdownRow] = Field(default_factory=list)
    etymology: dict[str, EtymologyDetail] = Field(default_factory=dict)
    composition: Composition = Field(default_factory=Composition)
    commentaries: dict[str, Commentary] = Field(default_factory=dict)
    issues: list[DataQualityIssue] = Field(default_factory=list)

    @property
    def has_commentary(self) -> bool:
        return any(c.text.strip() for c in self.commentaries.values())
