"""Verse segment data models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

# Surface word (including internal hyphens) -> ordered compound components
BreakdownMap = dict[str, list[str]]


class SegmentKind(str, Enum):
    """Kind of a tokenized verse segment."""

    WORD = "word"
    PUNCTUATION = "punctuation"
    VERSE_MARKER = "verse_marker"
    SEPARATOR = "separator"


class Segment(BaseModel):
    """One unit of a tokenized verse line.

    Joining the ``text`` of all segments of a line in order reproduces
    the line exactly.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    kind: SegmentKind

    @property
    def is_word(self) -> bool:
        return self.kind is SegmentKind.WORD
