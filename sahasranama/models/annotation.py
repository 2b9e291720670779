"""Commentary source and word annotation data models."""

from pydantic import BaseModel, ConfigDict, Field


class CommentarySource(BaseModel):
    """A named dictionary of Devanagari surface form -> commentary text.

    Sources are read-only inputs; reloading means building a new source
    and swapping it in, never mutating ``entries``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    entries: dict[str, str] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)


class WordAnnotation(BaseModel):
    """Commentary attached to one clickable word of the verse text.

    Identity is ``(line_index, position_index)``; ``position_index`` counts
    word segments only, ``segment_index`` is the index into the line's
    full segment list.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    surface_word: str
    line_index: int
    position_index: int
    segment_index: int
    breakdown_components: list[str] | None = None
    commentary_by_source: dict[str, str] = Field(default_factory=dict)
