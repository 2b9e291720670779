"""Lossless tokenizer for lines of Devanagari verse."""

import re

from sahasranama.models.segment import Segment, SegmentKind

DANDA = "।"
DOUBLE_DANDA = "॥"

# "॥ 12 ॥" or "॥१२॥": a verse number between double dandas.
VERSE_MARKER_PATTERN: re.Pattern[str] = re.compile(r"॥\s*[०-९\d]+\s*॥")

_MARKER_SPLIT = re.compile(f"({VERSE_MARKER_PATTERN.pattern})")
_WHITESPACE_SPLIT = re.compile(r"(\s+)")
_TRAILING_DANDAS = re.compile(f"{DANDA}+$")


def tokenize(line: str) -> list[Segment]:
    """Split a verse line into word, punctuation, marker and separator segments.

    Verse markers are emitted whole. The text between them is split on
    whitespace; hyphens inside a unit are compound joins and stay in the
    word. A trailing run of single dandas is split off a unit as
    punctuation. Whitespace runs are emitted verbatim as separators, so
    ``"".join(s.text for s in tokenize(line)) == line`` always holds.

    Args:
        line: One display line, possibly empty.

    Returns:
        Segments in source order.
    """
    segments: list[Segment] = []
    if not line:
        return segments

    for i, part in enumerate(_MARKER_SPLIT.split(line)):
        if not part:
            continue
        # Odd indices are the captured markers
        if i % 2 == 1:
            segments.append(Segment(text=part, kind=SegmentKind.VERSE_MARKER))
            continue
        segments.extend(_tokenize_span(part))

    return segments


def _tokenize_span(span: str) -> list[Segment]:
    segments: list[Segment] = []
    for piece in _WHITESPACE_SPLIT.split(span):
        if not piece:
            continue
        if piece.isspace():
            segments.append(Segment(text=piece, kind=SegmentKind.SEPARATOR))
            continue

        match = _TRAILING_DANDAS.search(piece)
        word = piece[: match.start()] if match else piece
        if word:
            segments.append(Segment(text=word, kind=SegmentKind.WORD))
        if match:
            segments.append(Segment(text=match.group(), kind=SegmentKind.PUNCTUATION))

    return segments


def strip_dandas(text: str) -> str:
    """Remove every danda and double danda from ``text`` and trim it."""
    return text.replace(DANDA, "").replace(DOUBLE_DANDA, "").strip()
