"""Parser for numbered commentary text files.

Entries look like::

    12. नित्या-षोडशिकारूपा - She who is the sixteen Nitya deities ...
        continuation of the commentary

    १३. श्रीमाता -
    The commentary may also start on the next line.

The entry number may be written in Arabic or Devanagari digits. A hyphen
directly between Devanagari letters is part of the name; the separator is
a dash surrounded by whitespace and followed by non-Devanagari text.
"""

import logging
import re

logger = logging.getLogger(__name__)

DEVANAGARI_DIGITS = "०१२३४५६७८९"

ENTRY_LINE = re.compile(r"^(?P<number>[०-९]+|[0-9]+)\.\s*(?P<rest>.+)$")
NUMBERED_LINE = re.compile(r"^(?:[०-९]+|[0-9]+)\.")
DEVANAGARI = re.compile(r"[ऀ-ॿ]")
SEPARATOR = re.compile(r"^(?P<name>.+?)\s+-\s+(?P<text>.+)$")


def devanagari_to_int(value: str) -> int | None:
    """Convert a number written in Devanagari (or Arabic) digits.

    Non-digit characters are ignored; returns None if there are no digits.
    """
    digits = ""
    for char in value:
        if char in DEVANAGARI_DIGITS:
            digits += str(DEVANAGARI_DIGITS.index(char))
        elif char.isascii() and char.isdigit():
            digits += char
    return int(digits) if digits else None


def parse_commentary_text(text: str) -> dict[str, str]:
    """Parse a numbered commentary file into name -> commentary.

    Any preamble before the first numbered Devanagari entry is skipped.
    Continuation lines are joined to the current entry with single
    spaces. Entries whose commentary ends up empty are dropped; a
    repeated name keeps its last commentary.

    Args:
        text: The whole commentary file.

    Returns:
        Devanagari name -> commentary, in file order.
    """
    commentaries: dict[str, str] = {}
    current_name: str | None = None
    current_text: list[str] = []

    def _flush() -> None:
        if current_name is None:
            return
        commentary = " ".join(current_text).strip()
        if commentary:
            commentaries[current_name] = commentary
        else:
            logger.debug("Dropping entry without commentary: %s", current_name)

    for line in text.splitlines():
        stripped = line.strip()
        if not stripped:
            continue

        entry = ENTRY_LINE.match(stripped)
        if entry and DEVANAGARI.search(entry.group("rest")):
            _flush()
            current_name, first_text = _split_name(entry.group("rest").strip())
            current_text = [first_text] if first_text else []
            continue

        if current_name is None:
            continue
        if not NUMBERED_LINE.match(stripped):
            current_text.append(stripped)

    _flush()
    logger.debug("Parsed %d commentary entries", len(commentaries))
    return commentaries


def _split_name(rest: str) -> tuple[str, str]:
    """Split ``name - commentary`` where the name may contain hyphens."""
    match = SEPARATOR.match(rest)
    if match and not DEVANAGARI.match(match.group("text").strip()):
        name = re.sub(r"\s*-\s*$", "", match.group("name").strip())
        return name, match.group("text").strip()

    name = rest.strip()
    if name.endswith(" -"):
        name = name[:-2].strip()
    return name, ""
