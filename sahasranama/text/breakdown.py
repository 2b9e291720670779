"""Extraction of bracketed compound breakdowns from verse lines."""

import logging
import re

from sahasranama.models.segment import BreakdownMap

logger = logging.getLogger(__name__)

# word [component + component](55) -- the trailing number is optional.
BREAKDOWN_PATTERN: re.Pattern[str] = re.compile(r"(\S+)\s+\[([^\]]+)\](?:\s*\(\d+\))?")

_COMPONENT_SPLIT = re.compile(r"\s*\+\s*")
# Trims double dandas too, which tokenize() leaves on a word, so a
# breakdown written on "word॥" is keyed "word" and never matches that token.
_TRAILING_PUNCTUATION = re.compile(r"[।॥]+$")


def extract_breakdowns(line: str) -> tuple[str, BreakdownMap]:
    """Strip ``word [a + b](n)`` annotations from a line.

    Each annotation is replaced by the bare word it follows (keeping any
    danda attached to that word), and the word, with trailing dandas
    trimmed, is mapped to its components. A bracket with no non-empty
    component still gets removed but yields no mapping. When one word
    carries two annotations on the same line the later one wins.

    Must run before :func:`sahasranama.text.tokenizer.tokenize`.

    Args:
        line: One raw verse line.

    Returns:
        The cleaned line and the word -> components map for it.
    """
    breakdowns: BreakdownMap = {}

    def _replace(match: re.Match[str]) -> str:
        surface = match.group(1)
        word = _TRAILING_PUNCTUATION.sub("", surface)
        components = [c.strip() for c in _COMPONENT_SPLIT.split(match.group(2))]
        components = [c for c in components if c]
        if word and components:
            if word in breakdowns and breakdowns[word] != components:
                logger.debug("Breakdown for %s overridden on the same line", word)
            breakdowns[word] = components
        return surface

    cleaned = BREAKDOWN_PATTERN.sub(_replace, line)
    return cleaned, breakdowns
