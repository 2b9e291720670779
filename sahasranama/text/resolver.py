"""Commentary lookup tolerant of avagraha, sandhi and hyphenation variants."""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

AVAGRAHA = "ऽ"
SHORT_A = "अ"
VOWEL_SIGN_AA = "ा"
OM_FORMS: frozenset[str] = frozenset({"ॐ", "ओं"})
OM_GLOSS = "The primordial Sound"


def resolve_commentary(word: str, source: Mapping[str, str]) -> str | None:
    """Find the commentary for ``word`` in a single source.

    Tries, in order, stopping at the first hit:

    1. the built-in gloss for Om, whatever the source holds;
    2. the exact key;
    3. avagraha replaced by अ;
    4. the two halves around a single avagraha, joined with a space,
       or one half alone if only one resolves. The second half is also
       tried with its elided अ restored. When only the second half
       resolves, the first is retried with its sandhi undone (a final ā
       read back as a, or अ appended), but such a form is only used
       together with the second half;
    5. the key with hyphens removed;
    6. any source key equal to the query once both lose their hyphens,
       in the source's iteration order.

    Args:
        word: A surface word or a breakdown component.
        source: Devanagari surface form -> commentary text. Never mutated.

    Returns:
        The commentary text, or None on a lookup miss.
    """
    if word in OM_FORMS:
        return OM_GLOSS

    found = _lookup(source, word)
    if found:
        return found

    if AVAGRAHA in word:
        found = _resolve_avagraha(word, source)
        if found:
            return found

    bare = word.replace("-", "")
    found = _lookup(source, bare)
    if found:
        return found

    for key, text in source.items():
        if text and key.replace("-", "") == bare:
            return text

    logger.debug("No commentary for %s", word)
    return None


def resolve_all(
    word: str, sources: Mapping[str, Mapping[str, str]]
) -> dict[str, str]:
    """Resolve ``word`` independently in every source.

    Returns:
        Source name -> commentary for the sources that resolved it, in
        the order of ``sources``.
    """
    found: dict[str, str] = {}
    for name, source in sources.items():
        text = resolve_commentary(word, source)
        if text:
            found[name] = text
    return found


def _lookup(source: Mapping[str, str], key: str) -> str | None:
    text = source.get(key)
    return text or None


def _resolve_avagraha(word: str, source: Mapping[str, str]) -> str | None:
    found = _lookup(source, word.replace(AVAGRAHA, SHORT_A))
    if found:
        return found

    parts = word.split(AVAGRAHA)
    if len(parts) != 2 or not all(parts):
        return None

    first, second = parts
    first_text = _lookup(source, first)
    # The avagraha marks an elided अ at the start of the second half
    second_text = _lookup(source, second) or _lookup(source, SHORT_A + second)
    if second_text and not first_text:
        for form in _unsandhied(first):
            restored = _lookup(source, form)
            if restored:
                return f"{restored} {second_text}"
    if first_text and second_text:
        return f"{first_text} {second_text}"
    return first_text or second_text


def _unsandhied(first: str) -> list[str]:
    """Spellings the part before an avagraha may have had before sandhi."""
    forms: list[str] = []
    # a + a contracts to ā
    if first.endswith(VOWEL_SIGN_AA) and len(first) > 1:
        forms.append(first[: -len(VOWEL_SIGN_AA)])
    forms.append(first + SHORT_A)
    return forms
