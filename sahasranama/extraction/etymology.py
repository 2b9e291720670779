"""Field parser for the free-form ETYMOLOGY prose of a name block."""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, Field

from sahasranama.models.entry import Dhatu

logger = logging.getLogger(__name__)

# "### 2. **compound**", "### **compound**" or "### compound"
COMPOUND_HEADER = re.compile(r"^###\s*(?:\d+\.\s*)?(?:\*\*(?P<bold>.+?)\*\*|(?P<plain>.+))$")
FIELD_LINE = re.compile(r"^[-*]?\s*\*\*(?P<label>[^*]+?)\*\*\s*:?\s*(?P<value>.*)$")
ROOT_VALUE = re.compile(
    r"√\s*(?P<syllable>[^\s(—–]+)"
    r"(?:\s*\([^)]*\))?"
    r"(?:\s*[—–-]\s*[\"“]?(?P<meaning>[^\"”(]+?)[\"”]?)?"
    r"\s*(?:\(Class\s*(?P<class>[^)]+)\))?\s*$",
    re.IGNORECASE,
)
MEANING_ARROW = re.compile(
    r"[\"“](?P<literal>[^\"”]+)[\"”]\s*→\s*\*\*(?P<contextual>[^*]+)\*\*"
)
_STEP_PREFIX = re.compile(r"^(?:[-*]\s+|\d+[.)]\s*)")

PLACEHOLDERS: frozenset[str] = frozenset({"", "—", "–", "-", "none", "n/a"})


def is_placeholder(value: str | None) -> bool:
    """Whether a cell or field value only stands in for a missing value."""
    return value is None or value.strip().strip("`").strip().lower() in PLACEHOLDERS


class ProseEtymology(BaseModel):
    """Fields stated in the prose for one compound; None means not stated."""

    breakdown: list[str] | None = None
    root: Dhatu | None = None
    prefixes: list[str] | None = None
    suffix: str | None = None
    sandhi_stated: bool = False
    sandhi: str | None = None
    formation: str | None = None
    grammar: str | None = None
    literal: str | None = None
    contextual: str | None = None
    extra: dict[str, str] = Field(default_factory=dict)


def parse_etymology(lines: list[str]) -> dict[str, ProseEtymology]:
    """Parse ``### <compound>`` subsections into per-compound fields.

    Lines before the first compound header and unrecognized labels are
    ignored (unrecognized labels are kept in ``extra``).
    """
    etymology: dict[str, ProseEtymology] = {}
    current: ProseEtymology | None = None
    i = 0

    while i < len(lines):
        line = lines[i].strip()
        i += 1

        header = COMPOUND_HEADER.match(line)
        if header:
            compound = (header.group("bold") or header.group("plain") or "").strip()
            current = ProseEtymology()
            etymology[compound] = current
            continue

        if current is None:
            continue

        match = FIELD_LINE.match(line)
        if not match:
            continue

        label = match.group("label").strip().lower()
        value = match.group("value").strip()

        if label.startswith("formation"):
            steps = [value] if value else []
            while i < len(lines):
                follow = lines[i].strip()
                if not follow:
                    if steps:
                        break
                    i += 1
                    continue
                if FIELD_LINE.match(follow) or follow.startswith("#"):
                    break
                steps.append(_STEP_PREFIX.sub("", follow).strip())
                i += 1
            steps = [s for s in steps if s]
            current.formation = " → ".join(steps) if steps else None
            continue

        _apply_field(current, label, value)

    return etymology


def _apply_field(current: ProseEtymology, label: str, value: str) -> None:
    if label.startswith("breakdown"):
        current.breakdown = split_components(value)
    elif label.startswith(("root", "dhātu", "dhatu")):
        current.root = parse_root(value)
    elif label.startswith(("upasarga", "prefix")):
        current.prefixes = [] if is_placeholder(value) else [
            p.strip() for p in value.split(",") if not is_placeholder(p)
        ]
    elif label.startswith(("suffix", "pratyaya")):
        current.suffix = None if is_placeholder(value) else value
    elif label.startswith("sandhi"):
        current.sandhi_stated = True
        current.sandhi = None if is_placeholder(value) else value
    elif label.startswith("grammar"):
        current.grammar = None if is_placeholder(value) else value
    elif label.startswith("literal"):
        current.literal = unquote(value) or None
    elif label.startswith("contextual"):
        current.contextual = unquote(value) or None
    elif label.startswith("meaning"):
        arrow = MEANING_ARROW.search(value)
        if arrow:
            current.literal = arrow.group("literal").strip()
            current.contextual = arrow.group("contextual").strip()
        elif value:
            current.literal = unquote(value) or None
    else:
        current.extra[label] = value


def parse_root(value: str) -> Dhatu | None:
    """Parse ``√bhā (भा) — "to shine" (Class 2P)``; None if no root is given."""
    match = ROOT_VALUE.search(value)
    if not match:
        if not is_placeholder(value):
            logger.debug("Unrecognized root line: %s", value)
        return None
    return Dhatu(
        syllable=match.group("syllable").strip(),
        meaning=(match.group("meaning") or "").strip(),
        class_=(match.group("class") or "").strip(),
    )


def split_components(value: str) -> list[str]:
    """Split ``a + b`` (optionally in backticks or quotes) into components."""
    cleaned = re.sub(r"[`“”\"']", "", value)
    return [part.strip() for part in cleaned.split("+") if not is_placeholder(part)]


def unquote(value: str) -> str:
    return value.strip().strip("\"“”").strip()
