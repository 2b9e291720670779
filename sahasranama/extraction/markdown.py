"""Section scanner and table reader for the per-name markdown corpus."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field


class SectionKind(str, Enum):
    """Sections a ``# NAME`` block can contain, in their usual order."""

    NAME = "name"
    ROOT_BREAKDOWN = "root_breakdown"
    ETYMOLOGY = "etymology"
    COMPOSITIONS = "compositions"
    COMMENTARY = "commentary"
    COMMENTARIES = "commentaries"
    UNKNOWN = "unknown"


# Matched against stripped lines, first match wins.
SECTION_PATTERNS: dict[SectionKind, re.Pattern[str]] = {
    SectionKind.ROOT_BREAKDOWN: re.compile(
        r"^##\s+ROOT\s+BREAKDOWN\b", re.IGNORECASE
    ),
    SectionKind.ETYMOLOGY: re.compile(
        r"^##\s+ETYMOLOGY\s*(?:\((?P<label>[^)]*)\))?", re.IGNORECASE
    ),
    SectionKind.COMPOSITIONS: re.compile(
        r"^##\s+COMPOSITIONS?\b", re.IGNORECASE
    ),
    SectionKind.COMMENTARIES: re.compile(
        r"^##\s+COMMENTARIES\s*\((?P<label>[^)]+)\)", re.IGNORECASE
    ),
    SectionKind.COMMENTARY: re.compile(
        r"^##\s+COMMENTARY\s*\((?P<label>[^)]+)\)", re.IGNORECASE
    ),
}

SECTION_HEADER = re.compile(r"^##\s")
BLOCK_HEADER = re.compile(r"^#\s+NAME\b", re.IGNORECASE)
_RULE = re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$")
_TABLE_SEPARATOR = re.compile(r"^\|\s*:?-+")


class Section(BaseModel):
    """A slice of a block's lines between two section headers.

    ``start`` is the header line (or 1 for the name section) and ``end``
    is exclusive. ``lines`` excludes the header itself.
    """

    kind: SectionKind
    label: str
    start: int
    end: int
    lines: list[str] = Field(default_factory=list)


def split_blocks(lines: list[str]) -> tuple[list[str], list[list[str]]]:
    """Split a corpus into ``# NAME`` blocks.

    Returns:
        The preamble lines before the first block, and the blocks, each
        starting with its header line.
    """
    preamble: list[str] = []
    blocks: list[list[str]] = []
    current: list[str] | None = None

    for line in lines:
        if BLOCK_HEADER.match(line):
            current = [line]
            blocks.append(current)
        elif current is None:
            preamble.append(line)
        else:
            current.append(line)

    return preamble, blocks


def scan_sections(block: list[str]) -> list[Section]:
    """Locate section headers in a block and slice the lines between them.

    The first section is always the NAME section (the lines between the
    block header and the first ``##`` header). Unrecognized ``##``
    headers produce UNKNOWN sections so they still bound their
    neighbours.
    """
    headers: list[tuple[int, SectionKind, str]] = []
    for index, line in enumerate(block):
        if index == 0:
            continue
        stripped = line.strip()
        if not SECTION_HEADER.match(stripped):
            continue
        kind, label = classify_header(stripped)
        headers.append((index, kind, label))

    sections: list[Section] = []
    name_end = headers[0][0] if headers else len(block)
    sections.append(
        Section(
            kind=SectionKind.NAME,
            label="",
            start=1,
            end=name_end,
            lines=clean_section_lines(block[1:name_end]),
        )
    )

    for i, (index, kind, label) in enumerate(headers):
        end = headers[i + 1][0] if i + 1 < len(headers) else len(block)
        sections.append(
            Section(
                kind=kind,
                label=label,
                start=index,
                end=end,
                lines=clean_section_lines(block[index + 1 : end]),
            )
        )

    return sections


def classify_header(header: str) -> tuple[SectionKind, str]:
    """Classify a stripped ``##`` header line and return its label."""
    for kind, pattern in SECTION_PATTERNS.items():
        match = pattern.match(header)
        if match:
            label = match.groupdict().get("label") or ""
            return kind, label.strip()
    return SectionKind.UNKNOWN, header.lstrip("#").strip()


def clean_section_lines(lines: list[str]) -> list[str]:
    """Drop horizontal rules and trim blank lines from both ends."""
    kept = [line for line in lines if not _RULE.match(line.strip())]
    return trim_empty_edges(kept)


def trim_empty_edges(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def parse_table(lines: list[str]) -> list[dict[str, str]]:
    """Read the first markdown table in ``lines`` into row dictionaries.

    Header cells become keys (``col_<n>`` when blank); separator rows are
    skipped and missing cells read as empty strings. Reading stops at the
    first non-table line after the table starts.
    """
    table_lines: list[str] = []
    for line in lines:
        stripped = line.strip()
        if stripped.startswith("|"):
            table_lines.append(stripped)
        elif table_lines:
            break

    rows = [line for line in table_lines if not _TABLE_SEPARATOR.match(line)]
    if not rows:
        return []

    headers = _split_row(rows[0])
    keys = [header or f"col_{i + 1}" for i, header in enumerate(headers)]
    records: list[dict[str, str]] = []
    for row in rows[1:]:
        cells = _split_row(row)
        records.append({key: cells[i] if i < len(cells) else "" for i, key in enumerate(keys)})
    return records


def table_cell(row: dict[str, str], *names: str) -> str:
    """Return the first non-empty cell among ``names``, case-insensitively."""
    lowered = {key.strip().lower(): value for key, value in row.items()}
    for name in names:
        value = lowered.get(name.lower(), "")
        if value.strip():
            return value.strip()
    return ""


def strip_blockquote(line: str) -> str:
    return re.sub(r"^\s*>\s?", "", line)


def _split_row(row: str) -> list[str]:
    inner = row[1:-1] if row.endswith("|") else row[1:]
    return [cell.strip() for cell in inner.split("|")]
