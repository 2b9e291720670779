"""Best-effort extractor turning the markdown name corpus into NameEntry records."""

import logging
import re
import unicodedata

from sahasranama.config import ExtractionConfig, SourceMetadata
from sahasranama.extraction.etymology import (
    ProseEtymology,
    is_placeholder,
    parse_etymology,
    split_components,
)
from sahasranama.extraction.markdown import (
    Section,
    SectionKind,
    parse_table,
    scan_sections,
    split_blocks,
    strip_blockquote,
    table_cell,
)
from sahasranama.models.entry import (
    Commentary,
    Composition,
    DataQualityIssue,
    Dhatu,
    EtymologyDetail,
    IssueKind,
    Meaning,
    NameEntry,
    NameForm,
    RootBreakdownRow,
    WordMeaning,
)
from sahasranama.text.tokenizer import strip_dandas

logger = logging.getLogger(__name__)

HEADER_NUMBER = re.compile(r"^#\s+NAME\s+(\d+)", re.IGNORECASE)
MARKER_NUMBER = re.compile(r"॥\s*(\d+)\s*॥")
IAST_START = re.compile(r"^[a-zA-Zāīūṛṝḷēōṃḥśṣṇṭḍñṅ]", re.IGNORECASE)
WORD_BY_WORD = re.compile(r"^\*\*Word-by-word meaning\*\*", re.IGNORECASE)
BOLD_GLOSS = re.compile(r"^[*-]\s+\*\*(?P<word>.+?)\*\*\s*[—–-]\s*(?P<meaning>.+)$")
PLAIN_GLOSS = re.compile(r"^[*-]\s+(?P<word>[^—–-]+)[—–-]\s*(?P<meaning>.+)$")
BULLET = re.compile(r"^[*-]\s+")
NAMED_QUOTE_PREFIX = re.compile(r"^\*\*[^*]+\*\*\s*[—–-]\s*")


def source_key(label: str) -> str:
    """Normalize a commentary label to a key: no diacritics, case or spacing.

    ``"BHĀSKARARĀYA"`` -> ``"bhaskararaya"``, ``"V. Ravi"`` -> ``"vravi"``.
    """
    decomposed = unicodedata.normalize("NFKD", label)
    ascii_only = "".join(c for c in decomposed if not unicodedata.combining(c))
    return re.sub(r"[\W_]+", "", ascii_only.lower())


class NameEntryExtractor:
    """Parses a markdown corpus of ``# NAME <n>`` blocks into NameEntry records.

    Each block is scanned once for its section headers and each section
    is parsed from its slice of lines. A missing or malformed section
    leaves the matching field at its default and never stops the rest of
    the block or corpus from being processed. Inconsistencies are kept on
    the entry as DataQualityIssue records.

    Args:
        config: ExtractionConfig with the known commentary sources.
    """

    def __init__(self, config: ExtractionConfig) -> None:
        self._config = config

    def extract(self, corpus: str) -> list[NameEntry]:
        """Extract every block of a corpus, ordered by entry number.

        Entries without a number sort as if numbered 0; ties keep file
        order.

        Args:
            corpus: The full markdown text.

        Returns:
            NameEntry records sorted by ``entry_number``.
        """
        preamble, blocks = split_blocks(corpus.splitlines())
        if any(line.strip() for line in preamble):
            logger.debug("Ignoring %d preamble lines before the first block", len(preamble))

        entries = [self.parse_block(block) for block in blocks]
        entries.sort(key=lambda e: e.entry_number or 0)

        logger.info("Extracted %d name entries", len(entries))
        return entries

    def parse_block(self, block: list[str]) -> NameEntry:
        """Parse one ``# NAME <n>`` block.

        Args:
            block: The block's lines, header first.

        Returns:
            The extracted NameEntry.
        """
        issues: list[DataQualityIssue] = []
        header = HEADER_NUMBER.match(block[0].strip()) if block else None
        header_number = int(header.group(1)) if header else None

        sections = scan_sections(block) if block else []
        by_kind: dict[SectionKind, Section] = {}
        for section in sections:
            by_kind.setdefault(section.kind, section)

        name_section = by_kind.get(SectionKind.NAME)
        name, marker_number = self._parse_name(name_section.lines if name_section else [])

        entry_number = marker_number if marker_number is not None else header_number
        if entry_number is None:
            title = block[0].strip() if block else ""
            issues.append(DataQualityIssue(kind=IssueKind.MISSING_NUMBER, detail=title))
        elif marker_number is not None and header_number not in (None, marker_number):
            issues.append(
                DataQualityIssue(
                    kind=IssueKind.NUMBER_MISMATCH,
                    detail=f"header {header_number}, verse marker {marker_number}",
                )
            )

        root_breakdown: list[RootBreakdownRow] = []
        if SectionKind.ROOT_BREAKDOWN in by_kind:
            root_breakdown = self._parse_root_breakdown(by_kind[SectionKind.ROOT_BREAKDOWN].lines)
        else:
            issues.append(DataQualityIssue(kind=IssueKind.MISSING_SECTION, detail="ROOT BREAKDOWN"))

        prose: dict[str, ProseEtymology] = {}
        if SectionKind.ETYMOLOGY in by_kind:
            prose = parse_etymology(by_kind[SectionKind.ETYMOLOGY].lines)
        etymology = self._merge_etymology(root_breakdown, prose)
        for row in root_breakdown:
            if row.compound not in prose:
                issues.append(
                    DataQualityIssue(kind=IssueKind.MISSING_ETYMOLOGY, detail=row.compound)
                )

        if SectionKind.COMPOSITIONS in by_kind:
            composition = self._parse_composition(by_kind[SectionKind.COMPOSITIONS].lines)
        else:
            composition = Composition()
            issues.append(DataQualityIssue(kind=IssueKind.MISSING_SECTION, detail="COMPOSITIONS"))

        commentaries: dict[str, Commentary] = {}
        for section in sections:
            if section.kind in (SectionKind.COMMENTARY, SectionKind.COMMENTARIES):
                key, commentary = self._parse_commentary(section)
                commentaries[key] = commentary

        covered = {row.compound for row in root_breakdown}
        if covered:
            for token in name.tokens:
                if token not in covered:
                    issues.append(DataQualityIssue(kind=IssueKind.UNCOVERED_TOKEN, detail=token))

        for issue in issues:
            logger.warning("NAME %s: %s %s", entry_number, issue.kind.value, issue.detail)

        return NameEntry(
            entry_number=entry_number,
            header_number=header_number,
            name=name,
            root_breakdown=root_breakdown,
            etymology=etymology,
            composition=composition,
            commentaries=commentaries,
            issues=issues,
        )

    def _parse_name(self, lines: list[str]) -> tuple[NameForm, int | None]:
        """Read the Devanagari and IAST forms and the verse-marker number."""
        devanagari = ""
        iast = ""
        number: int | None = None

        for raw in lines:
            line = strip_blockquote(raw).strip()
            if not line:
                continue

            marker = MARKER_NUMBER.search(line)
            if marker:
                number = int(marker.group(1))
                continue

            if IAST_START.match(line):
                if not iast:
                    iast = strip_dandas(line)
            elif not devanagari and not line.startswith(("॥", "|")):
                devanagari = strip_dandas(line)

        tokens = [t for t in (strip_dandas(p) for p in devanagari.split()) if t]
        return NameForm(devanagari=devanagari, iast=iast, tokens=tokens), number

    def _parse_root_breakdown(self, lines: list[str]) -> list[RootBreakdownRow]:
        rows: list[RootBreakdownRow] = []
        for record in parse_table(lines):
            compound = table_cell(record, "Compound")
            if not compound:
                continue
            sandhi = table_cell(record, "Sandhi")
            grammar = table_cell(record, "Grammar")
            rows.append(
                RootBreakdownRow(
                    compound=compound,
                    sandhi=None if is_placeholder(sandhi) else sandhi,
                    components=split_components(table_cell(record, "Components")),
                    grammar=None if is_placeholder(grammar) else grammar,
                    meaning=Meaning(
                        literal=_cell_text(table_cell(record, "Literal", "Literal Meaning")),
                        contextual=_cell_text(
                            table_cell(record, "Contextual", "Contextual Meaning")
                        ),
                    ),
                )
            )
        return rows

    def _merge_etymology(
        self,
        root_breakdown: list[RootBreakdownRow],
        prose: dict[str, ProseEtymology],
    ) -> dict[str, EtymologyDetail]:
        """Merge prose fields over table cells; prose wins when both are present."""
        etymology: dict[str, EtymologyDetail] = {}
        table = {row.compound: row for row in root_breakdown}

        for compound in list(table) + [c for c in prose if c not in table]:
            row = table.get(compound)
            detail = prose.get(compound, ProseEtymology())
            etymology[compound] = EtymologyDetail(
                breakdown=detail.breakdown or (row.components if row else []),
                root=detail.root or Dhatu(),
                prefixes=detail.prefixes or [],
                suffix=detail.suffix or "",
                sandhi=detail.sandhi if detail.sandhi_stated else (row.sandhi if row else None),
                formation=detail.formation or "",
                grammar=detail.grammar or (row.grammar if row and row.grammar else ""),
                meaning=Meaning(
                    literal=detail.literal or (row.meaning.literal if row else ""),
                    contextual=detail.contextual or (row.meaning.contextual if row else ""),
                ),
            )
        return etymology

    def _parse_composition(self, lines: list[str]) -> Composition:
        marker = next(
            (i for i, line in enumerate(lines) if WORD_BY_WORD.match(line.strip())),
            None,
        )
        summary_lines = lines if marker is None else lines[:marker]
        gloss_lines = [] if marker is None else lines[marker + 1 :]

        prose = [
            line.strip()
            for line in summary_lines
            if line.strip() and not line.strip().startswith(("*", "#", "-", ">", "|"))
        ]
        summary = re.sub(r"\s{2,}", " ", " ".join(prose)).strip()

        glosses: list[WordMeaning] = []
        for line in gloss_lines:
            stripped = line.strip()
            if not BULLET.match(stripped):
                continue
            match = BOLD_GLOSS.match(stripped) or PLAIN_GLOSS.match(stripped)
            if match:
                glosses.append(
                    WordMeaning(
                        compound=match.group("word").strip(),
                        meaning=match.group("meaning").strip(),
                    )
                )
            else:
                word = BULLET.sub("", stripped).strip("* ").strip()
                glosses.append(WordMeaning(compound=word))

        return Composition(summary=summary, word_by_word=glosses)

    def _parse_commentary(self, section: Section) -> tuple[str, Commentary]:
        """Build one commentary from a COMMENTARY or COMMENTARIES section."""
        label = section.label
        metadata = self._source_metadata(label)

        if section.kind is SectionKind.COMMENTARIES:
            # Only blockquote lines count; "**name** —" prefixes are dropped.
            quoted = [
                NAMED_QUOTE_PREFIX.sub("", strip_blockquote(line).strip()).strip()
                for line in section.lines
                if line.strip().startswith(">")
            ]
            text = " ".join(q for q in quoted if q)
        else:
            text = "\n".join(strip_blockquote(line) for line in section.lines).strip()

        if text == self._config.placeholder_commentary:
            text = ""

        commentary = Commentary(
            author=metadata.author,
            period=metadata.period,
            source=metadata.source or label,
            text=text,
        )
        return source_key(label), commentary

    def _source_metadata(self, label: str) -> SourceMetadata:
        known = self._config.known_sources.get(source_key(label))
        if known:
            return known
        return SourceMetadata(author=label, period="Unknown")


def _cell_text(value: str) -> str:
    return "" if is_placeholder(value) else value.strip().strip("\"“”").strip()
