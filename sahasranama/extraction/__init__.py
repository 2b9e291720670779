"""Markdown corpus extraction: section scanning and NameEntry parsing."""

from sahasranama.extraction.extractor import NameEntryExtractor, source_key
from sahasranama.extraction.markdown import SectionKind, parse_table, scan_sections

__all__ = ["NameEntryExtractor", "SectionKind", "parse_table", "scan_sections", "source_key"]
