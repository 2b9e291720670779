"""Verse text processing: tokenizing, breakdowns, commentary lookup."""

from sahasranama.text.annotator import WordAnnotator, format_components
from sahasranama.text.breakdown import extract_breakdowns
from sahasranama.text.resolver import resolve_all, resolve_commentary
from sahasranama.text.tokenizer import tokenize

__all__ = [
    "WordAnnotator",
    "extract_breakdowns",
    "format_components",
    "resolve_all",
    "resolve_commentary",
    "tokenize",
]
