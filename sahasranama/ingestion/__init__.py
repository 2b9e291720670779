"""Input ingestion: file loading and commentary text parsing."""

from sahasranama.ingestion.commentary_parser import devanagari_to_int, parse_commentary_text
from sahasranama.ingestion.loader import SourceLoader

__all__ = ["SourceLoader", "devanagari_to_int", "parse_commentary_text"]
