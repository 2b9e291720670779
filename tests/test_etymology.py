"""Tests for the etymology prose parser."""

from sahasranama.extraction.etymology import (
    is_placeholder,
    parse_etymology,
    parse_root,
    split_components,
)

PROSE = [
    "Some introduction.",
    "### 1. **श्रीमहाराज्ञी**",
    "- **Breakdown**: `श्री + महत् + राज्ञी`",
    '- **Root (Dhātu)**: √rāj (राज्) — "to shine, to rule" (Class 1P)',
    "- **Upasarga(s)**: none",
    "- **Suffix**: -ī (feminine)",
    "- **Sandhi**: महत् + राज्ञी → महाराज्ञी",
    "- **Formation**:",
    "  1. √rāj → rājan",
    "  2. rājan + ī → rājñī",
    "- **Grammar**: feminine, nominative singular",
    '- **Meaning**: "great queen" → **Empress of the universe**',
    "### माता",
    "- **Sandhi**: —",
    "- **Formation**: √mā → mātṛ",
    "- **Note**: kept aside",
]


class TestParseEtymology:
    def test_full_compound(self) -> None:
        detail = parse_etymology(PROSE)["श्रीमहाराज्ञी"]
        assert detail.breakdown == ["श्री", "महत्", "राज्ञी"]
        assert detail.root is not None
        assert detail.root.syllable == "rāj"
        assert detail.root.meaning == "to shine, to rule"
        assert detail.root.class_ == "1P"
        assert detail.prefixes == []
        assert detail.suffix == "-ī (feminine)"
        assert detail.sandhi_stated
        assert detail.sandhi == "महत् + राज्ञी → महाराज्ञी"
        assert detail.formation == "√rāj → rājan → rājan + ī → rājñī"
        assert detail.grammar == "feminine, nominative singular"
        assert detail.literal == "great queen"
        assert detail.contextual == "Empress of the universe"

    def test_plain_header_and_placeholders(self) -> None:
        detail = parse_etymology(PROSE)["माता"]
        assert detail.sandhi_stated
        assert detail.sandhi is None
        assert detail.formation == "√mā → mātṛ"
        assert detail.extra == {"note": "kept aside"}
        assert detail.breakdown is None

    def test_lines_before_first_header_ignored(self) -> None:
        assert list(parse_etymology(PROSE)) == ["श्रीमहाराज्ञी", "माता"]

    def test_empty(self) -> None:
        assert parse_etymology([]) == {}


class TestFieldHelpers:
    def test_parse_root_without_class(self) -> None:
        root = parse_root('√bhā — "to shine"')
        assert root is not None
        assert (root.syllable, root.meaning, root.class_) == ("bhā", "to shine", "")

    def test_parse_root_missing(self) -> None:
        assert parse_root("—") is None
        assert parse_root("no root given") is None

    def test_split_components(self) -> None:
        assert split_components("“श्री” + “माता”") == ["श्री", "माता"]
        assert split_components("`अ + ब + `") == ["अ", "ब"]

    def test_is_placeholder(self) -> None:
        for value in (None, "", "—", "–", "-", "None", "N/A", "`—`"):
            assert is_placeholder(value)
        assert not is_placeholder("-ī (feminine)")
