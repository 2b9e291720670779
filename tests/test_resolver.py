"""Tests for commentary resolution."""

from sahasranama.text.resolver import OM_GLOSS, resolve_all, resolve_commentary


class TestResolveCommentary:
    def test_exact_match(self) -> None:
        assert resolve_commentary("श्रीमाता", {"श्रीमाता": "M1"}) == "M1"

    def test_miss_returns_none(self) -> None:
        assert resolve_commentary("श्रीमाता", {"नमः": "M2"}) is None

    def test_om_special_case(self) -> None:
        assert resolve_commentary("ॐ", {}) == OM_GLOSS
        assert resolve_commentary("ओं", {"ओं": "other"}) == OM_GLOSS

    def test_avagraha_replaced_with_a(self) -> None:
        source = {"सर्वारुणाअनवद्याङ्गी": "joined"}
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) == "joined"

    def test_avagraha_combines_both_parts(self) -> None:
        source = {"सर्वारुणा": "A", "अनवद्याङ्गी": "B"}
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) == "A B"

    def test_avagraha_first_part_before_sandhi(self) -> None:
        source = {"सर्वारुण": "A", "अनवद्याङ्गी": "B"}
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) == "A B"

    def test_avagraha_first_part_with_a_appended(self) -> None:
        source = {"सर्वारुणाअ": "A", "अनवद्याङ्गी": "B"}
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) == "A B"

    def test_avagraha_restored_first_part_needs_second(self) -> None:
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", {"सर्वारुणाअ": "A"}) is None
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", {"सर्वारुण": "A"}) is None

    def test_avagraha_second_part_as_typed(self) -> None:
        source = {"सर्वारुणा": "A", "नवद्याङ्गी": "B"}
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) == "A B"

    def test_avagraha_single_part(self) -> None:
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", {"अनवद्याङ्गी": "B"}) == "B"
        assert resolve_commentary("सर्वारुणाऽनवद्याङ्गी", {"सर्वारुणा": "A"}) == "A"

    def test_hyphen_removed_from_query(self) -> None:
        source = {"चितिस्तत्पदलक्ष्यार्था": "X"}
        assert resolve_commentary("चितिस्तत्पद-लक्ष्यार्था", source) == "X"

    def test_hyphen_removed_from_keys(self) -> None:
        source = {"नित्या-षोडशिकारूपा": "Y"}
        assert resolve_commentary("नित्याषोडशिका-रूपा", source) == "Y"

    def test_first_matching_key_wins(self) -> None:
        source = {"अ-ब": "first", "अब-": "second"}
        assert resolve_commentary("-अब", source) == "first"

    def test_empty_text_is_a_miss(self) -> None:
        assert resolve_commentary("श्रीमाता", {"श्रीमाता": ""}) is None

    def test_deterministic(self) -> None:
        source = {"सर्वारुणा": "A", "अनवद्याङ्गी": "B"}
        results = {resolve_commentary("सर्वारुणाऽनवद्याङ्गी", source) for _ in range(5)}
        assert results == {"A B"}

    def test_source_not_mutated(self) -> None:
        source = {"चितिस्तत्पदलक्ष्यार्था": "X"}
        resolve_commentary("चितिस्तत्पद-लक्ष्यार्था", source)
        assert source == {"चितिस्तत्पदलक्ष्यार्था": "X"}


class TestResolveAll:
    def test_sources_resolved_independently(self) -> None:
        sources = {
            "Bhaskaraya": {"श्रीमाता": "B"},
            "V. Ravi": {},
            "Sanskrit Documents": {"श्रीमाता": "S"},
        }
        assert resolve_all("श्रीमाता", sources) == {
            "Bhaskaraya": "B",
            "Sanskrit Documents": "S",
        }

    def test_no_sources(self) -> None:
        assert resolve_all("श्रीमाता", {}) == {}
