"""Tests for the missing-commentary audit and its text report."""

from sahasranama.models.entry import (
    Commentary,
    DataQualityIssue,
    IssueKind,
    NameEntry,
    NameForm,
)
from sahasranama.reporting.audit import MISSING_DEVANAGARI, audit_corpus, render_report


def _entry(
    number: int | None,
    devanagari: str,
    texts: dict[str, str] | None = None,
    issues: list[DataQualityIssue] | None = None,
) -> NameEntry:
    return NameEntry(
        entry_number=number,
        name=NameForm(devanagari=devanagari, iast="iast" if devanagari else ""),
        commentaries={
            key: Commentary(author=key, text=text) for key, text in (texts or {}).items()
        },
        issues=issues or [],
    )


class TestAuditCorpus:
    def test_entry_with_one_commentary_is_not_missing(self) -> None:
        report = audit_corpus([_entry(1, "श्रीमाता", {"a": "", "b": "text"})])
        assert report.missing == []
        assert report.with_commentary == 1

    def test_all_sources_empty(self) -> None:
        report = audit_corpus([_entry(2, "श्रीमहाराज्ञी", {"a": "", "b": "  "})])
        (missing,) = report.missing
        assert missing.entry_number == 2
        assert missing.empty_sources == ["a", "b"]

    def test_no_commentary_section(self) -> None:
        report = audit_corpus([_entry(3, "श्रीमत्सिंहासनेश्वरी")])
        assert report.missing[0].empty_sources == []

    def test_sorted_and_counted(self) -> None:
        entries = [
            _entry(3, "ग"),
            _entry(None, ""),
            _entry(1, "क"),
            _entry(2, "क", {"a": "x"}),
        ]
        report = audit_corpus(entries)
        assert [m.entry_number for m in report.missing] == [None, 1, 3]
        assert report.missing[0].devanagari == MISSING_DEVANAGARI
        assert report.total_entries == 4
        assert report.unique_names == 2

    def test_issues_collected(self) -> None:
        issue = DataQualityIssue(kind=IssueKind.NUMBER_MISMATCH, detail="header 5, verse marker 6")
        report = audit_corpus([_entry(6, "क", {"a": "x"}, [issue])])
        assert report.issues[0].issues == [issue]


class TestRenderReport:
    def test_report_lines(self) -> None:
        report = audit_corpus(
            [
                _entry(1, "श्रीमाता", {"a": "x"}),
                _entry(2, "श्रीमहाराज्ञी", {"sanskritdocuments": ""}),
                _entry(
                    3,
                    "श्रीमत्सिंहासनेश्वरी",
                    issues=[DataQualityIssue(kind=IssueKind.MISSING_SECTION, detail="COMPOSITIONS")],
                ),
            ]
        )
        text = render_report(report)

        assert text.startswith("NAMES MISSING COMMENTARIES\n")
        assert "Total names checked: 3" in text
        assert "Names missing commentaries: 2" in text
        assert "  - No commentary section: 1" in text
        assert "  - All sources empty: 1" in text
        assert "2. श्रीमहाराज्ञी (iast) [All sources empty: sanskritdocuments]" in text
        assert "3. श्रीमत्सिंहासनेश्वरी (iast) [No commentary section]" in text
        assert "DATA-QUALITY ISSUES:" in text
        assert "3. श्रीमत्सिंहासनेश्वरी [missing_section]: COMPOSITIONS" in text

    def test_nothing_missing(self) -> None:
        text = render_report(audit_corpus([_entry(1, "श्रीमाता", {"a": "x"})]))
        assert "All names have at least one non-empty commentary!" in text
        assert "DATA-QUALITY ISSUES" not in text

    def test_missing_number_rendered(self) -> None:
        text = render_report(audit_corpus([_entry(None, "क")]))
        assert "N/A. क (iast) [No commentary section]" in text
