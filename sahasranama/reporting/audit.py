"""Audit of an extracted corpus: missing commentaries and data-quality issues."""

import logging
from collections.abc import Sequence

from sahasranama.models.entry import NameEntry
from sahasranama.models.report import AuditReport, EntryIssues, MissingCommentary

logger = logging.getLogger(__name__)

MISSING_DEVANAGARI = "(missing devanagari)"


def audit_corpus(entries: Sequence[NameEntry]) -> AuditReport:
    """List entries without any non-empty commentary and collect their issues.

    Args:
        entries: Extracted NameEntry records.

    Returns:
        An AuditReport with both lists sorted by entry number (missing
        numbers count as 0).
    """
    missing: list[MissingCommentary] = []
    issues: list[EntryIssues] = []

    for entry in entries:
        devanagari = entry.name.devanagari or MISSING_DEVANAGARI
        if not entry.has_commentary:
            missing.append(
                MissingCommentary(
                    entry_number=entry.entry_number,
                    devanagari=devanagari,
                    iast=entry.name.iast,
                    empty_sources=list(entry.commentaries),
                )
            )
        if entry.issues:
            issues.append(
                EntryIssues(
                    entry_number=entry.entry_number,
                    devanagari=devanagari,
                    issues=list(entry.issues),
                )
            )

    missing.sort(key=lambda m: m.entry_number or 0)
    issues.sort(key=lambda i: i.entry_number or 0)

    report = AuditReport(
        total_entries=len(entries),
        unique_names=len({e.name.devanagari for e in entries if e.name.devanagari}),
        missing=missing,
        issues=issues,
    )
    logger.info(
        "Audited %d entries: %d missing commentary, %d with data-quality issues",
        report.total_entries,
        len(missing),
        len(issues),
    )
    return report


def render_report(report: AuditReport) -> str:
    """Render an AuditReport as the plain-text missing-commentaries report."""
    no_section = [m for m in report.missing if not m.empty_sources]
    lines = [
        "NAMES MISSING COMMENTARIES",
        "==========================",
        "",
        f"Total names checked: {report.total_entries}",
        f"Unique devanagari names: {report.unique_names}",
        f"Names with commentaries: {report.with_commentary}",
        f"Names missing commentaries: {len(report.missing)}",
        f"  - No commentary section: {len(no_section)}",
        f"  - All sources empty: {len(report.missing) - len(no_section)}",
        "",
        "DETAILED LIST:",
        "-------------",
        "",
    ]

    if not report.missing:
        lines.append("All names have at least one non-empty commentary!")
    for item in report.missing:
        line = f"{_number(item.entry_number)}. {item.devanagari}"
        if item.iast:
            line += f" ({item.iast})"
        if item.empty_sources:
            line += f" [All sources empty: {', '.join(item.empty_sources)}]"
        else:
            line += " [No commentary section]"
        lines.append(line)

    if report.issues:
        lines += ["", "DATA-QUALITY ISSUES:", "--------------------", ""]
        for entry in report.issues:
            for issue in entry.issues:
                detail = f": {issue.detail}" if issue.detail else ""
                lines.append(
                    f"{_number(entry.entry_number)}. {entry.devanagari} "
                    f"[{issue.kind.value}]{detail}"
                )

    return "\n".join(lines) + "\n"


def _number(value: int | None) -> str:
    return "N/A" if value is None else str(value)
