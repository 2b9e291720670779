"""Data models for the Sahasranama text pipeline."""

from sahasranama.models.annotation import CommentarySource, WordAnnotation
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
from sahasranama.models.report import AuditReport, EntryIssues, MissingCommentary
from sahasranama.models.segment import BreakdownMap, Segment, SegmentKind

__all__ = [
    "AuditReport",
    "BreakdownMap",
    "Commentary",
    "CommentarySource",
    "Composition",
    "DataQualityIssue",
    "Dhatu",
    "EntryIssues",
    "EtymologyDetail",
    "IssueKind",
    "Meaning",
    "MissingCommentary",
    "NameEntry",
    "NameForm",
    "RootBreakdownRow",
    "Segment",
    "SegmentKind",
    "WordAnnotation",
    "WordMeaning",
]
