"""Corpus reporting."""

from sahasranama.reporting.audit import audit_corpus, render_report

__all__ = ["audit_corpus", "render_report"]
