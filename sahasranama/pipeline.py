"""End-to-end processing: annotate verses, extract the corpus, audit it."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from sahasranama.config import AppConfig
from sahasranama.extraction.extractor import NameEntryExtractor
from sahasranama.ingestion.loader import SourceLoader
from sahasranama.models.annotation import CommentarySource, WordAnnotation
from sahasranama.models.entry import NameEntry
from sahasranama.models.report import AuditReport
from sahasranama.reporting.audit import audit_corpus, render_report
from sahasranama.storage.corpus_store import (
    save_annotations,
    save_entries,
    split_corpus,
    write_json,
)
from sahasranama.text.annotator import WordAnnotator

logger = logging.getLogger(__name__)

ANNOTATIONS_FILE = "annotations.json"
NAMES_FILE = "names.json"
MEANINGS_FILE = "meanings.json"
COMMENTARIES_FILE = "commentaries.json"
REPORT_FILE = "missing-commentaries-report.txt"


class PipelineResult(BaseModel):
    """What one pipeline run produced."""

    annotations: list[WordAnnotation] = Field(default_factory=list)
    colophon: str | None = None
    entries: list[NameEntry] = Field(default_factory=list)
    report: AuditReport = Field(default_factory=AuditReport)
    written: list[Path] = Field(default_factory=list)


class Pipeline:
    """Runs every processing step against the configured paths.

    Args:
        config: The application configuration.
        loader: Optional SourceLoader, for substituting file access.
    """

    def __init__(self, config: AppConfig, loader: SourceLoader | None = None) -> None:
        self._config = config
        self._loader = loader or SourceLoader()
        self._annotator = WordAnnotator(config.annotation)
        self._extractor = NameEntryExtractor(config.extraction)

    def run(self) -> PipelineResult:
        """Run all steps and write their outputs.

        Raises:
            FileNotFoundError: If the verse text or the corpus is missing.
        """
        paths = self._config.paths
        output_dir = Path(paths.output_dir)
        result = PipelineResult()

        logger.info("Annotating verses from %s", paths.verses_path)
        lines = self._loader.load_verses(paths.verses_path)
        sources = self._loader.load_sources(paths.commentaries_dir, self._config.annotation.sources)
        result.annotations = self.annotate(lines, sources)
        result.colophon = self._annotator.find_colophon(lines)
        result.written.append(save_annotations(output_dir / ANNOTATIONS_FILE, result.annotations))

        logger.info("Extracting name entries from %s", paths.corpus_path)
        result.entries = self._extractor.extract(self._loader.load_corpus(paths.corpus_path))
        result.written.append(save_entries(output_dir / NAMES_FILE, result.entries))
        meanings, commentaries = split_corpus(result.entries)
        result.written.append(write_json(output_dir / MEANINGS_FILE, meanings))
        result.written.append(write_json(output_dir / COMMENTARIES_FILE, commentaries))

        result.report = audit_corpus(result.entries)
        report_path = output_dir / REPORT_FILE
        report_path.write_text(render_report(result.report), encoding="utf-8")
        result.written.append(report_path)

        logger.info("Pipeline wrote %d files to %s", len(result.written), output_dir)
        return result

    def annotate(
        self, lines: list[str], sources: list[CommentarySource]
    ) -> list[WordAnnotation]:
        """Annotate verse lines against already-loaded sources."""
        return self._annotator.annotate(lines, {s.name: s.entries for s in sources})
