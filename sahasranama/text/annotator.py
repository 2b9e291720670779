"""Multi-source word annotator for verse text."""

import logging
import re
from collections.abc import Mapping, Sequence

from sahasranama.config import AnnotationConfig
from sahasranama.models.annotation import WordAnnotation
from sahasranama.text.breakdown import extract_breakdowns
from sahasranama.text.resolver import resolve_all, resolve_commentary
from sahasranama.text.tokenizer import tokenize

logger = logging.getLogger(__name__)


def format_components(entries: Sequence[tuple[str, str]]) -> str:
    """Join ``(component, meaning)`` pairs as blank-line separated blocks.

    Each block is the component on one line and its meaning on the next.
    """
    return "\n\n".join(f"{component}\n{meaning}" for component, meaning in entries)


class WordAnnotator:
    """Attaches commentary from every source to each word of a verse text.

    Annotation strategy per word:
    1. Compound with a bracketed breakdown: each component is resolved
       on its own and the hits are combined; unresolved components are
       left out.
    2. Otherwise the bare word is resolved.
    Words no source resolves get no annotation.

    Args:
        config: AnnotationConfig holding the colophon pattern.
    """

    def __init__(self, config: AnnotationConfig) -> None:
        self._config = config
        self._colophon = re.compile(config.colophon_pattern)

    def annotate(
        self,
        lines: Sequence[str],
        sources: Mapping[str, Mapping[str, str]],
    ) -> list[WordAnnotation]:
        """Annotate every word of the given verse lines.

        Args:
            lines: Verse text split into display lines; blank lines
                separate verses and keep their index.
            sources: Source name -> (surface form -> commentary). Read only.

        Returns:
            One WordAnnotation per word that some source resolved, keyed by
            ``(line_index, position_index)``.
        """
        annotations: list[WordAnnotation] = []

        for line_index, line in enumerate(lines):
            if not line.strip() or self.is_colophon(line):
                continue
            annotations.extend(self._annotate_line(line_index, line, sources))

        logger.info(
            "Annotated %d words across %d lines from %d sources",
            len(annotations),
            len(lines),
            len(sources),
        )
        return annotations

    def is_colophon(self, line: str) -> bool:
        """Whether ``line`` is the concluding colophon."""
        return bool(self._colophon.search(line))

    def find_colophon(self, lines: Sequence[str]) -> str | None:
        """Return the colophon line, if the text has one."""
        for line in lines:
            if self.is_colophon(line):
                return line
        return None

    def _annotate_line(
        self,
        line_index: int,
        line: str,
        sources: Mapping[str, Mapping[str, str]],
    ) -> list[WordAnnotation]:
        cleaned, breakdowns = extract_breakdowns(line)
        annotations: list[WordAnnotation] = []
        position = 0

        for segment_index, segment in enumerate(tokenize(cleaned)):
            if not segment.is_word:
                continue

            components = breakdowns.get(segment.text)
            if components:
                found = self._resolve_components(components, sources)
            else:
                found = resolve_all(segment.text, sources)

            if found:
                annotations.append(
                    WordAnnotation(
                        id=f"word-{line_index}-{position}",
                        surface_word=segment.text,
                        line_index=line_index,
                        position_index=position,
                        segment_index=segment_index,
                        breakdown_components=components,
                        commentary_by_source=found,
                    )
                )
            else:
                logger.debug("No commentary in any source for %s", segment.text)
            position += 1

        return annotations

    def _resolve_components(
        self, components: list[str], sources: Mapping[str, Mapping[str, str]]
    ) -> dict[str, str]:
        found: dict[str, str] = {}
        for name, source in sources.items():
            entries: list[tuple[str, str]] = []
            for component in components:
                text = resolve_commentary(component, source)
                if text:
                    entries.append((component, text))
            if entries:
                found[name] = format_components(entries)
        return found
