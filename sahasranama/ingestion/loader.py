"""Reads verse text, commentary sources and the markdown corpus from disk."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import chardet

from sahasranama.ingestion.commentary_parser import parse_commentary_text
from sahasranama.models.annotation import CommentarySource

logger = logging.getLogger(__name__)

# Supported commentary file extensions mapped to format identifiers
SUPPORTED_FORMATS: dict[str, str] = {
    ".json": "json",
    ".txt": "txt",
}


class SourceLoader:
    """Loads the pipeline's text inputs.

    A missing primary input is fatal and raises FileNotFoundError; text is
    decoded as UTF-8 first with chardet detection as the fallback.
    """

    def load_verses(self, file_path: str | Path) -> list[str]:
        """Read the verse text as display lines.

        Raises:
            FileNotFoundError: If file_path does not exist.
        """
        return self.read_text(self._require(file_path)).splitlines()

    def load_corpus(self, file_path: str | Path) -> str:
        """Read the markdown name corpus.

        Raises:
            FileNotFoundError: If file_path does not exist.
        """
        return self.read_text(self._require(file_path))

    def load_source(self, name: str, file_path: str | Path) -> CommentarySource:
        """Load one commentary source from a JSON object or a numbered text file.

        Args:
            name: Display name of the source.
            file_path: Path to a ``.json`` or ``.txt`` file.

        Returns:
            The CommentarySource.

        Raises:
            FileNotFoundError: If file_path does not exist.
            ValueError: If the format is unsupported or the JSON is not an
                object of strings.
        """
        path = self._require(file_path)
        file_format = self._detect_format(path)
        raw_text = self.read_text(path)

        if file_format == "json":
            data = json.loads(raw_text) if raw_text.strip() else {}
            if not isinstance(data, dict):
                raise ValueError(f"Commentary JSON must be an object: {path}")
            entries = {
                str(k): v for k, v in data.items() if isinstance(v, str) and v.strip()
            }
        else:
            entries = parse_commentary_text(raw_text)

        logger.info("Loaded %d entries for source '%s' from %s", len(entries), name, path)
        return CommentarySource(name=name, entries=entries)

    def load_sources(
        self, directory: str | Path, sources: Mapping[str, str]
    ) -> list[CommentarySource]:
        """Load every configured source found under ``directory``.

        For each ``display name -> file stem`` pair the ``.json`` file is
        preferred over the ``.txt`` one. A source with no file is skipped
        with a warning so the others still load.

        Args:
            directory: Directory holding the commentary files.
            sources: Display name -> file stem, in display order.

        Returns:
            The loaded sources, in configured order.
        """
        base = Path(directory)
        loaded: list[CommentarySource] = []
        for name, stem in sources.items():
            candidates = [base / f"{stem}{ext}" for ext in SUPPORTED_FORMATS]
            path = next((p for p in candidates if p.exists()), None)
            if path is None:
                logger.warning("No commentary file for source '%s' in %s", name, base)
                continue
            loaded.append(self.load_source(name, path))
        return loaded

    def read_text(self, file_path: Path) -> str:
        """Read a text file with encoding detection.

        Tries UTF-8 first, then uses chardet for fallback detection.

        Args:
            file_path: Path to the text file.

        Returns:
            The file content as a string.
        """
        try:
            return file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            pass

        raw_bytes = file_path.read_bytes()
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding") or "utf-8"
        confidence = detected.get("confidence") or 0

        if confidence < 0.7:
            logger.warning(
                "Low confidence encoding detection for %s: %s (%.0f%%)",
                file_path,
                encoding,
                confidence * 100,
            )

        try:
            return raw_bytes.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.error("Failed to decode file: %s", file_path)
            return raw_bytes.decode("utf-8", errors="replace")

    def _require(self, file_path: str | Path) -> Path:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path

    def _detect_format(self, file_path: Path) -> str:
        """Determine file format from extension.

        Raises:
            ValueError: If extension is not supported.
        """
        ext = file_path.suffix.lower()
        if ext not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported file format: '{ext}'. "
                f"Supported: {', '.join(SUPPORTED_FORMATS.keys())}"
            )
        return SUPPORTED_FORMATS[ext]
