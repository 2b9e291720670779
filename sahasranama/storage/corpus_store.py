"""JSON persistence for extracted entries and word annotations."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from sahasranama.models.annotation import WordAnnotation
from sahasranama.models.entry import NameEntry


def write_json(path: str | Path, data: Any) -> Path:
    """Write ``data`` as indented UTF-8 JSON, creating parent directories.

    Args:
        path: Destination file.
        data: JSON-serializable data.

    Returns:
        The written path.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return target


def save_entries(path: str | Path, entries: Sequence[NameEntry]) -> Path:
    """Write the full corpus as a JSON array."""
    return write_json(path, [entry.model_dump(mode="json", by_alias=True) for entry in entries])


def load_entries(path: str | Path) -> list[NameEntry]:
    """Read a corpus written by :func:`save_entries`."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return [NameEntry.model_validate(item) for item in data]


def save_annotations(path: str | Path, annotations: Sequence[WordAnnotation]) -> Path:
    """Write word annotations as an object keyed by annotation id."""
    return write_json(path, {a.id: a.model_dump(mode="json") for a in annotations})


def split_corpus(
    entries: Sequence[NameEntry],
) -> tuple[list[dict[str, Any]], dict[str, dict[str, Any]]]:
    """Split entries into root-breakdown meanings and per-name commentaries.

    Returns:
        A list of ``{entry_number, name, root_breakdown}`` records and a map
        of Devanagari name -> that entry's commentaries. Entries without a
        Devanagari name are left out of the commentaries map.
    """
    meanings: list[dict[str, Any]] = []
    commentaries: dict[str, dict[str, Any]] = {}

    for entry in entries:
        meanings.append(
            {
                "entry_number": entry.entry_number,
                "name": entry.name.model_dump(mode="json"),
                "root_breakdown": [row.model_dump(mode="json") for row in entry.root_breakdown],
            }
        )
        if entry.name.devanagari:
            commentaries[entry.name.devanagari] = {
                key: commentary.model_dump(mode="json")
                for key, commentary in entry.commentaries.items()
            }

    return meanings, commentaries
