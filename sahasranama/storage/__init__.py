"""JSON persistence for pipeline outputs."""

from sahasranama.storage.corpus_store import (
    load_entries,
    save_annotations,
    save_entries,
    split_corpus,
    write_json,
)

__all__ = ["load_entries", "save_annotations", "save_entries", "split_corpus", "write_json"]
