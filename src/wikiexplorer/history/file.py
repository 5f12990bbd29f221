"""Recent searches persisted as a JSON list on disk."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from wikiexplorer.history.base import DEFAULT_CAPACITY, record_term, remove_indices

logger = logging.getLogger(__name__)


class JsonFileSearchHistoryStore:
    """Search history stored in a JSON file.

    The file holds a plain list of strings, most recent first. A missing
    file reads as an empty history; an unreadable or malformed one is
    logged and also treated as empty, and is overwritten on the next write.

    Args:
        path: Location of the JSON file. Parent directories are created on
            first write.
        capacity: Maximum number of terms retained.
    """

    def __init__(self, path: Path | str, *, capacity: int = DEFAULT_CAPACITY) -> None:
        self._path = Path(path)
        self._capacity = capacity

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
            with self._path.open(encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read search history from {self._path}: {e}")
            return []

        if not isinstance(raw, list):
            logger.warning(f"Ignoring malformed search history in {self._path}")
            return []
        return [item for item in raw if isinstance(item, str)][: self._capacity]

    def record(self, term: str) -> None:
        self._write(record_term(self.load(), term, self._capacity))

    def remove(self, indices: Iterable[int]) -> None:
        self._write(remove_indices(self.load(), indices))

    def clear(self) -> None:
        self._write([])

    def _write(self, items: list[str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False, indent=2)
