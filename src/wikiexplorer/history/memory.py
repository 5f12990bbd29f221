from collections.abc import Iterable

from wikiexplorer.history.base import DEFAULT_CAPACITY, record_term, remove_indices


class InMemorySearchHistoryStore:
    """Recent searches kept for the lifetime of the process."""

    def __init__(self, items: Iterable[str] = (), *, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = capacity
        self._items: list[str] = list(items)[:capacity]

    def load(self) -> list[str]:
        return list(self._items)

    def record(self, term: str) -> None:
        self._items = record_term(self._items, term, self._capacity)

    def remove(self, indices: Iterable[int]) -> None:
        self._items = remove_indices(self._items, indices)

    def clear(self) -> None:
        self._items = []
