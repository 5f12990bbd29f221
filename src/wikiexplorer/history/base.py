from collections.abc import Iterable
from typing import Protocol

DEFAULT_CAPACITY = 10


class SearchHistoryStore(Protocol):
    """Interface for the ordered list of recent search terms."""

    def load(self) -> list[str]:
        """Return recent terms, most recent first."""
        ...

    def record(self, term: str) -> None:
        """Move ``term`` to the front, replacing any case-insensitive duplicate."""
        ...

    def remove(self, indices: Iterable[int]) -> None:
        """Remove the terms at the given positions of ``load()``."""
        ...

    def clear(self) -> None:
        """Forget every recent term."""
        ...


def record_term(items: list[str], term: str, capacity: int = DEFAULT_CAPACITY) -> list[str]:
    """Apply the recent-search policy to ``items``.

    The term is trimmed and ignored if empty. Any entry equal to it
    ignoring case is dropped, the new form goes to the front and the list
    is cut to ``capacity`` by dropping the oldest entries.

    Returns:
        A new list; ``items`` is not modified.
    """
    trimmed = term.strip()
    if not trimmed:
        return list(items)
    folded = trimmed.casefold()
    kept = [item for item in items if item.casefold() != folded]
    return [trimmed, *kept][:capacity]


def remove_indices(items: list[str], indices: Iterable[int]) -> list[str]:
    """Drop the entries at ``indices``; out-of-range positions are ignored."""
    drop = set(indices)
    return [item for i, item in enumerate(items) if i not in drop]
