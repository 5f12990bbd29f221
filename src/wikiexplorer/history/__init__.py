from wikiexplorer.history.base import DEFAULT_CAPACITY, SearchHistoryStore, record_term
from wikiexplorer.history.file import JsonFileSearchHistoryStore
from wikiexplorer.history.memory import InMemorySearchHistoryStore

__all__ = [
    "DEFAULT_CAPACITY",
    "InMemorySearchHistoryStore",
    "JsonFileSearchHistoryStore",
    "SearchHistoryStore",
    "record_term",
]
