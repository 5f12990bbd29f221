"""Debounced, cancellable article search with recent-search history."""

import asyncio
import logging
from collections.abc import Iterable

from wikiexplorer.data import Article, SearchMode
from wikiexplorer.errors import classify
from wikiexplorer.history import SearchHistoryStore
from wikiexplorer.orchestrator.observable import CancellationToken, Observable, PendingOperation
from wikiexplorer.search import ArticleSource

DEFAULT_DEBOUNCE_SECONDS = 0.35
DEFAULT_RESULT_LIMIT = 20

logger = logging.getLogger(__name__)


class SearchOrchestrator(Observable):
    """State owner for the search screen.

    The presentation layer assigns ``query`` and calls ``on_query_changed()``
    on every edit. Each call supersedes the previous operation: it waits for
    the debounce interval, then asks the article source for results. A
    superseded operation never mutates state.

    History is only written at explicit commit points (``commit_search``
    and ``select_recent``), never while the user is typing.

    Entry points that start a search must be called from a running event
    loop, which is the sole owner of this object's state.

    Args:
        source: Where articles come from.
        history: Store of recent search terms.
        debounce_seconds: Quiet period before a search is sent.
        result_limit: Maximum articles requested per search.
    """

    def __init__(
        self,
        source: ArticleSource,
        history: SearchHistoryStore,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        result_limit: int = DEFAULT_RESULT_LIMIT,
    ) -> None:
        super().__init__()
        self._source = source
        self._history = history
        self._debounce_seconds = debounce_seconds
        self._result_limit = result_limit

        self.query = ""
        self._mode = SearchMode.idle()
        self._results: list[Article] = []
        self._recent_searches = history.load()
        self._last_committed_query = ""
        self._pending: PendingOperation | None = None

    @property
    def mode(self) -> SearchMode:
        return self._mode

    @property
    def results(self) -> list[Article]:
        return list(self._results)

    @property
    def recent_searches(self) -> list[str]:
        return list(self._recent_searches)

    @property
    def last_committed_query(self) -> str:
        return self._last_committed_query

    @property
    def has_pending_search(self) -> bool:
        return self._pending is not None

    def on_query_changed(self) -> None:
        """React to an edit of ``query``."""
        self._cancel_pending()

        trimmed = self.query.strip()
        if not trimmed:
            self._mode = SearchMode.idle()
            self._results = []
            self._last_committed_query = ""
            self._publish()
            return

        self._mode = SearchMode.searching()
        self._publish()

        token = CancellationToken()
        task = asyncio.get_running_loop().create_task(self._run_search(trimmed, token))
        self._pending = PendingOperation(token, task)

    def commit_search(self) -> None:
        """Record the current query in history after an explicit user action."""
        trimmed = self.query.strip()
        if not trimmed or trimmed == self._last_committed_query:
            return

        self._history.record(trimmed)
        self._recent_searches = self._history.load()
        self._last_committed_query = trimmed
        self._publish()

    def retry_search(self) -> None:
        """Run the current query again, debounce included."""
        self.on_query_changed()

    def select_recent(self, term: str) -> None:
        """Search for a recent term and move it to the front of history."""
        self.query = term
        self._last_committed_query = term
        self.on_query_changed()

        self._history.record(term)
        self._recent_searches = self._history.load()
        self._publish()

    def remove_recent(self, indices: Iterable[int]) -> None:
        self._history.remove(set(indices))
        self._recent_searches = self._history.load()
        self._publish()

    def clear_recents(self) -> None:
        self._history.clear()
        self._recent_searches = self._history.load()
        self._publish()

    async def wait_until_settled(self) -> None:
        """Wait until no search is in flight, including ones started meanwhile.

        Re-raises an exception that escaped a search, such as one thrown by a
        listener while results were published.
        """
        while self._pending is not None:
            task = self._pending.task
            await asyncio.wait({task})
            task.result()

    def close(self) -> None:
        """Tear down: the in-flight search, if any, will not touch state."""
        self._cancel_pending()

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    async def _run_search(self, text: str, token: CancellationToken) -> None:
        try:
            await asyncio.sleep(self._debounce_seconds)
            if token.cancelled:
                return

            logger.debug("Searching for %r", text)
            try:
                articles = await self._source.search(text, self._result_limit)
            except Exception as e:
                if token.cancelled:
                    return
                kind = classify(e)
                logger.info("Search for %r failed: %s", text, kind.description)
                self._mode = SearchMode.failed(kind)
                self._results = []
                self._publish()
                return

            if token.cancelled:
                return
            self._results = list(articles)
            self._mode = SearchMode.results()
            self._publish()
        finally:
            if self._pending is not None and self._pending.token is token:
                self._pending = None
