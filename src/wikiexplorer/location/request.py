"""Bridge from callback-style location events to a single awaited value."""

import asyncio
import logging

from wikiexplorer.data import Coordinate
from wikiexplorer.errors import REQUEST_TIMEOUT, WikipediaError

logger = logging.getLogger(__name__)


class LocationRequest:
    """A position request resolved exactly once.

    Whichever terminal event comes first (``resolve``, ``fail`` or the
    timeout) settles the request. Later events are ignored and report
    ``False``.

    Must be created while an event loop is running.

    Args:
        timeout: Seconds before the request fails with ``REQUEST_TIMEOUT``.
    """

    def __init__(self, timeout: float) -> None:
        loop = asyncio.get_running_loop()
        self._future: asyncio.Future[Coordinate] = loop.create_future()
        self._timer = loop.call_later(timeout, self._expire)

    def resolve(self, coordinate: Coordinate) -> bool:
        """Settle the request with a position."""
        if self._future.done():
            logger.debug("Ignoring location %s for a settled request", coordinate)
            return False
        self._timer.cancel()
        self._future.set_result(coordinate)
        return True

    def fail(self, error: BaseException) -> bool:
        """Settle the request with an error."""
        if self._future.done():
            logger.debug("Ignoring failure %r for a settled request", error)
            return False
        self._timer.cancel()
        self._future.set_exception(error)
        return True

    async def wait(self) -> Coordinate:
        """Wait for the request to settle.

        Raises:
            WikipediaError: The failure the request was settled with.
        """
        try:
            return await self._future
        finally:
            self._timer.cancel()

    def _expire(self) -> None:
        if self.fail(WikipediaError(REQUEST_TIMEOUT)):
            logger.warning("Location request timed out")
