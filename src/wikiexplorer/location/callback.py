"""Location provider driven by platform callbacks."""

import logging
from collections.abc import Callable, Sequence

from wikiexplorer.data import Coordinate
from wikiexplorer.errors import LOCATION_UNAVAILABLE, WikipediaError, classify
from wikiexplorer.location.base import (
    DEFAULT_LOCATION_TIMEOUT,
    REFUSED_STATUSES,
    AuthorizationStatus,
)
from wikiexplorer.location.request import LocationRequest

logger = logging.getLogger(__name__)


class CallbackLocationProvider:
    """Adapts a delegate-style location service to an awaitable request.

    The platform integration supplies two hooks and reports back through
    the ``did_*`` methods. Only one request is outstanding at a time;
    starting a new one cancels the previous.

    Args:
        request_location: Asks the platform for a single position fix.
        request_authorization: Prompts the user for location access.
        authorization: Authorization status known at construction time.
        timeout: Seconds before a request fails with ``REQUEST_TIMEOUT``.
    """

    def __init__(
        self,
        *,
        request_location: Callable[[], None],
        request_authorization: Callable[[], None],
        authorization: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED,
        timeout: float = DEFAULT_LOCATION_TIMEOUT,
    ) -> None:
        self._request_location = request_location
        self._request_authorization = request_authorization
        self._authorization = authorization
        self._timeout = timeout
        self._pending: LocationRequest | None = None

    @property
    def authorization(self) -> AuthorizationStatus:
        return self._authorization

    async def request_current_location(self) -> Coordinate:
        if self._pending is not None:
            logger.debug("Superseding an outstanding location request")
            self._pending.fail(WikipediaError(LOCATION_UNAVAILABLE))
            self._pending = None

        refused = REFUSED_STATUSES.get(self._authorization)
        if refused is not None:
            raise WikipediaError(refused)

        request = LocationRequest(self._timeout)
        self._pending = request
        if self._authorization is AuthorizationStatus.NOT_DETERMINED:
            self._request_authorization()
        else:
            self._request_location()

        try:
            return await request.wait()
        finally:
            if self._pending is request:
                self._pending = None

    def did_update_locations(self, coordinates: Sequence[Coordinate]) -> None:
        if self._pending is None:
            return
        if coordinates:
            self._pending.resolve(coordinates[0])
        else:
            self._pending.fail(WikipediaError(LOCATION_UNAVAILABLE))

    def did_fail(self, error: BaseException) -> None:
        if self._pending is None:
            return
        logger.warning("Location service failed. Error: %s", error)
        self._pending.fail(WikipediaError(classify(error)))

    def did_change_authorization(self, status: AuthorizationStatus) -> None:
        self._authorization = status
        if self._pending is None:
            return
        if status is AuthorizationStatus.AUTHORIZED:
            self._request_location()
        elif status in REFUSED_STATUSES:
            self._pending.fail(WikipediaError(REFUSED_STATUSES[status]))
