import logging

from wikiexplorer.data import Coordinate
from wikiexplorer.errors import LOCATION_UNAVAILABLE, WikipediaError
from wikiexplorer.location.base import REFUSED_STATUSES, AuthorizationStatus

logger = logging.getLogger(__name__)


class StaticLocationProvider:
    """Report a fixed, configured position.

    Args:
        coordinate: Position to report, or None if it is not known.
        authorization: Authorization to simulate; denied or restricted
            statuses fail every request.
    """

    def __init__(
        self,
        coordinate: Coordinate | None,
        *,
        authorization: AuthorizationStatus = AuthorizationStatus.AUTHORIZED,
    ) -> None:
        self._coordinate = coordinate
        self._authorization = authorization

    async def request_current_location(self) -> Coordinate:
        refused = REFUSED_STATUSES.get(self._authorization)
        if refused is not None:
            raise WikipediaError(refused)
        if self._coordinate is None:
            raise WikipediaError(LOCATION_UNAVAILABLE)
        logger.debug("Using static location %s", self._coordinate)
        return self._coordinate
