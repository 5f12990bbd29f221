from enum import StrEnum
from typing import Protocol

from wikiexplorer.data import Coordinate
from wikiexplorer.errors import (
    LOCATION_DENIED,
    LOCATION_RESTRICTED,
    ErrorKind,
)

DEFAULT_LOCATION_TIMEOUT = 15.0


class AuthorizationStatus(StrEnum):
    """Whether the user allowed this app to read the device position."""

    NOT_DETERMINED = "not_determined"
    AUTHORIZED = "authorized"
    DENIED = "denied"
    RESTRICTED = "restricted"


# Statuses that end a request without ever asking for a position.
REFUSED_STATUSES: dict[AuthorizationStatus, ErrorKind] = {
    AuthorizationStatus.DENIED: LOCATION_DENIED,
    AuthorizationStatus.RESTRICTED: LOCATION_RESTRICTED,
}


class LocationProvider(Protocol):
    """Interface for resolving the current device position."""

    async def request_current_location(self) -> Coordinate:
        """Resolve the current position.

        Raises:
            WikipediaError: With ``LOCATION_DENIED``, ``LOCATION_RESTRICTED``,
                ``LOCATION_UNAVAILABLE`` or ``REQUEST_TIMEOUT``.
        """
        ...
