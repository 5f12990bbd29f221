"""Approximate device location from an IP geolocation service."""

import asyncio
import logging

import httpx

from wikiexplorer.data import Coordinate
from wikiexplorer.errors import LOCATION_UNAVAILABLE, REQUEST_TIMEOUT, WikipediaError
from wikiexplorer.location.base import DEFAULT_LOCATION_TIMEOUT

IP_LOCATION_URL = "https://ipapi.co/json/"

logger = logging.getLogger(__name__)


class IPLocationProvider:
    """Resolve a coarse position from the caller's public IP address.

    The service must answer with a JSON object carrying ``latitude`` and
    ``longitude`` (ipapi.co style) or ``lat`` and ``lon`` (ip-api.com style).

    Args:
        url: Geolocation endpoint.
        timeout: Overall timeout for the lookup, in seconds.
    """

    def __init__(
        self,
        *,
        url: str = IP_LOCATION_URL,
        timeout: float = DEFAULT_LOCATION_TIMEOUT,
    ) -> None:
        self._url = url
        self._timeout = timeout

    async def request_current_location(self) -> Coordinate:
        try:
            return await asyncio.wait_for(self._lookup(), timeout=self._timeout)
        except TimeoutError as e:
            logger.warning("IP location lookup timed out after %ss", self._timeout)
            raise WikipediaError(REQUEST_TIMEOUT) from e

    async def _lookup(self) -> Coordinate:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._url)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("IP location lookup failed. Error: %s", e)
            raise WikipediaError(LOCATION_UNAVAILABLE) from e

        if not isinstance(data, dict):
            raise WikipediaError(LOCATION_UNAVAILABLE)
        try:
            lat = float(data.get("latitude", data.get("lat")))
            lon = float(data.get("longitude", data.get("lon")))
        except (TypeError, ValueError) as e:
            logger.warning("IP location response has no usable coordinate: %s", data)
            raise WikipediaError(LOCATION_UNAVAILABLE) from e
        return Coordinate(lat=lat, lon=lon)
