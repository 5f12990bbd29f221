"""Wikipedia search using the MediaWiki Action API."""

import logging
from types import TracebackType
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from wikiexplorer.data import Article, Geo
from wikiexplorer.errors import (
    DECODING_ERROR,
    NO_RESULTS,
    WikipediaError,
    classify,
    classify_status,
)

DEFAULT_USER_AGENT = "WikipediaExplorer/0.1 (https://github.com/wikiexplorer/wikiexplorer)"

logger = logging.getLogger(__name__)


class _Coordinate(BaseModel):
    lat: float
    lon: float


class _Thumbnail(BaseModel):
    source: str


class _Page(BaseModel):
    pageid: int
    title: str
    fullurl: str | None = None
    coordinates: list[_Coordinate] | None = None
    thumbnail: _Thumbnail | None = None


class _Query(BaseModel):
    pages: list[_Page] = []


class _QueryResponse(BaseModel):
    query: _Query | None = None

    def articles(self) -> list[Article]:
        if self.query is None:
            return []
        articles = [
            Article(
                id=page.pageid,
                title=page.title,
                full_url=page.fullurl,
                thumbnail_url=page.thumbnail.source if page.thumbnail else None,
                geo=Geo(lat=page.coordinates[0].lat, lon=page.coordinates[0].lon)
                if page.coordinates
                else None,
            )
            for page in self.query.pages
        ]
        return sorted(articles, key=lambda a: a.title.casefold())


class WikipediaClient:
    """Search Wikipedia articles by text or around a coordinate.

    Both operations use the ``generator`` form of ``action=query`` so that a
    single request returns titles, canonical URLs, thumbnails and coordinates.

    Args:
        user_agent: Value for the User-Agent header (Wikimedia requires one).
        language: Wikipedia language edition, e.g. "en".
        timeout: Request timeout in seconds.
        empty_results_as_error: Raise ``NO_RESULTS`` instead of returning an
            empty list.
        client: Optional pre-configured httpx client. When omitted the
            searcher creates and owns one.
    """

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        language: str = "en",
        timeout: float = 10.0,
        empty_results_as_error: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not user_agent:
            raise ValueError("Wikipedia requires a non-empty User-Agent.")
        self._base_url = f"https://{language}.wikipedia.org/w/api.php"
        self._empty_results_as_error = empty_results_as_error
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def search(self, text: str, limit: int = 20) -> list[Article]:
        """Search articles matching ``text``.

        Args:
            text: Search terms.
            limit: Maximum number of articles to return.

        Returns:
            Articles sorted by title.

        Raises:
            WikipediaError: On any transport, HTTP or decoding failure, or
                when nothing matched and empty results are treated as errors.
        """
        params: dict[str, str | int] = {
            "generator": "search",
            "gsrsearch": text,
            "gsrlimit": limit,
        }
        return await self._fetch_articles(params)

    async def nearby(
        self,
        lat: float,
        lon: float,
        radius_meters: int = 10_000,
        limit: int = 20,
    ) -> list[Article]:
        """Find geotagged articles within ``radius_meters`` of a coordinate."""
        params: dict[str, str | int] = {
            "generator": "geosearch",
            "ggscoord": f"{lat}|{lon}",
            "ggsradius": radius_meters,
            "ggslimit": limit,
        }
        return await self._fetch_articles(params)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "WikipediaClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _fetch_articles(self, params: dict[str, str | int]) -> list[Article]:
        """Execute one query and decode the returned pages."""
        query_params: dict[str, Any] = {
            "action": "query",
            "format": "json",
            "formatversion": "2",
            "prop": "coordinates|pageimages|info",
            "inprop": "url",
            "pithumbsize": 200,
            **params,
        }

        try:
            response = await self._client.get(self._base_url, params=query_params)
        except httpx.HTTPError as e:
            logger.warning("Wikipedia request failed. Error: %s", e)
            raise WikipediaError(classify(e)) from e

        if response.status_code != 200:
            logger.warning("Wikipedia returned HTTP %s", response.status_code)
            raise WikipediaError(classify_status(response.status_code))

        try:
            decoded = _QueryResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Could not decode Wikipedia response. Error: %s", e)
            raise WikipediaError(DECODING_ERROR) from e

        articles = decoded.articles()
        logger.debug("Wikipedia returned %d articles for %s", len(articles), params)
        if not articles and self._empty_results_as_error:
            raise WikipediaError(NO_RESULTS)
        return articles
