from typing import Protocol

from wikiexplorer.data import Article


class ArticleSource(Protocol):
    """Interface for fetching Wikipedia articles by text or by location.

    Implementations raise ``WikipediaError`` with an already-classified
    ``ErrorKind`` on failure; callers only ever see articles or that error.
    """

    async def search(self, text: str, limit: int) -> list[Article]:
        """Full-text search.

        Args:
            text: Search terms, already trimmed.
            limit: Maximum number of articles to return.

        Returns:
            Matching articles.
        """
        ...

    async def nearby(
        self,
        lat: float,
        lon: float,
        radius_meters: int,
        limit: int,
    ) -> list[Article]:
        """Geosearch around a coordinate.

        Args:
            lat: Latitude of the search center.
            lon: Longitude of the search center.
            radius_meters: Search radius in meters.
            limit: Maximum number of articles to return.

        Returns:
            Geotagged articles within the radius.
        """
        ...
