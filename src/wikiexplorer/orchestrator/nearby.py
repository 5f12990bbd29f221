"""Location-anchored fetch of nearby articles with "search this area" support."""

import logging

from wikiexplorer.data import Article, ArticleWithGeo, Coordinate, Loadable, MapRegion
from wikiexplorer.errors import classify
from wikiexplorer.geo import articles_with_geo, distance_meters, fit_region
from wikiexplorer.location import LocationProvider
from wikiexplorer.orchestrator.observable import Observable
from wikiexplorer.search import ArticleSource

DEFAULT_RADIUS_METERS = 10_000
DEFAULT_LIMIT = 30
DEFAULT_SEARCH_AREA_THRESHOLD_METERS = 1_000.0
DEFAULT_MIN_SPAN_DEGREES = 0.02
DEFAULT_SPAN_PADDING = 1.5

logger = logging.getLogger(__name__)


class NearbyOrchestrator(Observable):
    """State owner for the nearby screen.

    Fetches either around the device position or around an explicit map
    center, and tracks how far the map has moved from the last fetched
    center so the UI knows when to offer "search this area".

    Overlapping fetches are not serialized; the last one to finish wins.

    Args:
        source: Where articles come from.
        location: Resolves the device position.
        radius_meters: Default geosearch radius.
        limit: Default maximum number of articles.
        search_area_threshold_meters: Map movement beyond which the
            "search this area" affordance is shown.
        min_span_degrees: Smallest viewport span on either axis.
        span_padding: Multiplier applied to the article bounding box.
    """

    def __init__(
        self,
        source: ArticleSource,
        location: LocationProvider,
        *,
        radius_meters: int = DEFAULT_RADIUS_METERS,
        limit: int = DEFAULT_LIMIT,
        search_area_threshold_meters: float = DEFAULT_SEARCH_AREA_THRESHOLD_METERS,
        min_span_degrees: float = DEFAULT_MIN_SPAN_DEGREES,
        span_padding: float = DEFAULT_SPAN_PADDING,
    ) -> None:
        super().__init__()
        self._source = source
        self._location = location
        self._radius_meters = radius_meters
        self._limit = limit
        self._threshold_meters = search_area_threshold_meters
        self._min_span = min_span_degrees
        self._span_padding = span_padding

        self._state: Loadable[list[Article]] = Loadable.idle()
        self._map_center: Coordinate | None = None
        self._last_fetched_center: Coordinate | None = None
        self._region: MapRegion | None = None

    @property
    def state(self) -> Loadable[list[Article]]:
        return self._state

    @property
    def map_center(self) -> Coordinate | None:
        return self._map_center

    @property
    def last_fetched_center(self) -> Coordinate | None:
        return self._last_fetched_center

    @property
    def region(self) -> MapRegion | None:
        """Viewport enclosing the last loaded articles, for the map to apply."""
        return self._region

    @property
    def should_show_search_button(self) -> bool:
        if self._map_center is None:
            return False
        if self._last_fetched_center is None:
            return True
        return distance_meters(self._map_center, self._last_fetched_center) > self._threshold_meters

    def articles_with_geo(self) -> list[ArticleWithGeo]:
        """Loaded articles that can be placed on the map."""
        return articles_with_geo(self._state.value or [])

    def on_map_moved(self, center: Coordinate) -> None:
        self._map_center = center
        self._publish()

    async def fetch_nearby(
        self,
        at: Coordinate | None = None,
        *,
        radius_meters: int | None = None,
        limit: int | None = None,
    ) -> None:
        """Load articles around the device position or around ``at``.

        Args:
            at: Explicit center. When given, the device location is not
                consulted and ``last_fetched_center`` moves here on success.
            radius_meters: Override of the default radius.
            limit: Override of the default article limit.
        """
        radius = radius_meters if radius_meters is not None else self._radius_meters
        max_articles = limit if limit is not None else self._limit

        self._state = Loadable.loading()
        self._publish()

        if at is not None:
            if await self._load(at, radius, max_articles):
                self._last_fetched_center = at
                self._publish()
            return

        try:
            center = await self._location.request_current_location()
        except Exception as e:
            kind = classify(e)
            logger.info("Could not resolve location: %s", kind.description)
            self._state = Loadable.failed(kind)
            self._publish()
            return

        # Recorded before the fetch so map moves during it compare against it.
        self._map_center = center
        self._last_fetched_center = center
        self._publish()
        await self._load(center, radius, max_articles)

    async def retry(self) -> None:
        """Fetch again at the last fetched center, or at the device position."""
        await self.fetch_nearby(self._last_fetched_center)

    async def _load(self, center: Coordinate, radius_meters: int, limit: int) -> bool:
        logger.debug("Fetching up to %d articles within %dm of %s", limit, radius_meters, center)
        try:
            articles = await self._source.nearby(center.lat, center.lon, radius_meters, limit)
        except Exception as e:
            kind = classify(e)
            logger.info("Nearby fetch at %s failed: %s", center, kind.description)
            self._state = Loadable.failed(kind)
            self._publish()
            return False

        self._state = Loadable.loaded(list(articles))
        self._region = fit_region(
            articles,
            fallback_center=center,
            min_span=self._min_span,
            padding=self._span_padding,
        )
        self._publish()
        return True
