"""Factory functions to create components from configuration."""

from wikiexplorer.config.models import (
    ExplorerConfig,
    FileHistoryConfig,
    HistoryConfig,
    IPLocationConfig,
    LocationConfig,
    MemoryHistoryConfig,
    NearbyConfig,
    SearchConfig,
    StaticLocationConfig,
    WikipediaClientConfig,
)
from wikiexplorer.data import Coordinate
from wikiexplorer.history import (
    InMemorySearchHistoryStore,
    JsonFileSearchHistoryStore,
    SearchHistoryStore,
)
from wikiexplorer.location import IPLocationProvider, LocationProvider, StaticLocationProvider
from wikiexplorer.orchestrator import NearbyOrchestrator, SearchOrchestrator
from wikiexplorer.search import ArticleSource, WikipediaClient


def create_client(config: WikipediaClientConfig) -> WikipediaClient:
    """Create a Wikipedia client from config."""
    return WikipediaClient(
        user_agent=config.user_agent,
        language=config.language,
        timeout=config.timeout_seconds,
        empty_results_as_error=config.empty_results_as_error,
    )


def create_location_provider(config: LocationConfig) -> LocationProvider:
    """Create a location provider from config."""
    if isinstance(config, StaticLocationConfig):
        coordinate = None
        if config.lat is not None and config.lon is not None:
            coordinate = Coordinate(lat=config.lat, lon=config.lon)
        return StaticLocationProvider(coordinate, authorization=config.authorization)
    if isinstance(config, IPLocationConfig):
        return IPLocationProvider(url=config.url, timeout=config.timeout_seconds)
    msg = f"Unknown location config type: {type(config)}"
    raise ValueError(msg)


def create_history_store(config: HistoryConfig) -> SearchHistoryStore:
    """Create a search history store from config."""
    if isinstance(config, MemoryHistoryConfig):
        return InMemorySearchHistoryStore(capacity=config.capacity)
    if isinstance(config, FileHistoryConfig):
        return JsonFileSearchHistoryStore(config.path.expanduser(), capacity=config.capacity)
    msg = f"Unknown history config type: {type(config)}"
    raise ValueError(msg)


def create_search_orchestrator(
    config: SearchConfig,
    source: ArticleSource,
    history: SearchHistoryStore,
) -> SearchOrchestrator:
    """Create a search orchestrator from config."""
    return SearchOrchestrator(
        source,
        history,
        debounce_seconds=config.debounce_seconds,
        result_limit=config.result_limit,
    )


def create_nearby_orchestrator(
    config: NearbyConfig,
    source: ArticleSource,
    location: LocationProvider,
) -> NearbyOrchestrator:
    """Create a nearby orchestrator from config."""
    return NearbyOrchestrator(
        source,
        location,
        radius_meters=config.radius_meters,
        limit=config.limit,
        search_area_threshold_meters=config.search_area_threshold_meters,
        min_span_degrees=config.min_span_degrees,
        span_padding=config.span_padding,
    )


def create_from_config(
    config: ExplorerConfig,
    *,
    location_override: Coordinate | None = None,
) -> tuple[WikipediaClient, SearchOrchestrator, NearbyOrchestrator]:
    """Create both orchestrators sharing one Wikipedia client.

    Args:
        config: Root configuration.
        location_override: Fixed position used instead of the configured
            location provider.

    Returns:
        Tuple of (client, search orchestrator, nearby orchestrator).
        The caller owns the client and must close it.
    """
    client = create_client(config.wikipedia)
    history = create_history_store(config.history)
    location: LocationProvider
    if location_override is not None:
        location = StaticLocationProvider(location_override)
    else:
        location = create_location_provider(config.location)

    search = create_search_orchestrator(config.search, client, history)
    nearby = create_nearby_orchestrator(config.nearby, client, location)
    return (client, search, nearby)
