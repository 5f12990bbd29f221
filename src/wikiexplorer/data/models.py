"""Core data models for Wikipedia Explorer."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from wikiexplorer.errors import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class Geo:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


# Map centers and device positions share the article coordinate type.
Coordinate = Geo


@dataclass(frozen=True)
class Article:
    """A Wikipedia article returned by search or geosearch.

    Identity is the page ``id``; two articles with the same id are the same
    page even if fetched at different times.
    """

    id: int
    title: str
    full_url: str | None = None
    thumbnail_url: str | None = None
    geo: Geo | None = None


@dataclass(frozen=True)
class ArticleWithGeo:
    """An article paired with the coordinate used to place it on a map."""

    article: Article
    geo: Geo

    @property
    def id(self) -> int:
        return self.article.id


@dataclass(frozen=True)
class MapRegion:
    """A map viewport: a center plus the degrees spanned on each axis."""

    center: Coordinate
    latitude_delta: float
    longitude_delta: float


class LoadStatus(StrEnum):
    """Tag of a ``Loadable``."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Loadable(Generic[T]):
    """Tagged state of an asynchronously loaded value.

    Exactly one of the four tags is active. ``value`` is only set when
    loaded and ``error`` only when failed, so equality compares the tag and
    its payload.
    """

    status: LoadStatus = LoadStatus.IDLE
    value: T | None = None
    error: ErrorKind | None = None

    @classmethod
    def idle(cls) -> "Loadable[T]":
        return cls(LoadStatus.IDLE)

    @classmethod
    def loading(cls) -> "Loadable[T]":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, value: T) -> "Loadable[T]":
        return cls(LoadStatus.LOADED, value=value)

    @classmethod
    def failed(cls, error: ErrorKind) -> "Loadable[T]":
        return cls(LoadStatus.FAILED, error=error)

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING


class SearchStatus(StrEnum):
    """Tag of a ``SearchMode``."""

    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    ERROR = "error"


@dataclass(frozen=True)
class SearchMode:
    """What the search screen is currently showing."""

    status: SearchStatus = SearchStatus.IDLE
    error: ErrorKind | None = None

    @classmethod
    def idle(cls) -> "SearchMode":
        return cls(SearchStatus.IDLE)

    @classmethod
    def searching(cls) -> "SearchMode":
        return cls(SearchStatus.SEARCHING)

    @classmethod
    def results(cls) -> "SearchMode":
        return cls(SearchStatus.RESULTS)

    @classmethod
    def failed(cls, error: ErrorKind) -> "SearchMode":
        return cls(SearchStatus.ERROR, error=error)
