"""Data models for Wikipedia Explorer."""

from wikiexplorer.data.models import (
    Article,
    ArticleWithGeo,
    Coordinate,
    Geo,
    Loadable,
    LoadStatus,
    MapRegion,
    SearchMode,
    SearchStatus,
)

__all__ = [
    "Article",
    "ArticleWithGeo",
    "Coordinate",
    "Geo",
    "LoadStatus",
    "Loadable",
    "MapRegion",
    "SearchMode",
    "SearchStatus",
]
