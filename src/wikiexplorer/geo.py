"""Coordinate math for map placement and viewport fitting."""

import math
from collections.abc import Iterable

from wikiexplorer.data import Article, ArticleWithGeo, Coordinate, MapRegion

EARTH_RADIUS_METERS = 6_371_008.8


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates (haversine)."""
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(h)))


def articles_with_geo(articles: Iterable[Article]) -> list[ArticleWithGeo]:
    """Keep only articles that can be placed on a map and opened.

    Articles without a coordinate or without a URL are dropped silently.
    """
    return [
        ArticleWithGeo(article=article, geo=article.geo)
        for article in articles
        if article.geo is not None and article.full_url
    ]


def fit_region(
    articles: Iterable[Article],
    *,
    fallback_center: Coordinate,
    min_span: float = 0.02,
    padding: float = 1.5,
) -> MapRegion:
    """Compute a viewport enclosing every geotagged article.

    Args:
        articles: Articles to enclose; those without ``geo`` are ignored.
        fallback_center: Center used when no article carries a coordinate.
        min_span: Smallest span in degrees on either axis.
        padding: Multiplier applied to the bounding-box extent.

    Returns:
        A region centered on the bounding-box midpoint.
    """
    points = [a.geo for a in articles if a.geo is not None]
    if not points:
        return MapRegion(center=fallback_center, latitude_delta=min_span, longitude_delta=min_span)

    lats = [p.lat for p in points]
    lons = [p.lon for p in points]
    min_lat, max_lat = min(lats), max(lats)
    min_lon, max_lon = min(lons), max(lons)

    return MapRegion(
        center=Coordinate(lat=(min_lat + max_lat) / 2, lon=(min_lon + max_lon) / 2),
        latitude_delta=max(min_span, (max_lat - min_lat) * padding),
        longitude_delta=max(min_span, (max_lon - min_lon) * padding),
    )
