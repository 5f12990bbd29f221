"""Configuration module for Wikipedia Explorer."""

from wikiexplorer.config.factory import create_from_config
from wikiexplorer.config.loader import get_default_config_path, load_config
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

__all__ = [
    "ExplorerConfig",
    "FileHistoryConfig",
    "HistoryConfig",
    "IPLocationConfig",
    "LocationConfig",
    "MemoryHistoryConfig",
    "NearbyConfig",
    "SearchConfig",
    "StaticLocationConfig",
    "WikipediaClientConfig",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
