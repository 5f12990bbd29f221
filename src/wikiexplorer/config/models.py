"""Pydantic configuration models for Wikipedia Explorer components."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from wikiexplorer.location.base import AuthorizationStatus
from wikiexplorer.search.wikipedia import DEFAULT_USER_AGENT

# ============================================================
# Article Source Config
# ============================================================


class WikipediaClientConfig(BaseModel):
    """Configuration for WikipediaClient."""

    user_agent: str = DEFAULT_USER_AGENT
    language: str = "en"
    timeout_seconds: float = Field(default=10.0, gt=0)
    empty_results_as_error: bool = True

    model_config = {"frozen": True}


# ============================================================
# Orchestrator Configs
# ============================================================


class SearchConfig(BaseModel):
    """Configuration for SearchOrchestrator."""

    debounce_seconds: float = Field(default=0.35, ge=0)
    result_limit: int = Field(default=20, ge=1, le=500)

    model_config = {"frozen": True}


class NearbyConfig(BaseModel):
    """Configuration for NearbyOrchestrator."""

    radius_meters: int = Field(default=10_000, ge=10, le=10_000)
    limit: int = Field(default=30, ge=1, le=500)
    search_area_threshold_meters: float = Field(default=1_000.0, gt=0)
    min_span_degrees: float = Field(default=0.02, gt=0)
    span_padding: float = Field(default=1.5, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Location Configs
# ============================================================


class StaticLocationConfig(BaseModel):
    """A fixed position, e.g. for demos or headless use."""

    type: Literal["static"] = "static"
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)
    authorization: AuthorizationStatus = AuthorizationStatus.AUTHORIZED

    model_config = {"frozen": True}


class IPLocationConfig(BaseModel):
    """Coarse position from an IP geolocation service."""

    type: Literal["ip"] = "ip"
    url: str = "https://ipapi.co/json/"
    timeout_seconds: float = Field(default=15.0, gt=0)

    model_config = {"frozen": True}


LocationConfig = Annotated[
    StaticLocationConfig | IPLocationConfig,
    Field(discriminator="type"),
]


# ============================================================
# History Configs
# ============================================================


class MemoryHistoryConfig(BaseModel):
    """Recent searches kept in memory only."""

    type: Literal["memory"] = "memory"
    capacity: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


class FileHistoryConfig(BaseModel):
    """Recent searches persisted to a JSON file."""

    type: Literal["file"] = "file"
    path: Path = Path("~/.wikiexplorer/history.json")
    capacity: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


HistoryConfig = Annotated[
    MemoryHistoryConfig | FileHistoryConfig,
    Field(discriminator="type"),
]


# ============================================================
# Root Config
# ============================================================


class ExplorerConfig(BaseModel):
    """Root configuration for Wikipedia Explorer."""

    wikipedia: WikipediaClientConfig = Field(default_factory=WikipediaClientConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    nearby: NearbyConfig = Field(default_factory=NearbyConfig)
    location: LocationConfig = Field(default_factory=IPLocationConfig)
    history: HistoryConfig = Field(default_factory=MemoryHistoryConfig)

    model_config = {"frozen": True}
