from wikiexplorer.location.base import AuthorizationStatus, LocationProvider
from wikiexplorer.location.callback import CallbackLocationProvider
from wikiexplorer.location.ip import IPLocationProvider
from wikiexplorer.location.request import LocationRequest
from wikiexplorer.location.static import StaticLocationProvider

__all__ = [
    "AuthorizationStatus",
    "CallbackLocationProvider",
    "IPLocationProvider",
    "LocationProvider",
    "LocationRequest",
    "StaticLocationProvider",
]
