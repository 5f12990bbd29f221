"""Classified failures surfaced to the presentation layer."""

import json
import logging
from dataclasses import dataclass
from enum import StrEnum

import httpx
import pydantic

logger = logging.getLogger(__name__)


class ErrorType(StrEnum):
    """Closed set of failure kinds."""

    NETWORK_UNAVAILABLE = "network_unavailable"
    INVALID_RESPONSE = "invalid_response"
    NO_RESULTS = "no_results"
    LOCATION_DENIED = "location_denied"
    LOCATION_RESTRICTED = "location_restricted"
    LOCATION_UNAVAILABLE = "location_unavailable"
    REQUEST_TIMEOUT = "request_timeout"
    SERVER_ERROR = "server_error"
    DECODING_ERROR = "decoding_error"
    UNKNOWN = "unknown"


class ErrorCategory(StrEnum):
    """Coarse grouping used to pick a presentation style."""

    LOCATION = "location"
    NETWORK = "network"
    NO_CONTENT = "no_content"
    UNKNOWN = "unknown"


_DESCRIPTIONS: dict[ErrorType, str] = {
    ErrorType.NETWORK_UNAVAILABLE: "No internet connection available",
    ErrorType.INVALID_RESPONSE: "Invalid response from Wikipedia",
    ErrorType.NO_RESULTS: "No articles found",
    ErrorType.LOCATION_DENIED: "Location access denied. Please enable in Settings.",
    ErrorType.LOCATION_RESTRICTED: "Location access restricted",
    ErrorType.LOCATION_UNAVAILABLE: "Unable to determine location",
    ErrorType.REQUEST_TIMEOUT: "Request timed out. Please try again.",
    ErrorType.DECODING_ERROR: "Unable to process response",
}

_RECOVERY_SUGGESTIONS: dict[ErrorType, str] = {
    ErrorType.NETWORK_UNAVAILABLE: "Check your internet connection and try again.",
    ErrorType.LOCATION_DENIED: (
        "Go to Settings > Privacy & Security > Location Services to enable location access."
    ),
    ErrorType.REQUEST_TIMEOUT: "Try again in a few moments.",
    ErrorType.SERVER_ERROR: "Try again in a few moments.",
    ErrorType.INVALID_RESPONSE: "Try again in a few moments.",
    ErrorType.NO_RESULTS: "Try different search terms.",
}

_RETRYABLE = frozenset(
    {
        ErrorType.NETWORK_UNAVAILABLE,
        ErrorType.REQUEST_TIMEOUT,
        ErrorType.SERVER_ERROR,
        ErrorType.INVALID_RESPONSE,
        ErrorType.LOCATION_UNAVAILABLE,
    }
)

_CATEGORIES: dict[ErrorType, ErrorCategory] = {
    ErrorType.LOCATION_DENIED: ErrorCategory.LOCATION,
    ErrorType.LOCATION_RESTRICTED: ErrorCategory.LOCATION,
    ErrorType.LOCATION_UNAVAILABLE: ErrorCategory.LOCATION,
    ErrorType.NETWORK_UNAVAILABLE: ErrorCategory.NETWORK,
    ErrorType.REQUEST_TIMEOUT: ErrorCategory.NETWORK,
    ErrorType.SERVER_ERROR: ErrorCategory.NETWORK,
    ErrorType.INVALID_RESPONSE: ErrorCategory.NETWORK,
    ErrorType.DECODING_ERROR: ErrorCategory.NETWORK,
    ErrorType.NO_RESULTS: ErrorCategory.NO_CONTENT,
    ErrorType.UNKNOWN: ErrorCategory.UNKNOWN,
}


@dataclass(frozen=True)
class ErrorKind:
    """A classified failure with its display metadata.

    Only ``SERVER_ERROR`` carries ``status_code`` and only ``UNKNOWN``
    carries ``message``; equality compares the payload as well as the type.
    """

    type: ErrorType
    status_code: int | None = None
    message: str | None = None

    @classmethod
    def server_error(cls, status_code: int) -> "ErrorKind":
        return cls(ErrorType.SERVER_ERROR, status_code=status_code)

    @classmethod
    def unknown(cls, message: str) -> "ErrorKind":
        return cls(ErrorType.UNKNOWN, message=message)

    @property
    def description(self) -> str:
        """User-facing description of the failure."""
        if self.type is ErrorType.SERVER_ERROR:
            return f"Server error ({self.status_code}). Please try again."
        if self.type is ErrorType.UNKNOWN:
            return self.message or "Something went wrong"
        return _DESCRIPTIONS[self.type]

    @property
    def recovery_suggestion(self) -> str | None:
        return _RECOVERY_SUGGESTIONS.get(self.type, "Please try again.")

    @property
    def should_show_retry(self) -> bool:
        return self.type in _RETRYABLE

    @property
    def category(self) -> ErrorCategory:
        return _CATEGORIES[self.type]

    @property
    def requires_full_screen(self) -> bool:
        return self.category is ErrorCategory.LOCATION

    def __str__(self) -> str:
        return self.description


NETWORK_UNAVAILABLE = ErrorKind(ErrorType.NETWORK_UNAVAILABLE)
INVALID_RESPONSE = ErrorKind(ErrorType.INVALID_RESPONSE)
NO_RESULTS = ErrorKind(ErrorType.NO_RESULTS)
LOCATION_DENIED = ErrorKind(ErrorType.LOCATION_DENIED)
LOCATION_RESTRICTED = ErrorKind(ErrorType.LOCATION_RESTRICTED)
LOCATION_UNAVAILABLE = ErrorKind(ErrorType.LOCATION_UNAVAILABLE)
REQUEST_TIMEOUT = ErrorKind(ErrorType.REQUEST_TIMEOUT)
DECODING_ERROR = ErrorKind(ErrorType.DECODING_ERROR)


class WikipediaError(Exception):
    """Raised by collaborators once a failure has been classified.

    Args:
        kind: The classified failure.
    """

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind


def classify_status(status_code: int) -> ErrorKind:
    """Map a non-200 HTTP status to an error kind."""
    if 500 <= status_code < 600:
        return ErrorKind.server_error(status_code)
    return INVALID_RESPONSE


def classify(error: BaseException) -> ErrorKind:
    """Map any raised exception to exactly one error kind.

    Args:
        error: The exception that crossed into an orchestrator.

    Returns:
        The classified error kind. Unrecognized exceptions become
        ``UNKNOWN`` carrying the exception text.
    """
    if isinstance(error, WikipediaError):
        return error.kind
    if isinstance(error, (httpx.TimeoutException, TimeoutError)):
        return REQUEST_TIMEOUT
    if isinstance(error, httpx.NetworkError):
        return NETWORK_UNAVAILABLE
    if isinstance(error, httpx.HTTPStatusError):
        return classify_status(error.response.status_code)
    if isinstance(error, (httpx.TransportError, httpx.DecodingError)):
        return INVALID_RESPONSE
    if isinstance(error, (json.JSONDecodeError, pydantic.ValidationError)):
        return DECODING_ERROR

    logger.debug("Unclassified error %r", error)
    return ErrorKind.unknown(str(error) or type(error).__name__)
