"""Error taxonomy shared by every lookup stage."""

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    INVALID_RESPONSE = "invalid_response"
    NETWORK = "network"


class WeatherLookupError(Exception):
    """Base class for every failure raised by cityweather."""

    kind: ErrorKind


class InvalidInputError(WeatherLookupError):
    """A city name, coordinate or unit system was rejected before any request."""

    kind = ErrorKind.INVALID_INPUT


class NotFoundError(WeatherLookupError):
    """The geocoding service returned no candidates."""

    kind = ErrorKind.NOT_FOUND


class InvalidResponseError(WeatherLookupError):
    """A successful HTTP response was missing or had malformed fields."""

    kind = ErrorKind.INVALID_RESPONSE


class NetworkError(WeatherLookupError):
    """Connection failure, timeout or non-2xx status."""

    kind = ErrorKind.NETWORK


class WeatherReportError(WeatherLookupError):
    """Wraps a stage failure with report context, keeping the original kind."""

    MESSAGE_PREFIX = "failed to obtain weather report"

    def __init__(self, cause: WeatherLookupError):
        super().__init__(f"{self.MESSAGE_PREFIX}: {cause}")
        self.kind = cause.kind
