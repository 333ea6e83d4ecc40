from cityweather.conditions import describe, icon_for
from cityweather.config import WeatherEnv
from cityweather.exceptions import (
    ErrorKind,
    InvalidInputError,
    InvalidResponseError,
    NetworkError,
    NotFoundError,
    WeatherLookupError,
    WeatherReportError,
)
from cityweather.forecast import CurrentConditions, UnitSystem, WeatherFetcher
from cityweather.geocoding import Geocoder, Location
from cityweather.report import (
    WeatherOrchestrator,
    WeatherReport,
    format_report,
    get_weather_report,
)

__all__ = [
    "CurrentConditions",
    "ErrorKind",
    "Geocoder",
    "InvalidInputError",
    "InvalidResponseError",
    "Location",
    "NetworkError",
    "NotFoundError",
    "UnitSystem",
    "WeatherEnv",
    "WeatherFetcher",
    "WeatherLookupError",
    "WeatherOrchestrator",
    "WeatherReport",
    "WeatherReportError",
    "describe",
    "format_report",
    "get_weather_report",
    "icon_for",
]
