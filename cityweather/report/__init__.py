"""Weather report lookup combining geocoding and current conditions."""

from .formatting import format_coordinates, format_observed_at, format_report
from .service import WeatherOrchestrator, get_weather_report
from .views import WeatherReport

__all__ = [
    "WeatherOrchestrator",
    "WeatherReport",
    "format_coordinates",
    "format_observed_at",
    "format_report",
    "get_weather_report",
]
