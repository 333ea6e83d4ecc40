from datetime import datetime
from textwrap import dedent

from cityweather.conditions import icon_for
from cityweather.report.views import WeatherReport

REGION_NOT_AVAILABLE = "Not available"


def format_coordinates(latitude: float, longitude: float) -> str:
    """Format a coordinate pair with hemisphere suffixes, e.g. 23.5500° S, 46.6300° W."""
    lat_direction = "N" if latitude >= 0 else "S"
    lon_direction = "E" if longitude >= 0 else "W"
    return (
        f"{abs(latitude):.4f}° {lat_direction}, {abs(longitude):.4f}° {lon_direction}"
    )


def format_observed_at(observed_at: datetime) -> str:
    return observed_at.strftime("%d/%m/%Y %H:%M")


def format_report(report: WeatherReport) -> str:
    """Format a weather report into a readable multi-line text block."""
    location = report.location
    conditions = report.conditions
    temperature_symbol = conditions.units.temperature_symbol
    wind_symbol = conditions.units.wind_speed_symbol

    return dedent(
        f"""
        {icon_for(conditions.condition_code)} {location.name}, {location.country}
        {format_coordinates(location.latitude, location.longitude)}
        Updated: {format_observed_at(conditions.observed_at)}

        Temperature: {conditions.temperature:.0f}{temperature_symbol}
        Feels like: {conditions.feels_like:.0f}{temperature_symbol}
        Conditions: {report.description} (WMO code {conditions.condition_code})
        Humidity: {conditions.humidity_percent}%
        Wind: {conditions.wind_speed:.0f} {wind_symbol}

        Country: {location.country}
        Region: {location.region or REGION_NOT_AVAILABLE}
        Latitude: {location.latitude:.4f}°
        Longitude: {location.longitude:.4f}°
    """
    ).strip()
