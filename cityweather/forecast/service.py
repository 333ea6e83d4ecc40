from __future__ import annotations

from datetime import timedelta, timezone
from typing import Any

import aiohttp
from pydantic import ValidationError

from cityweather.exceptions import InvalidInputError, InvalidResponseError
from cityweather.forecast.views import (
    CurrentConditions,
    OpenMeteoCurrentResponse,
    OpenMeteoForecastResponse,
    UnitSystem,
)
from cityweather.shared.http import get_json
from cityweather.shared.logging_mixin import LoggingMixin

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "weather_code",
    "wind_speed_10m",
)


def coerce_units(units: UnitSystem | str) -> UnitSystem:
    try:
        return UnitSystem(units)
    except ValueError as e:
        raise InvalidInputError(
            "Invalid unit system. Use 'metric' or 'imperial'"
        ) from e


def _validate_coordinate(value: Any, name: str, limit: float) -> None:
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    # NaN fails the range comparison as well
    if not is_number or not -limit <= value <= limit:
        raise InvalidInputError(
            f"Invalid {name}. Must be between {-limit:g} and {limit:g}"
        )


class WeatherFetcher(LoggingMixin):
    """Fetches current conditions for a coordinate pair from Open-Meteo."""

    DEFAULT_URL = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        url: str = DEFAULT_URL,
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        self._url = url
        self._session = session
        self._timeout = timeout

    async def fetch(
        self,
        latitude: float,
        longitude: float,
        units: UnitSystem | str = UnitSystem.METRIC,
    ) -> CurrentConditions:
        params = self.build_params(latitude, longitude, units)
        unit_system = coerce_units(units)

        self.logger.debug(
            "Fetching current conditions for (%.4f, %.4f) in %s units",
            latitude,
            longitude,
            unit_system,
        )
        raw_data = await get_json(
            self._url, params, session=self._session, timeout=self._timeout
        )

        return self._to_conditions(raw_data, unit_system)

    def build_params(
        self,
        latitude: float,
        longitude: float,
        units: UnitSystem | str = UnitSystem.METRIC,
    ) -> dict[str, str]:
        _validate_coordinate(latitude, "latitude", 90.0)
        _validate_coordinate(longitude, "longitude", 180.0)
        unit_system = coerce_units(units)

        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "current": ",".join(CURRENT_FIELDS),
            "timezone": "auto",
        }

        # Metric matches the service defaults, so no qualifiers are sent for it
        if unit_system is UnitSystem.IMPERIAL:
            params["temperature_unit"] = "fahrenheit"
            params["wind_speed_unit"] = "mph"

        return params

    def _to_conditions(
        self, raw_data: Any, unit_system: UnitSystem
    ) -> CurrentConditions:
        try:
            response = OpenMeteoForecastResponse.model_validate(raw_data)
        except ValidationError as e:
            self.logger.warning("Malformed forecast response: %s", e)
            raise InvalidResponseError("Invalid weather data received from the API") from e

        if not response.current:
            raise InvalidResponseError("Weather data is not available at the moment")

        try:
            current = OpenMeteoCurrentResponse.model_validate(response.current)
        except ValidationError as e:
            invalid_fields = ", ".join(
                str(error["loc"][0]) for error in e.errors() if error["loc"]
            )
            self.logger.warning("Malformed current conditions: %s", invalid_fields)
            raise InvalidResponseError(
                f"Invalid weather data received from the API ({invalid_fields})"
            ) from e

        observed_at = current.time
        if observed_at.tzinfo is None and response.utc_offset_seconds is not None:
            observed_at = observed_at.replace(
                tzinfo=timezone(timedelta(seconds=response.utc_offset_seconds))
            )

        try:
            return CurrentConditions(
                temperature=current.temperature_2m,
                feels_like=current.apparent_temperature,
                humidity_percent=current.relative_humidity_2m,
                wind_speed=current.wind_speed_10m,
                condition_code=current.weather_code,
                observed_at=observed_at,
                units=unit_system,
            )
        except ValidationError as e:
            raise InvalidResponseError(
                f"Weather values out of range received from the API: {e.error_count()} error(s)"
            ) from e
