from __future__ import annotations

import re

import aiohttp
from pydantic import ValidationError

from cityweather.exceptions import InvalidInputError, InvalidResponseError, NotFoundError
from cityweather.geocoding.views import (
    Location,
    OpenMeteoGeocodingResponse,
    OpenMeteoGeocodingResult,
)
from cityweather.shared.http import get_json
from cityweather.shared.logging_mixin import LoggingMixin

_CITY_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ\s-]+")
_MIN_CITY_LENGTH = 2


def _invalid_fields(error: ValidationError) -> str:
    return ", ".join(str(detail["loc"][0]) for detail in error.errors() if detail["loc"])


def validate_city_query(city_query: str) -> str:
    """
    Check a free-text city name and return it trimmed.

    Only letters (including Latin-1 accented ones), whitespace and hyphens are
    accepted, and at least two characters must remain after trimming.
    """
    if not isinstance(city_query, str):
        raise InvalidInputError("City name is required and must be a string")

    city = city_query.strip()
    if not city:
        raise InvalidInputError("City name must not be empty")

    if len(city) < _MIN_CITY_LENGTH:
        raise InvalidInputError(
            f"City name must have at least {_MIN_CITY_LENGTH} characters"
        )

    if not _CITY_PATTERN.fullmatch(city):
        raise InvalidInputError("City name contains invalid characters")

    return city


class Geocoder(LoggingMixin):
    """Resolves city names to coordinates via the Open-Meteo geocoding API."""

    DEFAULT_URL = "https://geocoding-api.open-meteo.com/v1/search"
    UNKNOWN_COUNTRY = "Unknown"

    def __init__(
        self,
        url: str = DEFAULT_URL,
        language: str = "en",
        session: aiohttp.ClientSession | None = None,
        timeout: float | None = None,
    ):
        self._url = url
        self._language = language
        self._session = session
        self._timeout = timeout

    async def resolve(self, city_query: str) -> Location:
        city = validate_city_query(city_query)

        self.logger.debug("Resolving coordinates for %r", city)
        raw_data = await get_json(
            self._url,
            self.build_params(city),
            session=self._session,
            timeout=self._timeout,
        )

        candidate = self._top_candidate(city, raw_data)
        location = self._to_location(candidate)

        self.logger.debug(
            "Resolved %r to %s (%.4f, %.4f)",
            city,
            location.name,
            location.latitude,
            location.longitude,
        )
        return location

    def build_params(self, city: str) -> dict[str, str]:
        return {
            "name": city,
            "count": "1",
            "language": self._language,
            "format": "json",
        }

    def _top_candidate(self, city: str, raw_data: object) -> OpenMeteoGeocodingResult:
        try:
            response = OpenMeteoGeocodingResponse.model_validate(raw_data)
        except ValidationError as e:
            self.logger.warning("Malformed geocoding response for %r: %s", city, e)
            raise InvalidResponseError("Invalid geocoding data received from the API") from e

        if not response.results:
            raise NotFoundError(
                f'City "{city}" not found. Check the spelling and try again'
            )

        try:
            return OpenMeteoGeocodingResult.model_validate(response.results[0])
        except ValidationError as e:
            self.logger.warning("Malformed geocoding candidate for %r: %s", city, e)
            raise InvalidResponseError(
                f"Invalid geocoding candidate received from the API ({_invalid_fields(e)})"
            ) from e

    def _to_location(self, candidate: OpenMeteoGeocodingResult) -> Location:
        try:
            return Location(
                name=candidate.name,
                country=candidate.country or self.UNKNOWN_COUNTRY,
                latitude=candidate.latitude,
                longitude=candidate.longitude,
                region=candidate.admin1,
            )
        except ValidationError as e:
            raise InvalidResponseError(
                f"Invalid coordinate data received from the API ({_invalid_fields(e)})"
            ) from e
