from __future__ import annotations

from cityweather.conditions import describe
from cityweather.config import WeatherEnv
from cityweather.exceptions import WeatherLookupError, WeatherReportError
from cityweather.forecast.service import WeatherFetcher, coerce_units
from cityweather.forecast.views import UnitSystem
from cityweather.geocoding.service import Geocoder
from cityweather.report.views import WeatherReport
from cityweather.shared.logging_mixin import LoggingMixin


class WeatherOrchestrator(LoggingMixin):
    """
    Combines geocoding and the current conditions lookup into a single call.

    Failures from either stage are re-raised as WeatherReportError, which keeps
    the original error kind and chains the original exception. Nothing is
    retried.
    """

    def __init__(self, geocoder: Geocoder, fetcher: WeatherFetcher):
        self._geocoder = geocoder
        self._fetcher = fetcher

    @classmethod
    def from_settings(cls, settings: WeatherEnv | None = None) -> WeatherOrchestrator:
        settings = settings or WeatherEnv()
        geocoder = Geocoder(
            url=settings.geocoding_url,
            language=settings.geocoding_language,
            timeout=settings.request_timeout_seconds,
        )
        fetcher = WeatherFetcher(
            url=settings.forecast_url,
            timeout=settings.request_timeout_seconds,
        )
        return cls(geocoder, fetcher)

    async def get_report(
        self,
        city_query: str,
        units: UnitSystem | str = UnitSystem.METRIC,
    ) -> WeatherReport:
        try:
            unit_system = coerce_units(units)
            location = await self._geocoder.resolve(city_query)
            conditions = await self._fetcher.fetch(
                location.latitude, location.longitude, unit_system
            )
        except WeatherLookupError as e:
            self.logger.warning("Weather report for %r failed (%s): %s", city_query, e.kind, e)
            raise WeatherReportError(e) from e

        report = WeatherReport(
            location=location,
            conditions=conditions,
            description=describe(conditions.condition_code),
        )
        self.logger.info(
            "Weather report for %s, %s: %s",
            location.name,
            location.country,
            report.description,
        )
        return report


async def get_weather_report(
    city: str,
    units: UnitSystem | str = UnitSystem.METRIC,
    settings: WeatherEnv | None = None,
) -> WeatherReport:
    """Main function: resolve the city and fetch its current weather report."""
    orchestrator = WeatherOrchestrator.from_settings(settings)
    return await orchestrator.get_report(city, units)
