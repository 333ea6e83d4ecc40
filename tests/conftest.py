"""Pytest configuration and fixtures."""

import asyncio
import logging
from typing import Any, AsyncGenerator

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from cityweather.config import WeatherEnv
from cityweather.shared.logging_mixin import LIBRARY_NAME


SAO_PAULO_GEOCODING = {
    "results": [
        {
            "name": "São Paulo",
            "country": "Brazil",
            "latitude": -23.55,
            "longitude": -46.63,
        }
    ]
}

SAO_PAULO_FORECAST = {
    "latitude": -23.5,
    "longitude": -46.625,
    "utc_offset_seconds": -10800,
    "timezone": "America/Sao_Paulo",
    "current": {
        "time": "2024-05-10T14:15",
        "interval": 900,
        "temperature_2m": 24.3,
        "relative_humidity_2m": 61,
        "apparent_temperature": 25.1,
        "weather_code": 61,
        "wind_speed_10m": 11.2,
    },
}


class FakeOpenMeteo:
    """Local stand-in for the geocoding and forecast endpoints."""

    GEOCODING_PATH = "/v1/search"
    FORECAST_PATH = "/v1/forecast"

    def __init__(self) -> None:
        self.geocoding_payload: Any = SAO_PAULO_GEOCODING
        self.forecast_payload: Any = SAO_PAULO_FORECAST
        self.geocoding_status = 200
        self.forecast_status = 200
        self.raw_body: str | None = None
        self.delay_seconds = 0.0
        self.requests: list[tuple[str, dict[str, str]]] = []
        self.geocoding_url = ""
        self.forecast_url = ""

    def build_app(self) -> web.Application:
        app = web.Application()
        app.router.add_get(self.GEOCODING_PATH, self._search)
        app.router.add_get(self.FORECAST_PATH, self._forecast)
        return app

    def queries_for(self, path: str) -> list[dict[str, str]]:
        return [query for request_path, query in self.requests if request_path == path]

    async def _search(self, request: web.Request) -> web.Response:
        return await self._respond(request, self.geocoding_payload, self.geocoding_status)

    async def _forecast(self, request: web.Request) -> web.Response:
        return await self._respond(request, self.forecast_payload, self.forecast_status)

    async def _respond(
        self, request: web.Request, payload: Any, status: int
    ) -> web.Response:
        self.requests.append((request.path, dict(request.query)))

        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        if status != 200:
            return web.json_response(
                {"error": True, "reason": "Simulated failure"}, status=status
            )

        if self.raw_body is not None:
            return web.Response(text=self.raw_body, content_type="text/html")

        return web.json_response(payload)


@pytest_asyncio.fixture
async def open_meteo() -> AsyncGenerator[FakeOpenMeteo, None]:
    fake = FakeOpenMeteo()
    server = TestServer(fake.build_app())
    await server.start_server()

    fake.geocoding_url = str(server.make_url(FakeOpenMeteo.GEOCODING_PATH))
    fake.forecast_url = str(server.make_url(FakeOpenMeteo.FORECAST_PATH))

    yield fake

    await server.close()


@pytest.fixture
def test_settings(open_meteo: FakeOpenMeteo) -> WeatherEnv:
    return WeatherEnv(
        geocoding_url=open_meteo.geocoding_url,
        forecast_url=open_meteo.forecast_url,
        geocoding_language="en",
        request_timeout_seconds=5.0,
    )


@pytest.fixture(autouse=True)
def reset_library_logging():
    yield

    lib_logger = logging.getLogger(LIBRARY_NAME)
    lib_logger.handlers = [
        handler for handler in lib_logger.handlers if isinstance(handler, logging.NullHandler)
    ]
    lib_logger.setLevel(logging.NOTSET)
