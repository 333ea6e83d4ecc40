"""Shared GET-JSON helper for the Open-Meteo endpoints."""

from __future__ import annotations

from typing import Any

import aiohttp

from cityweather.exceptions import InvalidResponseError, NetworkError
from cityweather.shared.logging_mixin import logger

CONNECTION_ERROR_MSG = "connection error, check your internet connection and try again"
TIMEOUT_ERROR_MSG = "request timed out, please try again"


def build_timeout(seconds: float | None) -> aiohttp.ClientTimeout:
    if seconds is None:
        # aiohttp otherwise applies its own five minute total limit
        return aiohttp.ClientTimeout()
    return aiohttp.ClientTimeout(total=seconds)


async def get_json(
    url: str,
    params: dict[str, str],
    *,
    session: aiohttp.ClientSession | None = None,
    timeout: float | None = None,
) -> Any:
    """
    Perform a GET request and decode the JSON body.

    Transport failures are raised as NetworkError, undecodable bodies as
    InvalidResponseError. When no session is given a short-lived one is opened.
    """
    if session is not None:
        return await _request_json(session, url, params, build_timeout(timeout))

    async with aiohttp.ClientSession(timeout=build_timeout(timeout)) as owned_session:
        return await _request_json(owned_session, url, params, None)


async def _request_json(
    session: aiohttp.ClientSession,
    url: str,
    params: dict[str, str],
    timeout: aiohttp.ClientTimeout | None,
) -> Any:
    logger.debug("GET %s params=%s", url, params)

    request_kwargs: dict[str, Any] = {"params": params}
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    try:
        async with session.get(url, **request_kwargs) as response:
            if not 200 <= response.status < 300:
                raise NetworkError(f"HTTP error: {response.status} - {response.reason}")

            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise InvalidResponseError(f"response body is not valid JSON: {e}") from e

    except TimeoutError as e:
        raise NetworkError(TIMEOUT_ERROR_MSG) from e
    except aiohttp.ClientError as e:
        raise NetworkError(f"{CONNECTION_ERROR_MSG}: {e}") from e
