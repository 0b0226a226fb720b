"""Async client for the weather relay."""

import logging

import httpx

from weatherapp.config.defaults import DEFAULT_RELAY_URL, DEFAULT_TIMEOUT
from weatherapp.models.weather import Query

logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Raised when the relay does not return a usable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RelayClient:
    def __init__(self, base_url: str = DEFAULT_RELAY_URL, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def fetch_weather(self, query: Query) -> dict:
        url = f"{self.base_url}/api/weather"
        params = {"loc": query.location, "unit": query.unit}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=params)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise RelayError(f"Request failed: {e}") from e
        if not resp.is_success:
            raise RelayError(f"Weather data not available (HTTP {resp.status_code})", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise RelayError(f"Invalid JSON from relay: {e}") from e
