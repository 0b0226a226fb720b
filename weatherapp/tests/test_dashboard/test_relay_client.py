"""Tests for the async relay client with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from weatherapp.dashboard.relay_client import RelayClient, RelayError
from weatherapp.models.weather import Query

RELAY = "https://test-relay.example.com"


@pytest.fixture
def relay() -> RelayClient:
    return RelayClient(base_url=RELAY)


class TestFetchWeather:
    @respx.mock
    def test_success(self, relay: RelayClient, timeline_payload: dict):
        route = respx.get(url__startswith=f"{RELAY}/api/weather").mock(
            return_value=httpx.Response(200, json=timeline_payload)
        )

        result = asyncio.run(relay.fetch_weather(Query("London,UK", "°F")))
        assert result == timeline_payload
        params = route.calls[0].request.url.params
        assert params["loc"] == "London,UK"
        assert params["unit"] == "°F"

    @respx.mock
    def test_relay_500(self, relay: RelayClient):
        respx.get(url__startswith=f"{RELAY}/api/weather").mock(
            return_value=httpx.Response(500, json={"error": "Failed to fetch weather data"})
        )

        with pytest.raises(RelayError) as exc_info:
            asyncio.run(relay.fetch_weather(Query("London,UK", "°F")))
        assert exc_info.value.status_code == 500

    @respx.mock
    def test_network_error(self, relay: RelayClient):
        respx.get(url__startswith=f"{RELAY}/api/weather").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        with pytest.raises(RelayError):
            asyncio.run(relay.fetch_weather(Query("London,UK", "°F")))

    @respx.mock
    def test_redirect_is_not_success(self, relay: RelayClient):
        respx.get(url__startswith=f"{RELAY}/api/weather").mock(
            return_value=httpx.Response(302, json={"moved": True})
        )

        with pytest.raises(RelayError) as exc_info:
            asyncio.run(relay.fetch_weather(Query("London,UK", "°F")))
        assert exc_info.value.status_code == 302
