"""Tests for the Visual Crossing client with mocked httpx."""

import httpx
import pytest
import respx

from weatherapp.ingest.visual_crossing import ProviderError, VisualCrossingClient
from weatherapp.models.common import UnitGroup

BASE = "https://test-provider.example.com"


@pytest.fixture
def provider() -> VisualCrossingClient:
    return VisualCrossingClient(api_key="test-key", base_url=BASE)


class TestGetTimeline:
    @respx.mock
    def test_success(self, provider: VisualCrossingClient, timeline_payload: dict):
        respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(200, json=timeline_payload)
        )

        result = provider.get_timeline("London,UK", UnitGroup.US)
        assert result == timeline_payload

    @respx.mock
    def test_key_and_unit_group_params(self, provider: VisualCrossingClient):
        route = respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(200, json={})
        )

        provider.get_timeline("London,UK", UnitGroup.US)
        provider.get_timeline("London,UK", UnitGroup.METRIC)

        assert route.call_count == 2
        first = route.calls[0].request.url.params
        second = route.calls[1].request.url.params
        assert first["key"] == "test-key"
        assert first["unitGroup"] == "us"
        assert second["unitGroup"] == "metric"

    @respx.mock
    def test_location_is_encoded_as_path_segment(self, provider: VisualCrossingClient):
        route = respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(200, json={})
        )

        provider.get_timeline("Paris?key=evil&unitGroup=base/x", UnitGroup.METRIC)

        url = route.calls[0].request.url
        assert url.path == "/timeline/Paris?key=evil&unitGroup=base/x"
        assert url.params.get_list("key") == ["test-key"]
        assert url.params.get_list("unitGroup") == ["metric"]

    @respx.mock
    def test_spaces_in_location(self, provider: VisualCrossingClient):
        route = respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(200, json={})
        )

        provider.get_timeline("New York, NY", UnitGroup.US)
        assert route.calls[0].request.url.path == "/timeline/New York, NY"

    @respx.mock
    def test_single_request_on_server_error(self, provider: VisualCrossingClient):
        route = respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(500, text="boom")
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.get_timeline("London,UK", UnitGroup.US)
        assert exc_info.value.status_code == 500
        assert route.call_count == 1

    @respx.mock
    def test_auth_failure(self, provider: VisualCrossingClient):
        respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(401, text="No API key or session found")
        )

        with pytest.raises(ProviderError) as exc_info:
            provider.get_timeline("London,UK", UnitGroup.US)
        assert exc_info.value.status_code == 401

    @respx.mock
    def test_timeout(self, provider: VisualCrossingClient):
        respx.get(url__startswith=f"{BASE}/timeline/").mock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        with pytest.raises(ProviderError):
            provider.get_timeline("London,UK", UnitGroup.US)

    @respx.mock
    def test_non_json_body(self, provider: VisualCrossingClient):
        respx.get(url__startswith=f"{BASE}/timeline/").mock(
            return_value=httpx.Response(200, text="Bad location")
        )

        with pytest.raises(ProviderError):
            provider.get_timeline("Nowhere", UnitGroup.US)

    def test_url_too_long(self, provider: VisualCrossingClient):
        with pytest.raises(ProviderError):
            provider.get_timeline(" " * 22000, UnitGroup.US)
