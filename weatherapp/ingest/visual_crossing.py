"""Visual Crossing Timeline API client."""

import logging
from urllib.parse import quote

import httpx

from weatherapp.config.defaults import DEFAULT_TIMEOUT, VISUAL_CROSSING_BASE_URL
from weatherapp.models.common import UnitGroup

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when the weather provider cannot deliver a JSON payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class VisualCrossingClient:
    def __init__(
        self,
        api_key: str = "",
        base_url: str = VISUAL_CROSSING_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def timeline_url(self, location: str) -> str:
        # The location is a single path segment; '/', '?' and '&' are escaped.
        return f"{self.base_url}/timeline/{quote(location, safe='')}"

    def get_timeline(self, location: str, unit_group: UnitGroup) -> dict:
        """Fetch the timeline document for a location. One request, no retry."""
        url = self.timeline_url(location)
        params = {"key": self.api_key, "unitGroup": str(unit_group)}
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"HTTP {e.response.status_code}: {e.response.text[:200]}",
                e.response.status_code,
            ) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise ProviderError(f"Request failed: {e}") from e
        except ValueError as e:
            raise ProviderError(f"Invalid JSON from provider: {e}") from e
