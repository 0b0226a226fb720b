"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapp.config.defaults import (
    DEFAULT_DEV_ORIGIN,
    DEFAULT_LOCATION,
    DEFAULT_PORT,
    DEFAULT_RELAY_URL,
    DEFAULT_TIMEOUT,
    VISUAL_CROSSING_BASE_URL,
)
from weatherapp.models.common import Unit


class ProviderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = VISUAL_CROSSING_BASE_URL
    api_key: str = ""
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)


class RelayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    allowed_origins: list[str] = []
    dev_origin: str = DEFAULT_DEV_ORIGIN

    def cors_origins(self) -> list[str]:
        origins = list(self.allowed_origins)
        if self.dev_origin and self.dev_origin not in origins:
            origins.append(self.dev_origin)
        return origins


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    relay_url: str = DEFAULT_RELAY_URL
    default_location: str = DEFAULT_LOCATION
    default_unit: Unit = Unit.FAHRENHEIT
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    provider: ProviderConfig = ProviderConfig()
    relay: RelayConfig = RelayConfig()
    dashboard: DashboardConfig = DashboardConfig()
