"""Weather relay: FastAPI backend forwarding location queries to the provider."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherapp.config.defaults import DEFAULT_CONFIG_PATH
from weatherapp.config.loader import load_config
from weatherapp.config.schema import AppConfig
from weatherapp.ingest.visual_crossing import ProviderError, VisualCrossingClient
from weatherapp.models.common import unit_group_for

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch weather data"


def create_app(
    config: AppConfig | None = None,
    provider: VisualCrossingClient | None = None,
) -> FastAPI:
    config = config or AppConfig()
    if provider is None:
        provider = VisualCrossingClient(
            api_key=config.provider.api_key,
            base_url=config.provider.base_url,
            timeout=config.provider.timeout,
        )

    app = FastAPI(title="Weather Relay", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.relay.cors_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.state.provider = provider

    @app.get("/api/weather")
    def get_weather(request: Request, loc: str = "", unit: str = ""):
        """Relay one provider request; the body is passed through untouched."""
        unit_group = unit_group_for(unit)
        try:
            data = request.app.state.provider.get_timeline(loc, unit_group)
        except ProviderError as e:
            logger.error("Error fetching weather for %r (%s): %s", loc, unit_group, e)
            return JSONResponse(status_code=500, content={"error": FETCH_FAILED})
        return JSONResponse(content=data)

    @app.get("/api/health")
    def get_health(request: Request):
        """Quick health check. Does not call the provider."""
        return {
            "status": "ok",
            "provider_configured": bool(request.app.state.provider.api_key),
        }

    return app


load_dotenv()
app = create_app(load_config(DEFAULT_CONFIG_PATH))
