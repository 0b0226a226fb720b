"""Default endpoints and dashboard settings."""

VISUAL_CROSSING_BASE_URL = (
    "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services"
)
DEFAULT_PORT = 5000
DEFAULT_DEV_ORIGIN = "http://localhost:5173"
DEFAULT_RELAY_URL = f"http://localhost:{DEFAULT_PORT}"
DEFAULT_LOCATION = "London,UK"

# httpx's own default; no override unless configured
DEFAULT_TIMEOUT = 5.0

API_KEY_ENV = "VISUAL_CROSSING_API_KEY"
PORT_ENV = "PORT"

DEFAULT_CONFIG_PATH = "ops/configs/default.yaml"
