"""Shared test fixtures."""

import copy
import json
from pathlib import Path

import pytest
import yaml

from weatherapp.config.schema import AppConfig, ProviderConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def timeline_payload() -> dict:
    """A Visual Crossing timeline document: 7 days of 24 hours each."""
    with open(FIXTURE_DIR / "timeline_london.json") as f:
        return json.load(f)


@pytest.fixture
def payload_without_current(timeline_payload: dict) -> dict:
    data = copy.deepcopy(timeline_payload)
    del data["currentConditions"]
    return data


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(
        provider=ProviderConfig(
            base_url="https://test-provider.example.com", api_key="test-key"
        )
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "relay": {"port": 8080, "allowed_origins": ["https://weather.example.com"]},
        "dashboard": {"default_location": "Paris,FR", "default_unit": "°C"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
