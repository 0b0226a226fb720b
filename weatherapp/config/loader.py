"""YAML config loader with environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path

import yaml

from weatherapp.config.defaults import API_KEY_ENV, PORT_ENV
from weatherapp.config.schema import AppConfig


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load and validate config from an optional YAML file.

    A missing file or an empty document yields the defaults. The provider API
    key and the relay port are then taken from the environment when set.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}

    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV)
    if api_key:
        raw.setdefault("provider", {})["api_key"] = api_key
    port = env.get(PORT_ENV)
    if port:
        raw.setdefault("relay", {})["port"] = int(port)

    return AppConfig(**raw)
