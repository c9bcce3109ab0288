"""Config loader: optional YAML settings overlaid with environment parameters."""

import hashlib
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gardenwatch.config.schema import AppConfig

# Environment variable -> (section, field)
ENV_PARAMETERS: dict[str, tuple[str, str]] = {
    "ACCUWEATHER_API_KEY": ("accuweather", "api_key"),
    "LOCATION_KEY": ("accuweather", "location_key"),
    "GITHUB_TOKEN": ("github", "token"),
    "GITHUB_REPOSITORY": ("github", "repository"),
}


class ConfigError(Exception):
    """Raised when startup configuration is missing or invalid."""


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """Build and validate the run configuration.

    Non-secret settings (base URLs, timeouts, labels) may come from a YAML
    file. The four run parameters always come from `environ` and override
    anything in the file.
    """
    if environ is None:
        environ = os.environ

    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

    missing = [name for name in ENV_PARAMETERS if not environ.get(name)]
    if missing:
        raise ConfigError(
            "Missing required environment variables: " + ", ".join(missing)
        )

    for name, (section, key) in ENV_PARAMETERS.items():
        raw[section] = {**(raw.get(section) or {}), key: environ[name]}

    try:
        return AppConfig(**raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def config_hash(config: AppConfig) -> str:
    """Compute a deterministic SHA256 hash of the config (secrets masked)."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]
