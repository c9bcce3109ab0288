"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from gardenwatch.config.loader import load_config
from gardenwatch.config.schema import AppConfig

TEST_ENV = {
    "ACCUWEATHER_API_KEY": "aw-test-key",
    "LOCATION_KEY": "349727",
    "GITHUB_TOKEN": "gh-test-token",
    "GITHUB_REPOSITORY": "octo/garden",
}


@pytest.fixture
def env() -> dict[str, str]:
    """Return a complete set of run parameters."""
    return dict(TEST_ENV)


@pytest.fixture
def app_config(env: dict[str, str]) -> AppConfig:
    """Return an AppConfig pointing at test hosts."""
    config = load_config(environ=env)
    return config.model_copy(
        update={
            "accuweather": config.accuweather.model_copy(
                update={"base_url": "https://test-aw.example.com"}
            ),
            "github": config.github.model_copy(
                update={"api_url": "https://test-gh.example.com"}
            ),
        }
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "accuweather": {"timeout_seconds": 10.0},
        "github": {"labels": ["garden-alert"]},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def accuweather_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "accuweather_5day.json") as f:
        return json.load(f)
