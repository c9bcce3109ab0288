"""Tests for config loading from YAML and environment parameters."""

from pathlib import Path

import pytest

from gardenwatch.config.loader import ConfigError, config_hash, load_config


class TestLoadConfig:
    def test_env_only(self, env: dict[str, str]):
        config = load_config(environ=env)
        assert config.accuweather.api_key.get_secret_value() == "aw-test-key"
        assert config.accuweather.location_key == "349727"
        assert config.github.token.get_secret_value() == "gh-test-token"
        assert config.github.owner == "octo"
        assert config.github.repo == "garden"

    def test_yaml_settings_merged(self, config_yaml_path: Path, env: dict[str, str]):
        config = load_config(config_yaml_path, environ=env)
        assert config.accuweather.timeout_seconds == 10.0
        assert config.github.labels == ["garden-alert"]
        assert config.accuweather.location_key == "349727"

    def test_env_overrides_yaml(self, tmp_path: Path, env: dict[str, str]):
        path = tmp_path / "c.yaml"
        path.write_text("accuweather:\n  location_key: '111'\n")
        config = load_config(path, environ=env)
        assert config.accuweather.location_key == "349727"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path, env: dict[str, str]):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path, environ=env)
        assert config.github.labels == ["garden-alert", "automated"]

    @pytest.mark.parametrize(
        "missing",
        ["ACCUWEATHER_API_KEY", "LOCATION_KEY", "GITHUB_TOKEN", "GITHUB_REPOSITORY"],
    )
    def test_missing_parameter(self, env: dict[str, str], missing: str):
        del env[missing]
        with pytest.raises(ConfigError, match=missing):
            load_config(environ=env)

    def test_blank_parameter_counts_as_missing(self, env: dict[str, str]):
        env["GITHUB_TOKEN"] = ""
        with pytest.raises(ConfigError, match="GITHUB_TOKEN"):
            load_config(environ=env)

    def test_bad_repository(self, env: dict[str, str]):
        env["GITHUB_REPOSITORY"] = "no-slash"
        with pytest.raises(ConfigError, match="owner/repo"):
            load_config(environ=env)

    def test_unknown_yaml_key(self, tmp_path: Path, env: dict[str, str]):
        path = tmp_path / "bad.yaml"
        path.write_text("accuweather:\n  bogus: 1\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path, environ=env)

    def test_missing_file(self, tmp_path: Path, env: dict[str, str]):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.yaml", environ=env)


class TestConfigHash:
    def test_deterministic(self, env: dict[str, str]):
        assert config_hash(load_config(environ=env)) == config_hash(load_config(environ=env))

    def test_secrets_not_in_dump(self, env: dict[str, str]):
        dumped = load_config(environ=env).model_dump_json()
        assert "aw-test-key" not in dumped
        assert "gh-test-token" not in dumped

    def test_different_location_different_hash(self, env: dict[str, str]):
        other = dict(env, LOCATION_KEY="999")
        assert config_hash(load_config(environ=env)) != config_hash(load_config(environ=other))
