"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, SecretStr, field_validator

DEFAULT_ISSUE_LABELS = ["garden-alert", "automated"]


class AccuWeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: SecretStr
    location_key: str = Field(min_length=1)
    base_url: str = "http://dataservice.accuweather.com"
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    details: bool = True


class GitHubConfig(BaseModel):
    model_config = {"extra": "forbid"}

    token: SecretStr
    repository: str  # "owner/repo"
    api_url: str = "https://api.github.com"
    labels: list[str] = Field(default_factory=lambda: list(DEFAULT_ISSUE_LABELS))
    timeout_seconds: float = Field(default=30.0, gt=0.0)

    @field_validator("repository")
    @classmethod
    def _owner_repo_format(cls, v: str) -> str:
        parts = v.split("/")
        if len(parts) != 2 or not all(p.strip() for p in parts):
            raise ValueError(f"repository must be 'owner/repo', got {v!r}")
        return v

    @property
    def owner(self) -> str:
        return self.repository.split("/")[0]

    @property
    def repo(self) -> str:
        return self.repository.split("/")[1]


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    accuweather: AccuWeatherConfig
    github: GitHubConfig
