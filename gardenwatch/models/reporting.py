"""Run reporting models."""

from dataclasses import dataclass, field

from gardenwatch.models.common import Alert, RunId


@dataclass
class RunSummary:
    run_id: RunId
    run_date: str
    location_key: str
    mode: str  # "publish" or "dry-run"
    days_fetched: int = 0
    alerts: list[Alert] = field(default_factory=list)
    alert_counts: dict[str, int] = field(default_factory=dict)
    issue_number: int | None = None
    failed_stage: str | None = None
    errors: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def succeeded(self) -> bool:
        return not self.errors
