"""Run summarizer: aggregates pipeline outputs into a RunSummary."""

from gardenwatch.analysis.conditions import TriggeredAlert
from gardenwatch.models.forecast import DailyForecast
from gardenwatch.models.reporting import RunSummary


class RunSummarizer:
    def __init__(self, run_id: str, run_date: str, location_key: str, mode: str):
        self.summary = RunSummary(
            run_id=run_id, run_date=run_date, location_key=location_key, mode=mode
        )

    def record_forecast(self, forecasts: list[DailyForecast]) -> None:
        self.summary.days_fetched = len(forecasts)

    def record_alerts(self, triggered: list[TriggeredAlert]) -> None:
        self.summary.alerts = [t.message for t in triggered]
        counts: dict[str, int] = {}
        for t in triggered:
            key = t.kind.value
            counts[key] = counts.get(key, 0) + 1
        self.summary.alert_counts = counts

    def record_issue(self, issue_number: int | None) -> None:
        self.summary.issue_number = issue_number

    def record_failure(self, stage: str, error: str) -> None:
        self.summary.failed_stage = stage
        self.summary.errors.append(error)

    def record_duration(self, seconds: float) -> None:
        self.summary.duration_seconds = seconds

    def finalize(self) -> RunSummary:
        return self.summary
