"""Alert pipeline: fetch -> analyze -> publish for one run."""

import logging
import time
import uuid
from datetime import date

from gardenwatch.analysis.conditions import evaluate
from gardenwatch.config.loader import config_hash
from gardenwatch.config.schema import AppConfig
from gardenwatch.ingest.accuweather_client import AccuWeatherClient
from gardenwatch.ingest.forecast_fetcher import ForecastFetcher
from gardenwatch.models.common import local_today
from gardenwatch.models.reporting import RunSummary
from gardenwatch.publish.dry_run import DryRunPublisher
from gardenwatch.publish.github_client import GitHubClient
from gardenwatch.publish.issue_publisher import GitHubIssuePublisher
from gardenwatch.reporting.formatters import format_summary_text
from gardenwatch.reporting.run_summarizer import RunSummarizer

logger = logging.getLogger(__name__)


def build_fetcher(config: AppConfig) -> ForecastFetcher:
    aw = config.accuweather
    client = AccuWeatherClient(
        api_key=aw.api_key.get_secret_value(),
        base_url=aw.base_url,
        timeout=aw.timeout_seconds,
        details=aw.details,
    )
    return ForecastFetcher(client)


def build_publisher(config: AppConfig, dry_run: bool = False) -> GitHubIssuePublisher | DryRunPublisher:
    if dry_run:
        return DryRunPublisher()
    gh = config.github
    client = GitHubClient(
        token=gh.token.get_secret_value(),
        owner=gh.owner,
        repo=gh.repo,
        base_url=gh.api_url,
        timeout=gh.timeout_seconds,
    )
    return GitHubIssuePublisher(client, gh.labels)


class AlertPipeline:
    def __init__(
        self,
        config: AppConfig,
        fetcher: ForecastFetcher | None = None,
        publisher: GitHubIssuePublisher | DryRunPublisher | None = None,
        dry_run: bool = False,
    ):
        self.config = config
        self.fetcher = fetcher or build_fetcher(config)
        self.publisher = publisher or build_publisher(config, dry_run)
        self.mode = "dry-run" if isinstance(self.publisher, DryRunPublisher) else "publish"

    def run(self, today: date | None = None) -> RunSummary:
        """Execute one run. A fault in any stage ends the run with nothing published."""
        start_time = time.monotonic()
        run_id = str(uuid.uuid4())
        today = today or local_today()
        location_key = self.config.accuweather.location_key

        summarizer = RunSummarizer(run_id, today.isoformat(), location_key, self.mode)
        logger.info(
            "Run %s started (mode=%s, config=%s)",
            run_id[:8], self.mode, config_hash(self.config),
        )

        stage = "fetch"
        try:
            # 1. FETCH
            logger.info("Fetching weather forecast...")
            forecasts = self.fetcher.fetch(location_key)
            summarizer.record_forecast(forecasts)

            # 2. ANALYZE
            stage = "analyze"
            logger.info("Analyzing garden conditions...")
            triggered = evaluate(forecasts)
            summarizer.record_alerts(triggered)
            logger.info(
                "%d alert(s) from %d forecast day(s)", len(triggered), len(forecasts)
            )

            # 3. PUBLISH
            stage = "publish"
            issue_number = self.publisher.publish(
                [t.message for t in triggered], today
            )
            summarizer.record_issue(issue_number)
            logger.info("Weather alert process completed successfully!")

        except Exception as e:
            logger.exception("Error in weather alert process (stage=%s)", stage)
            summarizer.record_failure(stage, str(e))

        summarizer.record_duration(time.monotonic() - start_time)
        summary = summarizer.finalize()
        logger.info("\n%s", format_summary_text(summary))
        return summary
