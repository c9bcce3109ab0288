"""GitHub issue publisher: files one issue per run holding every alert."""

import logging
from datetime import date

from gardenwatch.models.common import Alert
from gardenwatch.publish.github_client import GitHubClient, GitHubClientError
from gardenwatch.reporting.formatters import format_issue_body, format_issue_title

logger = logging.getLogger(__name__)


class GitHubIssuePublisher:
    def __init__(self, client: GitHubClient, labels: list[str]):
        self.client = client
        self.labels = labels

    def publish(self, alerts: list[Alert], today: date) -> int | None:
        """Create the alert issue. Returns the issue number, or None if no alerts."""
        if not alerts:
            logger.info("No garden alerts for today!")
            return None

        logger.info("Creating GitHub issue with alerts...")
        issue = self.client.create_issue(
            title=format_issue_title(alerts, today),
            body=format_issue_body(alerts, today),
            labels=self.labels,
        )
        number = issue.get("number")
        if not isinstance(number, int):
            raise GitHubClientError("Issue response has no number")

        logger.info("Garden alerts issue created successfully! Issue #%d", number)
        return number
