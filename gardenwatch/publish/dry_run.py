"""Dry-run publisher: logs the issue it would create."""

import logging
from datetime import date

from gardenwatch.models.common import Alert
from gardenwatch.reporting.formatters import format_issue_body, format_issue_title

logger = logging.getLogger(__name__)


class DryRunPublisher:
    def __init__(self) -> None:
        self.last_title: str | None = None
        self.last_body: str | None = None

    def publish(self, alerts: list[Alert], today: date) -> int | None:
        if not alerts:
            logger.info("No garden alerts for today!")
            return None

        self.last_title = format_issue_title(alerts, today)
        self.last_body = format_issue_body(alerts, today)
        logger.info("DRY-RUN: would create issue %r", self.last_title)
        logger.debug("DRY-RUN issue body:\n%s", self.last_body)
        return None
