"""Output formatters for alert issues, forecast tables and run summaries."""

import json
from datetime import date

from gardenwatch.models.common import (
    MONTHS,
    WEEKDAYS,
    Alert,
    format_forecast_date,
    format_value,
)
from gardenwatch.models.forecast import DailyForecast
from gardenwatch.models.reporting import RunSummary

ISSUE_TRAILER = (
    "## Recommended Actions\n"
    "\n"
    "Please check your garden and take appropriate actions based on these alerts.\n"
    "\n"
    "---\n"
    "*This issue was automatically generated by the Garden Weather Alerts system.*"
)


def format_run_date(d: date) -> str:
    """Long run date, e.g. 'Monday, January 5, 2026'."""
    return f"{WEEKDAYS[d.weekday()]}, {MONTHS[d.month - 1]} {d.day}, {d.year}"


def format_issue_title(alerts: list[Alert], today: date) -> str:
    n = len(alerts)
    plural = "s" if n > 1 else ""
    return (
        f"🌱 Garden Weather Alert: {n} condition{plural} to watch for "
        f"{format_run_date(today)}"
    )


def format_issue_body(alerts: list[Alert], today: date) -> str:
    """Markdown issue body: heading, bulleted alerts, fixed trailer."""
    lines = [f"# Garden Weather Alerts for {format_run_date(today)}", ""]
    lines.extend(f"- {alert}" for alert in alerts)
    lines.append("")
    lines.append(ISSUE_TRAILER)
    return "\n".join(lines)


def format_forecast_table(forecasts: list[DailyForecast]) -> str:
    """Plain text forecast table for the `check` command."""
    lines = [
        f"{'Date':<16} {'Lo':>5} {'Hi':>5} {'Rain':>5}  Conditions",
        f"{'-' * 16} {'-' * 5} {'-' * 5} {'-' * 5}  {'-' * 20}",
    ]
    for f in forecasts:
        lo = format_value(f.temperature_low) + "F"
        hi = format_value(f.temperature_high) + "F"
        rain = format_value(f.rain_probability) + "%"
        lines.append(
            f"{format_forecast_date(f.date):<16} {lo:>5} {hi:>5} {rain:>5}  "
            f"{f.condition_summary}"
        )
    return "\n".join(lines)


def format_summary_text(s: RunSummary) -> str:
    """Plain text summary for logging."""
    lines = [
        f"=== Garden Alert Run ({s.mode}) | Run {s.run_id[:8]} ===",
        f"Location: {s.location_key} | Run date: {s.run_date}",
        f"Forecast days: {s.days_fetched}",
    ]
    if s.alert_counts:
        counts = ", ".join(f"{v} {k}" for k, v in s.alert_counts.items())
        lines.append(f"Alerts: {len(s.alerts)} ({counts})")
    else:
        lines.append("Alerts: 0")
    if s.issue_number is not None:
        lines.append(f"Issue: #{s.issue_number}")
    if s.errors:
        lines.append(f"Failed at: {s.failed_stage} | Errors: {len(s.errors)}")
    lines.append(f"Duration: {s.duration_seconds:.1f}s")
    return "\n".join(lines)


def format_summary_json(s: RunSummary) -> str:
    """JSON summary for programmatic consumption."""
    data = {
        "run_id": s.run_id,
        "run_date": s.run_date,
        "location_key": s.location_key,
        "mode": s.mode,
        "days_fetched": s.days_fetched,
        "alerts": s.alerts,
        "alert_counts": s.alert_counts,
        "issue_number": s.issue_number,
        "failed_stage": s.failed_stage,
        "errors": s.errors,
        "duration_seconds": s.duration_seconds,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
