"""CLI entry point for the garden weather alerts pipeline."""

import argparse
import logging
from datetime import date

from gardenwatch.analysis.conditions import analyze
from gardenwatch.config.loader import ConfigError, load_config
from gardenwatch.pipeline.alert_pipeline import AlertPipeline, build_fetcher
from gardenwatch.publish.dry_run import DryRunPublisher
from gardenwatch.reporting.formatters import format_forecast_table, format_summary_json


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gardenwatch",
        description="Garden weather alerts from a daily forecast",
    )
    parser.add_argument("--config", default=None, help="Optional config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # run
    run_p = sub.add_parser("run", help="Fetch, analyze and publish alerts")
    run_p.add_argument(
        "--dry-run", action="store_true", help="Print the issue instead of creating it"
    )
    run_p.add_argument(
        "--date", type=date.fromisoformat, default=None,
        help="Run date for the issue title (YYYY-MM-DD, default today)",
    )
    run_p.add_argument(
        "--json", action="store_true", help="Print the run summary as JSON"
    )

    # check
    sub.add_parser("check", help="Show forecast and alerts without publishing")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display resolved config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 2

    if args.command == "run":
        return _cmd_run(config, args)
    elif args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_run(config, args) -> int:
    publisher = DryRunPublisher() if args.dry_run else None
    pipeline = AlertPipeline(config, publisher=publisher)
    summary = pipeline.run(today=args.date)

    if args.json:
        print(format_summary_json(summary))
        return 0 if summary.succeeded else 1

    if publisher is not None and publisher.last_title is not None:
        print(publisher.last_title)
        print()
        print(publisher.last_body)
    elif summary.succeeded and not summary.alerts:
        print("No garden alerts for today!")
    elif summary.issue_number is not None:
        print(f"Created issue #{summary.issue_number}")

    return 0 if summary.succeeded else 1


def _cmd_check(config, args) -> int:
    fetcher = build_fetcher(config)
    try:
        forecasts = fetcher.fetch(config.accuweather.location_key)
        alerts = analyze(forecasts)
    except Exception as e:
        logging.getLogger(__name__).exception("Check failed")
        print(f"Error: {e}")
        return 1

    print(f"Location: {config.accuweather.location_key}")
    print(format_forecast_table(forecasts))
    print()
    if alerts:
        for alert in alerts:
            print(f"- {alert}")
    else:
        print("No garden alerts for today!")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
