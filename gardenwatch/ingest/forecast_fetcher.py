"""Forecast fetcher: retrieves the daily forecast window for a location."""

import logging
from datetime import date

from gardenwatch.ingest.accuweather_client import AccuWeatherClient, ForecastRetrievalError
from gardenwatch.models.forecast import DailyForecast

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: AccuWeatherClient):
        self.client = client

    def fetch(self, location_key: str) -> list[DailyForecast]:
        """Fetch and parse the forecast window, oldest day first.

        One request per call, no cache. Errors propagate to the caller.
        """
        raw = self.client.get_daily_forecast(location_key)
        forecasts = parse_daily_forecasts(raw)
        logger.debug(
            "Forecast fetched for %s: %d days", location_key, len(forecasts)
        )
        return forecasts


def parse_daily_forecasts(raw: dict) -> list[DailyForecast]:
    """Map an AccuWeather daily forecast response to DailyForecast records.

    Structural problems raise ForecastRetrievalError. Values are kept exactly
    as the source sent them; the analyzer decides what is usable.
    """
    days = raw.get("DailyForecasts")
    if not isinstance(days, list):
        raise ForecastRetrievalError("Response has no DailyForecasts list")

    forecasts: list[DailyForecast] = []
    for i, d in enumerate(days):
        try:
            forecasts.append(
                DailyForecast(
                    date=_parse_local_date(d["Date"]),
                    condition_summary=d["Day"].get("IconPhrase", ""),
                    temperature_high=d["Temperature"]["Maximum"]["Value"],
                    temperature_low=d["Temperature"]["Minimum"]["Value"],
                    rain_probability=d["Day"]["RainProbability"],
                )
            )
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ForecastRetrievalError(
                f"Malformed forecast entry {i}: {e!r}"
            ) from e
    return forecasts


def _parse_local_date(value: str) -> date:
    """Take the calendar date of the location, ignoring time and offset.

    AccuWeather dates look like "2026-02-11T07:00:00-05:00".
    """
    return date.fromisoformat(value[:10])
