"""Daily forecast data models."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyForecast:
    date: date
    condition_summary: str
    temperature_high: float  # degrees F
    temperature_low: float  # degrees F
    rain_probability: float  # percent, 0-100
