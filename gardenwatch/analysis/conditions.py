"""Garden condition analyzer: maps a daily forecast window to alert messages.

Per-day rules run in a fixed order (frost, heat, heavy rain, dry spell) and an
alert is emitted as soon as its rule holds. Rules are independent, so one day
can produce up to four alerts. No validation is performed: malformed records
raise to the caller.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from typing import TypeAlias

from gardenwatch.models.common import (
    Alert,
    AlertKind,
    format_forecast_date,
    format_value,
)
from gardenwatch.models.forecast import DailyForecast

FROST_MAX_LOW_F = 36
HEAT_MIN_HIGH_F = 90
HEAVY_RAIN_MIN_PCT = 70
DRY_SPELL_MAX_RAIN_PCT = 30
# Dry spell is only checked on the first three days of the window.
DRY_SPELL_WINDOW_DAYS = 3


@dataclass(frozen=True)
class TriggeredAlert:
    kind: AlertKind
    date: date
    message: Alert


def check_frost(day: DailyForecast, label: str) -> Alert | None:
    if day.temperature_low <= FROST_MAX_LOW_F:
        return (
            f"🥶 FROST ALERT for {label}: Overnight low of "
            f"{format_value(day.temperature_low)}°F - Cover sensitive plants!"
        )
    return None


def check_heat(day: DailyForecast, label: str) -> Alert | None:
    if day.temperature_high >= HEAT_MIN_HIGH_F:
        return (
            f"🔥 HEAT ALERT for {label}: High of "
            f"{format_value(day.temperature_high)}°F - "
            "Water plants thoroughly in morning/evening!"
        )
    return None


def check_heavy_rain(day: DailyForecast, label: str) -> Alert | None:
    if day.rain_probability >= HEAVY_RAIN_MIN_PCT:
        return (
            f"💧 RAIN ALERT for {label}: {format_value(day.rain_probability)}% "
            "chance of precipitation - Hold off on fertilizing!"
        )
    return None


def check_dry_spell(
    forecasts: Sequence[DailyForecast], index: int, label: str
) -> Alert | None:
    """Two-day low-rain check confined to the first three days.

    Fires when day `index` and the day before it (if any) are both below the
    dry threshold. Adjacent positions are taken as consecutive days. Nothing
    past DRY_SPELL_WINDOW_DAYS is ever checked.
    """
    if index >= DRY_SPELL_WINDOW_DAYS:
        return None
    if forecasts[index].rain_probability >= DRY_SPELL_MAX_RAIN_PCT:
        return None
    if index > 0 and forecasts[index - 1].rain_probability >= DRY_SPELL_MAX_RAIN_PCT:
        return None
    return (
        f"🏜️ DRY SPELL for {label}: Low rain chance continues - "
        "Deep water your garden!"
    )


DayRule: TypeAlias = Callable[[DailyForecast, str], Alert | None]

DAY_RULES: tuple[tuple[AlertKind, DayRule], ...] = (
    (AlertKind.FROST, check_frost),
    (AlertKind.HEAT, check_heat),
    (AlertKind.RAIN, check_heavy_rain),
)


def evaluate(forecasts: Sequence[DailyForecast]) -> list[TriggeredAlert]:
    """Run every rule over every day, keeping day order then rule order."""
    triggered: list[TriggeredAlert] = []
    for index, day in enumerate(forecasts):
        label = format_forecast_date(day.date)

        for kind, rule in DAY_RULES:
            message = rule(day, label)
            if message is not None:
                triggered.append(TriggeredAlert(kind, day.date, message))

        message = check_dry_spell(forecasts, index, label)
        if message is not None:
            triggered.append(TriggeredAlert(AlertKind.DRY_SPELL, day.date, message))

    return triggered


def analyze(forecasts: Sequence[DailyForecast]) -> list[Alert]:
    """Map an ordered forecast window to its ordered alert messages."""
    return [t.message for t in evaluate(forecasts)]
