"""Common types and helpers shared across models."""

from datetime import date, datetime
from enum import StrEnum
from typing import TypeAlias

RunId: TypeAlias = str
Alert: TypeAlias = str

# Fixed English names so output does not depend on the process locale.
WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTHS_SHORT = tuple(m[:3] for m in MONTHS)


class AlertKind(StrEnum):
    FROST = "frost"
    HEAT = "heat"
    RAIN = "rain"
    DRY_SPELL = "dry_spell"


def local_today() -> date:
    return datetime.now().date()


def format_forecast_date(d: date) -> str:
    """Render a forecast date as e.g. 'Monday, Jan 5'."""
    return f"{WEEKDAYS[d.weekday()]}, {MONTHS_SHORT[d.month - 1]} {d.day}"


def format_value(value: float) -> str:
    """Render a numeric reading as the source gave it, without rounding.

    Integral floats drop the trailing '.0' (32.0 -> '32').
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
