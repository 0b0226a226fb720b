"""Pure transforms from a provider payload to dashboard view models.

Nothing here is cached; the view is re-derived from the payload on every
render.
"""

import math
from datetime import date

from weatherapp.models.common import Unit
from weatherapp.models.weather import (
    CurrentView,
    DashboardView,
    DayView,
    HourView,
    Icon,
)

HOUR_STEP = 3
MAX_HOURS = 7
OUTLOOK_DAYS = 5

# First match wins; "partly cloudy" must not reach the sun branch.
ICON_RULES: list[tuple[tuple[str, ...], Icon]] = [
    (("sunny", "clear"), Icon.SUN),
    (("rain", "shower"), Icon.RAIN),
    (("snow", "flurr"), Icon.SNOW),
    (("thunder", "lightning"), Icon.THUNDER),
    (("fog", "mist", "haz"), Icon.FOG),
    (("drizzle",), Icon.DRIZZLE),
    (("cloud", "overcast", "part"), Icon.CLOUDY),
]


def weather_icon(condition: str | None) -> Icon:
    """Pick an icon by case-insensitive substring match on the condition label."""
    label = (condition or "").lower()
    for needles, icon in ICON_RULES:
        if any(n in label for n in needles):
            return icon
    return Icon.SUN


def _parse_date(date_str: str | None) -> date | None:
    if not date_str:
        return None
    try:
        return date.fromisoformat(date_str[:10])
    except ValueError:
        return None


def format_date(date_str: str | None) -> str:
    """'2024-01-15' -> 'Monday, Jan 15'."""
    d = _parse_date(date_str)
    if d is None:
        return ""
    return f"{d:%A}, {d:%b} {d.day}"


def format_weekday(date_str: str | None) -> str:
    """'2024-01-15' -> 'Mon'."""
    d = _parse_date(date_str)
    if d is None:
        return ""
    return f"{d:%a}"


def format_hour(hour_str: str | None) -> str:
    """'14:00:00' -> '2PM', '00:00:00' -> '12AM'."""
    if not hour_str:
        return ""
    try:
        hour = int(hour_str.split(":")[0])
    except ValueError:
        return ""
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}{suffix}"


def round_temp(value: float | int | None) -> int | None:
    """Round to the nearest integer, halves going up."""
    if value is None:
        return None
    return math.floor(value + 0.5)


def _days(payload: dict) -> list[dict]:
    return payload.get("days") or []


def current_value(payload: dict, field: str):
    """Prefer currentConditions[field], falling back to the first day's value."""
    current = payload.get("currentConditions") or {}
    value = current.get(field)
    # blank labels count as absent; numeric zero is a real reading
    if value is not None and value != "":
        return value
    days = _days(payload)
    if days:
        return days[0].get(field)
    return None


def hourly_strip(hours: list[dict] | None) -> list[dict]:
    """Every third hour, at most seven, in original order."""
    return list(hours or [])[::HOUR_STEP][:MAX_HOURS]


def outlook(days: list[dict] | None) -> list[dict]:
    """The five days after today."""
    return list(days or [])[1:OUTLOOK_DAYS + 1]


def format_temp(value, unit: str) -> str:
    rounded = round_temp(value)
    if rounded is None:
        return "--"
    return f"{rounded}{unit}"


def wind_suffix(unit: str) -> str:
    return " mph" if unit == Unit.FAHRENHEIT else " km/h"


def build_current(payload: dict, unit: str) -> CurrentView:
    days = _days(payload)
    today = days[0] if days else {}
    condition = current_value(payload, "conditions") or ""
    current_label = (payload.get("currentConditions") or {}).get("conditions") or ""

    wind = round_temp(current_value(payload, "windspeed"))
    humidity = round_temp(current_value(payload, "humidity"))

    return CurrentView(
        address=payload.get("resolvedAddress", ""),
        date_label=format_date(today.get("datetime")),
        temperature=format_temp(current_value(payload, "temp"), unit),
        condition=condition,
        icon=weather_icon(condition),
        spinning="sunny" in current_label.lower(),
        wind="--" if wind is None else f"{wind}{wind_suffix(unit)}",
        humidity="--" if humidity is None else f"{humidity}%",
        feels_like=format_temp(current_value(payload, "feelslike"), unit),
    )


def build_hours(payload: dict, unit: str) -> list[HourView]:
    days = _days(payload)
    hours = days[0].get("hours") if days else None
    return [
        HourView(
            time_label=format_hour(h.get("datetime")),
            icon=weather_icon(h.get("conditions")),
            temperature=format_temp(h.get("temp"), unit),
        )
        for h in hourly_strip(hours)
    ]


def build_days(payload: dict, unit: str) -> list[DayView]:
    return [
        DayView(
            day_label=format_weekday(d.get("datetime")),
            icon=weather_icon(d.get("conditions")),
            high=format_temp(d.get("tempmax"), unit),
            low=format_temp(d.get("tempmin"), unit),
        )
        for d in outlook(_days(payload))
    ]


def build_view(payload: dict, unit: str, expanded: bool = False) -> DashboardView:
    """Derive the full dashboard view.

    The outlook rows are the same whether the panel is expanded or collapsed;
    `expanded` only changes how the renderer labels the panel.
    """
    return DashboardView(
        unit=unit,
        current=build_current(payload, unit),
        hours=build_hours(payload, unit),
        days=build_days(payload, unit),
        expanded=expanded,
    )
