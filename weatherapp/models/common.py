"""Common types shared by the relay and the dashboard."""

from enum import StrEnum


class Unit(StrEnum):
    FAHRENHEIT = "°F"
    CELSIUS = "°C"


class UnitGroup(StrEnum):
    US = "us"
    METRIC = "metric"


def unit_group_for(unit: str | None) -> UnitGroup:
    """Map a unit marker to the provider's unit group.

    Only the literal Fahrenheit marker selects imperial units; anything else,
    including an empty or missing marker, falls back to metric.
    """
    if unit == Unit.FAHRENHEIT:
        return UnitGroup.US
    return UnitGroup.METRIC


def parse_unit(value: str) -> Unit:
    """Accept 'F', 'C', '°F' or '°C' (case-insensitive) from the command line."""
    normalized = value.strip().upper().lstrip("°")
    if normalized == "F":
        return Unit.FAHRENHEIT
    if normalized == "C":
        return Unit.CELSIUS
    raise ValueError(f"Unknown unit: {value!r}")
