"""Query and dashboard view models."""

from dataclasses import dataclass
from enum import StrEnum


class Icon(StrEnum):
    SUN = "sun"
    RAIN = "rain"
    SNOW = "snow"
    THUNDER = "thunder"
    FOG = "fog"
    DRIZZLE = "drizzle"
    CLOUDY = "cloudy"


@dataclass(frozen=True)
class Query:
    location: str
    unit: str


@dataclass(frozen=True)
class CurrentView:
    address: str
    date_label: str
    temperature: str
    condition: str
    icon: Icon
    spinning: bool
    wind: str
    humidity: str
    feels_like: str


@dataclass(frozen=True)
class HourView:
    time_label: str
    icon: Icon
    temperature: str


@dataclass(frozen=True)
class DayView:
    day_label: str
    icon: Icon
    high: str
    low: str


@dataclass(frozen=True)
class DashboardView:
    unit: str
    current: CurrentView
    hours: list[HourView]
    days: list[DayView]
    expanded: bool
