"""Output formatters for the dashboard."""

import json
from dataclasses import asdict

from weatherapp.dashboard.presentation import build_view
from weatherapp.dashboard.state import UIState
from weatherapp.models.weather import DashboardView, Icon

ICON_GLYPHS = {
    Icon.SUN: "☀",
    Icon.RAIN: "🌧",
    Icon.SNOW: "❄",
    Icon.THUNDER: "⛈",
    Icon.FOG: "🌫",
    Icon.DRIZZLE: "🌦",
    Icon.CLOUDY: "☁",
}

TITLE = "What-da-Weatha"


def format_view_text(view: DashboardView) -> str:
    """Plain text rendering of the three dashboard panels."""
    c = view.current
    spin = " (spinning)" if c.spinning else ""
    lines = [
        f"=== {c.address} ===",
        c.date_label,
        f"{c.temperature}  {ICON_GLYPHS[c.icon]}{spin}  {c.condition}",
        f"Wind: {c.wind} | Humidity: {c.humidity} | Feels like: {c.feels_like}",
        "",
        "Hourly Forecast",
    ]
    lines.append(
        "  ".join(
            f"{h.time_label} {ICON_GLYPHS[h.icon]} {h.temperature}" for h in view.hours
        )
    )
    lines.append("")
    arrow = "↑" if view.expanded else "↓"
    lines.append(f"5-Day Forecast {arrow}")
    for d in view.days:
        lines.append(f"  {d.day_label:<4} {ICON_GLYPHS[d.icon]}  {d.high:>6} {d.low:>6}")
    return "\n".join(lines)


def format_dashboard_text(state: UIState) -> str:
    """Header, loading and error lines, then the panels when a payload is shown."""
    lines = [f"{TITLE} [{state.unit}] {state.committed_location}"]
    if state.is_loading:
        lines.append("Loading...")
    if state.error:
        lines.append(f"! {state.error}")
    if state.payload is not None and not state.is_loading:
        view = build_view(state.payload, state.unit, state.is_expanded)
        lines.append("")
        lines.append(format_view_text(view))
    return "\n".join(lines)


def format_dashboard_json(view: DashboardView) -> str:
    """JSON view for programmatic consumption."""
    return json.dumps(asdict(view), indent=2, ensure_ascii=False)
