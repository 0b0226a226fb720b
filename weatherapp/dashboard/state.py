"""Dashboard UI state and its named transitions.

State is immutable; each transition returns a new UIState. Fetch results are
tagged with the request id issued by `fetch_started` and dropped unless they
belong to the most recent request.
"""

from dataclasses import dataclass, replace

from weatherapp.config.defaults import DEFAULT_LOCATION
from weatherapp.models.common import Unit
from weatherapp.models.weather import Query

FETCH_ERROR_MESSAGE = "Failed to fetch weather data. Please try again."


@dataclass(frozen=True)
class UIState:
    search_text: str = DEFAULT_LOCATION
    committed_location: str = DEFAULT_LOCATION
    unit: str = Unit.FAHRENHEIT
    is_expanded: bool = False
    payload: dict | None = None
    is_loading: bool = False
    error: str | None = None
    latest_request_id: int = 0

    @property
    def query(self) -> Query:
        return Query(location=self.committed_location, unit=self.unit)


def initial_state(location: str = DEFAULT_LOCATION, unit: str = Unit.FAHRENHEIT) -> UIState:
    return UIState(search_text=location, committed_location=location, unit=unit)


def search_text_changed(state: UIState, text: str) -> UIState:
    return replace(state, search_text=text)


def search_submitted(state: UIState) -> UIState:
    return replace(state, committed_location=state.search_text)


def unit_changed(state: UIState, unit: str) -> UIState:
    return replace(state, unit=unit)


def expansion_toggled(state: UIState) -> UIState:
    return replace(state, is_expanded=not state.is_expanded)


def fetch_started(state: UIState) -> tuple[UIState, int]:
    request_id = state.latest_request_id + 1
    new_state = replace(
        state, is_loading=True, error=None, latest_request_id=request_id
    )
    return new_state, request_id


def is_current(state: UIState, request_id: int) -> bool:
    return request_id == state.latest_request_id


def fetch_succeeded(state: UIState, request_id: int, payload: dict) -> UIState:
    if not is_current(state, request_id):
        return state
    return replace(state, payload=payload, is_loading=False)


def fetch_failed(state: UIState, request_id: int) -> UIState:
    """Record a failure; the previous payload stays on screen."""
    if not is_current(state, request_id):
        return state
    return replace(state, error=FETCH_ERROR_MESSAGE, is_loading=False)
