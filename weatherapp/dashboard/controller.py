"""Dashboard controller: owns the UI state and keeps the payload in sync
with the committed location and unit."""

import logging

from weatherapp.dashboard import state as transitions
from weatherapp.dashboard.relay_client import RelayClient
from weatherapp.dashboard.state import UIState

logger = logging.getLogger(__name__)


class DashboardController:
    def __init__(self, relay: RelayClient, state: UIState | None = None):
        self.relay = relay
        self.state = state or transitions.initial_state()

    async def start(self) -> UIState:
        """Initial load for the starting location and unit."""
        return await self.refresh()

    async def submit_search(self, text: str) -> UIState:
        self.state = transitions.search_text_changed(self.state, text)
        return await self._apply(transitions.search_submitted)

    async def change_unit(self, unit: str) -> UIState:
        return await self._apply(lambda s: transitions.unit_changed(s, unit))

    def toggle_expanded(self) -> UIState:
        self.state = transitions.expansion_toggled(self.state)
        return self.state

    async def _apply(self, transition) -> UIState:
        before = self.state.query
        self.state = transition(self.state)
        if self.state.query != before:
            return await self.refresh()
        return self.state

    async def refresh(self) -> UIState:
        """Fetch for the current query. Every outcome clears the loading flag."""
        self.state, request_id = transitions.fetch_started(self.state)
        query = self.state.query
        try:
            payload = await self.relay.fetch_weather(query)
        except Exception:
            logger.exception(
                "Failed to fetch weather for %r (%s)", query.location, query.unit
            )
            self.state = transitions.fetch_failed(self.state, request_id)
        else:
            if not transitions.is_current(self.state, request_id):
                logger.debug("Discarding stale response for request %d", request_id)
            self.state = transitions.fetch_succeeded(self.state, request_id, payload)
        return self.state
