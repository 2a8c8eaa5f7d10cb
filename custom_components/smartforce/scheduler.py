"""Fixed-interval status polling for SmartForce vacuums.

Each tick refreshes the coordinator unless a refresh is still running, in
which case the tick is dropped rather than queued. Failures never escape a
tick: the coordinator logs them and the cache keeps its last good state, so
the next tick acts as the retry.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from enum import StrEnum
import logging

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.event import async_track_time_interval

from .const import DEFAULT_SCAN_INTERVAL
from .coordinator import SmartForceCoordinator

_LOGGER = logging.getLogger(__name__)


class PollState(StrEnum):
    """Poll scheduler state."""

    IDLE = "idle"
    REFRESHING = "refreshing"


class PollScheduler:
    """Drive coordinator refreshes from Home Assistant's time tracker."""

    def __init__(
        self,
        hass: HomeAssistant,
        coordinator: SmartForceCoordinator,
        interval: timedelta = timedelta(seconds=DEFAULT_SCAN_INTERVAL),
    ) -> None:
        """Initialize the scheduler.

        Args:
            hass: Home Assistant instance whose clock drives the ticks
            coordinator: Coordinator to refresh on each tick
            interval: Time between ticks

        """
        self.hass = hass
        self.coordinator = coordinator
        self.interval = interval
        self.state = PollState.IDLE
        self._unsub: Callable[[], None] | None = None

    @callback
    def async_start(self) -> None:
        """Start ticking."""
        if self._unsub is not None:
            return
        _LOGGER.debug("Polling %s every %s", self.coordinator.api.host, self.interval)
        self._unsub = async_track_time_interval(
            self.hass,
            self._async_handle_tick,
            self.interval,
            name=f"{self.coordinator.name} poll",
            cancel_on_shutdown=True,
        )

    @callback
    def async_stop(self) -> None:
        """Stop ticking."""
        if self._unsub is not None:
            self._unsub()
            self._unsub = None

    async def _async_handle_tick(self, now: datetime) -> None:
        await self.async_tick()

    async def async_tick(self) -> bool:
        """Run one poll.

        Returns:
            True if a refresh ran, False if the tick was skipped

        """
        if self.state is PollState.REFRESHING:
            _LOGGER.debug("Previous poll still running, skipping tick")
            return False

        self.state = PollState.REFRESHING
        try:
            await self.coordinator.async_refresh()
        finally:
            self.state = PollState.IDLE

        if not self.coordinator.last_update_success:
            _LOGGER.debug(
                "Poll failed, keeping cached state until the next tick in %s",
                self.interval,
            )
        return True
