"""Data update coordinator for SmartForce vacuums."""

from __future__ import annotations

from dataclasses import replace
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import SmartForceApiClient, SmartForceConnectionError, SmartForceProtocolError
from .const import DOMAIN, ROTATION_SPEED_STOPPED
from .models import AccessoryState, CleaningTier
from .state import AccessoryStateCache
from .translator import power_to_tier, speed_percentage_to_tier, to_accessory_state

_LOGGER = logging.getLogger(__name__)


class SmartForceCoordinator(DataUpdateCoordinator[AccessoryState]):
    """SmartForce data update coordinator.

    Timing is owned by the poll scheduler, so no update interval is set here.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        api: SmartForceApiClient,
        config_entry: ConfigEntry | None = None,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            config_entry=config_entry,
            name=DOMAIN,
            update_interval=None,
        )
        self.api = api
        self.cache = AccessoryStateCache()

    @property
    def accessory_state(self) -> AccessoryState:
        """Return the cached state without touching the network."""
        return self.cache.read()

    async def _async_update_data(self) -> AccessoryState:
        """Fetch status from the vacuum and store it in the cache.

        Raises:
            UpdateFailed: If the update operation fails. The cache keeps its
                previous value.

        """
        try:
            raw = await self.api.async_get_status()
            state = to_accessory_state(raw)
        except SmartForceConnectionError as err:
            raise UpdateFailed(
                f"Error communicating with SmartForce vacuum: {err}"
            ) from err
        except SmartForceProtocolError as err:
            raise UpdateFailed(
                f"Invalid response from SmartForce vacuum: {err}"
            ) from err

        self.cache.replace(state)
        return state

    async def async_set_active(self, active: bool) -> None:
        """Switch cleaning on with the standard tier, or send the vacuum home.

        Raises:
            SmartForceConnectionError: If the command could not be delivered

        """
        await self._async_command(power_to_tier(active))

    async def async_set_rotation_speed(self, percentage: int) -> None:
        """Clean at the tier matching percentage, or send the vacuum home on 0.

        Raises:
            SmartForceConnectionError: If the command could not be delivered
            ValueError: If percentage is outside 0..100

        """
        await self._async_command(speed_percentage_to_tier(percentage))

    async def _async_command(self, tier: CleaningTier | None) -> None:
        """Send a command, update the cache optimistically, then reconcile."""
        if tier is None:
            await self.api.async_go_home()
            requested = replace(
                self.cache.read(), active=False, rotation_speed=ROTATION_SPEED_STOPPED
            )
        else:
            await self.api.async_start_cleaning(tier)
            requested = replace(
                self.cache.read(), active=True, rotation_speed=tier.percentage
            )

        self.cache.replace(requested)
        self.async_set_updated_data(requested)

        await self.async_request_refresh()
