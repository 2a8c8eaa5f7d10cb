"""Support for SmartForce vacuums as fans."""

from __future__ import annotations

from collections.abc import Awaitable
import logging
from typing import Any

from homeassistant.components.fan import FanEntity, FanEntityFeature
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .api import SmartForceConnectionError, SmartForceProtocolError
from .const import DOMAIN
from .coordinator import SmartForceCoordinator
from .entity import SmartForceEntity
from .models import CleaningTier

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the SmartForce fan."""
    coordinator: SmartForceCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([SmartForceFan(coordinator, entry)])


class SmartForceFan(SmartForceEntity, FanEntity):
    """Vacuum power and suction tier exposed as a three-speed fan."""

    _attr_name = None
    _attr_speed_count = len(CleaningTier)
    _attr_supported_features = (
        FanEntityFeature.SET_SPEED
        | FanEntityFeature.TURN_ON
        | FanEntityFeature.TURN_OFF
    )

    def __init__(self, coordinator: SmartForceCoordinator, entry: ConfigEntry) -> None:
        """Initialize the fan."""
        super().__init__(coordinator, entry, "fan")

    @property
    def is_on(self) -> bool:  # type: ignore[override]
        """Return true if the vacuum is cleaning."""
        return self.accessory_state.active

    @property
    def percentage(self) -> int:  # type: ignore[override]
        """Return the rotation speed of the current tier."""
        return self.accessory_state.rotation_speed

    async def async_turn_on(
        self,
        percentage: int | None = None,
        preset_mode: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Start cleaning, at the given speed if one is provided."""
        if percentage is None:
            await self._async_command(
                self.coordinator.async_set_active(True), "turn on"
            )
        else:
            await self.async_set_percentage(percentage)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Send the vacuum home."""
        await self._async_command(self.coordinator.async_set_active(False), "turn off")

    async def async_set_percentage(self, percentage: int) -> None:
        """Set the cleaning tier from a percentage; 0 sends the vacuum home."""
        await self._async_command(
            self.coordinator.async_set_rotation_speed(percentage),
            "set speed",
            percentage,
        )

    async def _async_command(
        self, command: Awaitable[None], action: str, value: int | None = None
    ) -> None:
        """Await a coordinator command, reporting failures to Home Assistant."""
        _LOGGER.debug("Sending %s (value: %s) to %s", action, value, self.entity_id)
        try:
            await command
        except (SmartForceConnectionError, SmartForceProtocolError) as err:
            raise HomeAssistantError(
                f"Failed to {action} (value: {value}) for {self.entity_id}: {err}"
            ) from err
