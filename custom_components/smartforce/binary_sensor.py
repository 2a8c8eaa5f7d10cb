"""Low battery indicator for SmartForce vacuums."""

from __future__ import annotations

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN
from .coordinator import SmartForceCoordinator
from .entity import SmartForceEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the SmartForce low battery sensor."""
    coordinator: SmartForceCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([SmartForceLowBattery(coordinator, entry)])


class SmartForceLowBattery(SmartForceEntity, BinarySensorEntity):
    """On when the battery is below the low threshold."""

    _attr_name = "Low battery"
    _attr_device_class = BinarySensorDeviceClass.BATTERY

    def __init__(self, coordinator: SmartForceCoordinator, entry: ConfigEntry) -> None:
        """Initialize the binary sensor."""
        super().__init__(coordinator, entry, "low_battery")

    @property
    def is_on(self) -> bool:  # type: ignore[override]
        """Return true if the battery is low."""
        return self.accessory_state.low_battery
