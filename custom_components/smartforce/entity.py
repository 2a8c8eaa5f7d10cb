"""Base entity for SmartForce vacuums."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import DOMAIN, MANUFACTURER, MODEL
from .coordinator import SmartForceCoordinator
from .models import AccessoryState


class SmartForceEntity(CoordinatorEntity[SmartForceCoordinator]):
    """Entity backed by the coordinator's cached accessory state."""

    _attr_has_entity_name = True

    def __init__(
        self, coordinator: SmartForceCoordinator, entry: ConfigEntry, key: str
    ) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.unique_id or entry.entry_id}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, entry.unique_id or entry.entry_id)},
            name=entry.title,
            manufacturer=MANUFACTURER,
            model=MODEL,
        )

    @property
    def available(self) -> bool:  # type: ignore[override]
        """Stay available on stale state when a poll fails."""
        return True

    @property
    def accessory_state(self) -> AccessoryState:
        """Return the cached accessory state."""
        return self.coordinator.accessory_state
