"""Battery sensors for SmartForce vacuums."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN
from .coordinator import SmartForceCoordinator
from .entity import SmartForceEntity
from .models import AccessoryState, ChargingPhase


@dataclass(frozen=True, kw_only=True)
class SmartForceSensorEntityDescription(SensorEntityDescription):
    """Describes a SmartForce sensor."""

    value_fn: Callable[[AccessoryState], str | int | None]


SENSORS: tuple[SmartForceSensorEntityDescription, ...] = (
    SmartForceSensorEntityDescription(
        key="battery_level",
        device_class=SensorDeviceClass.BATTERY,
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        value_fn=lambda state: state.battery_level,
    ),
    SmartForceSensorEntityDescription(
        key="charging_phase",
        name="Charging phase",
        device_class=SensorDeviceClass.ENUM,
        options=[phase.value for phase in ChargingPhase],
        value_fn=lambda state: state.charging_phase.value,
    ),
)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up SmartForce sensors."""
    coordinator: SmartForceCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        SmartForceSensor(coordinator, entry, description) for description in SENSORS
    )


class SmartForceSensor(SmartForceEntity, SensorEntity):
    """Sensor reading one field of the cached state."""

    entity_description: SmartForceSensorEntityDescription

    def __init__(
        self,
        coordinator: SmartForceCoordinator,
        entry: ConfigEntry,
        description: SmartForceSensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator, entry, description.key)
        self.entity_description = description

    @property
    def native_value(self) -> str | int | None:  # type: ignore[override]
        """Return the sensor value."""
        return self.entity_description.value_fn(self.accessory_state)
