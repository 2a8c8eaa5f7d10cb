"""Data models for SmartForce integration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum

from .const import (
    ROTATION_SPEED_BOOST,
    ROTATION_SPEED_ECO,
    ROTATION_SPEED_STANDARD,
)


class CleaningTier(Enum):
    """Cleaning intensity, bound to its device code and fan percentage."""

    ECO = (2, ROTATION_SPEED_ECO)
    STANDARD = (1, ROTATION_SPEED_STANDARD)
    BOOST = (3, ROTATION_SPEED_BOOST)

    def __init__(self, code: int, percentage: int) -> None:
        """Bind the device code and rotation speed to the member."""
        self.code = code
        self.percentage = percentage


class ChargingPhase(StrEnum):
    """Charging phase as exposed to Home Assistant."""

    NOT_CHARGEABLE = "not_chargeable"
    NOT_CHARGING = "not_charging"
    CHARGING = "charging"


@dataclass(frozen=True)
class RawDeviceStatus:
    """Status as reported by the vacuum's /status endpoint."""

    mode: str
    cleaning_parameter_set: int
    battery_level: int
    charging: str


@dataclass(frozen=True)
class AccessoryState:
    """Normalized vacuum state shared by all entities.

    Instances are immutable; the cache swaps whole snapshots.
    """

    active: bool = False
    rotation_speed: int = ROTATION_SPEED_STANDARD
    low_battery: bool = False
    battery_level: int | None = None
    charging_phase: ChargingPhase = ChargingPhase.NOT_CHARGING
