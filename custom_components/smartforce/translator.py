"""Translation between SmartForce device fields and accessory state."""

from __future__ import annotations

from .api import SmartForceProtocolError
from .const import (
    CHARGING_CHARGING,
    CHARGING_CONNECTED,
    CHARGING_UNCONNECTED,
    LOW_BATTERY_THRESHOLD,
    MODE_CLEANING,
    ROTATION_SPEED_BOOST,
    ROTATION_SPEED_ECO,
    ROTATION_SPEED_STANDARD,
    ROTATION_SPEED_STOPPED,
)
from .models import AccessoryState, ChargingPhase, CleaningTier, RawDeviceStatus

# Indexed by cleaning_parameter_set; 0 means stopped and is never reported
ROTATION_SPEEDS = (
    ROTATION_SPEED_STOPPED,
    ROTATION_SPEED_STANDARD,
    ROTATION_SPEED_ECO,
    ROTATION_SPEED_BOOST,
)

CHARGING_PHASES = {
    CHARGING_UNCONNECTED: ChargingPhase.NOT_CHARGEABLE,
    CHARGING_CONNECTED: ChargingPhase.NOT_CHARGING,
    CHARGING_CHARGING: ChargingPhase.CHARGING,
}

_TIERS_BY_CODE = {tier.code: tier for tier in CleaningTier}


def code_to_tier(code: int) -> CleaningTier:
    """Return the tier for a device cleaning_parameter_set code.

    Raises:
        SmartForceProtocolError: If the code is not a known tier

    """
    try:
        return _TIERS_BY_CODE[code]
    except KeyError as err:
        raise SmartForceProtocolError(
            f"Unknown cleaning_parameter_set: {code}"
        ) from err


def to_accessory_state(raw: RawDeviceStatus) -> AccessoryState:
    """Convert a device status into the normalized accessory state.

    Raises:
        SmartForceProtocolError: If the status holds values outside the
            device vocabulary

    """
    tier = code_to_tier(raw.cleaning_parameter_set)

    try:
        charging_phase = CHARGING_PHASES[raw.charging]
    except KeyError as err:
        raise SmartForceProtocolError(
            f"Unknown charging state: {raw.charging}"
        ) from err

    if not 0 <= raw.battery_level <= 100:
        raise SmartForceProtocolError(
            f"Battery level out of range: {raw.battery_level}"
        )

    return AccessoryState(
        active=raw.mode == MODE_CLEANING,
        rotation_speed=ROTATION_SPEEDS[tier.code],
        low_battery=raw.battery_level < LOW_BATTERY_THRESHOLD,
        battery_level=raw.battery_level,
        charging_phase=charging_phase,
    )


def speed_percentage_to_tier(percentage: int) -> CleaningTier | None:
    """Map a fan percentage to a cleaning tier.

    Returns:
        The tier to clean with, or None when the vacuum should stop

    Raises:
        ValueError: If the percentage is outside 0..100

    """
    if not ROTATION_SPEED_STOPPED <= percentage <= 100:
        raise ValueError(f"Percentage out of range: {percentage}")
    if percentage == ROTATION_SPEED_STOPPED:
        return None
    if percentage < 50:
        return CleaningTier.ECO
    if percentage < 75:
        return CleaningTier.STANDARD
    return CleaningTier.BOOST


def power_to_tier(active: bool) -> CleaningTier | None:
    """Map a power toggle to a cleaning tier, None meaning stop."""
    return CleaningTier.STANDARD if active else None
