"""Integration for SmartForce robotic vacuums."""

from __future__ import annotations

from datetime import timedelta
import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady

from .api import SmartForceApiClient, SmartForceConnectionError, SmartForceProtocolError
from .const import CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL, DOMAIN, PLATFORMS
from .coordinator import SmartForceCoordinator
from .scheduler import PollScheduler

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up SmartForce from a config entry."""

    api = SmartForceApiClient(entry.data[CONF_HOST])

    # Validate the API connection
    try:
        await api.async_validate_connection()
    except (SmartForceConnectionError, SmartForceProtocolError) as err:
        await api.async_close()
        raise ConfigEntryNotReady(
            f"Failed to connect to SmartForce vacuum: {err}"
        ) from err

    coordinator = SmartForceCoordinator(hass, api, entry)
    try:
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady:
        await api.async_close()
        raise

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = coordinator

    # Poll on a fixed interval; stopped automatically when the entry unloads
    scan_interval = entry.options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL)
    scheduler = PollScheduler(hass, coordinator, timedelta(seconds=scan_interval))
    scheduler.async_start()
    entry.async_on_unload(scheduler.async_stop)

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    entry.async_on_unload(entry.add_update_listener(update_listener))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        coordinator = hass.data[DOMAIN].pop(entry.entry_id)
        await coordinator.async_shutdown()
        await coordinator.api.async_close()

        if not hass.data[DOMAIN]:
            hass.data.pop(DOMAIN)

    return unload_ok


async def update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle options update."""
    await hass.config_entries.async_reload(entry.entry_id)
