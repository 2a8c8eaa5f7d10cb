"""Test SmartForce setup and entities."""

from unittest.mock import MagicMock

import pytest
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.smartforce.api import SmartForceConnectionError
from custom_components.smartforce.const import DOMAIN
from custom_components.smartforce.models import CleaningTier, RawDeviceStatus
from homeassistant.components.fan import (
    ATTR_PERCENTAGE,
    DOMAIN as FAN_DOMAIN,
    SERVICE_SET_PERCENTAGE,
    SERVICE_TURN_OFF,
    SERVICE_TURN_ON,
)
from homeassistant.config_entries import ConfigEntryState
from homeassistant.const import ATTR_ENTITY_ID, STATE_OFF, STATE_ON
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import entity_registry as er

from .const import MOCK_CONFIG, MOCK_HOST, MOCK_STATUS


@pytest.fixture
async def entry(hass: HomeAssistant, patch_api: MagicMock) -> MockConfigEntry:
    """Set up the integration with the mock API."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        title=f"SmartForce ({MOCK_HOST})",
        unique_id=MOCK_HOST,
        data=MOCK_CONFIG,
    )
    entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()
    yield entry
    if entry.state is ConfigEntryState.LOADED:
        assert await hass.config_entries.async_unload(entry.entry_id)
        await hass.async_block_till_done()


def _entity_id(hass: HomeAssistant, platform: str, key: str) -> str:
    entity_id = er.async_get(hass).async_get_entity_id(
        platform, DOMAIN, f"{MOCK_HOST}_{key}"
    )
    assert entity_id is not None
    return entity_id


async def test_setup_creates_entities(
    hass: HomeAssistant, entry: MockConfigEntry
) -> None:
    """Test the polled state is exposed by every entity."""
    assert entry.state is ConfigEntryState.LOADED

    fan = hass.states.get(_entity_id(hass, "fan", "fan"))
    assert fan.state == STATE_OFF
    assert fan.attributes[ATTR_PERCENTAGE] == 66

    battery = hass.states.get(_entity_id(hass, "sensor", "battery_level"))
    assert battery.state == "80"

    charging = hass.states.get(_entity_id(hass, "sensor", "charging_phase"))
    assert charging.state == "not_charging"

    low_battery = hass.states.get(_entity_id(hass, "binary_sensor", "low_battery"))
    assert low_battery.state == STATE_OFF


async def test_setup_not_ready(hass: HomeAssistant, patch_api: MagicMock) -> None:
    """Test setup is retried when the vacuum cannot be reached."""
    patch_api.async_validate_connection.side_effect = SmartForceConnectionError
    entry = MockConfigEntry(domain=DOMAIN, unique_id=MOCK_HOST, data=MOCK_CONFIG)
    entry.add_to_hass(hass)

    await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()

    assert entry.state is ConfigEntryState.SETUP_RETRY
    patch_api.async_close.assert_awaited()


async def test_setup_first_refresh_fails(
    hass: HomeAssistant, patch_api: MagicMock
) -> None:
    """Test the client is closed when the first status cannot be translated."""
    patch_api.async_get_status.return_value = RawDeviceStatus(
        **{**MOCK_STATUS, "charging": "error"}
    )
    entry = MockConfigEntry(domain=DOMAIN, unique_id=MOCK_HOST, data=MOCK_CONFIG)
    entry.add_to_hass(hass)

    await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()

    assert entry.state is ConfigEntryState.SETUP_RETRY
    patch_api.async_close.assert_awaited_once()
    assert DOMAIN not in hass.data


async def test_unload(
    hass: HomeAssistant, entry: MockConfigEntry, patch_api: MagicMock
) -> None:
    """Test unloading closes the client."""
    assert await hass.config_entries.async_unload(entry.entry_id)
    await hass.async_block_till_done()

    assert entry.state is ConfigEntryState.NOT_LOADED
    patch_api.async_close.assert_awaited_once()
    assert DOMAIN not in hass.data


async def test_fan_services(
    hass: HomeAssistant, entry: MockConfigEntry, patch_api: MagicMock
) -> None:
    """Test fan services drive the vacuum."""
    fan_id = _entity_id(hass, "fan", "fan")
    patch_api.async_get_status.return_value = RawDeviceStatus(
        **{**MOCK_STATUS, "mode": "cleaning", "cleaning_parameter_set": 3}
    )

    await hass.services.async_call(
        FAN_DOMAIN,
        SERVICE_SET_PERCENTAGE,
        {ATTR_ENTITY_ID: fan_id, ATTR_PERCENTAGE: 90},
        blocking=True,
    )
    patch_api.async_start_cleaning.assert_awaited_once_with(CleaningTier.BOOST)
    state = hass.states.get(fan_id)
    assert state.state == STATE_ON
    assert state.attributes[ATTR_PERCENTAGE] == 100

    await hass.services.async_call(
        FAN_DOMAIN, SERVICE_TURN_OFF, {ATTR_ENTITY_ID: fan_id}, blocking=True
    )
    patch_api.async_go_home.assert_awaited_once()

    patch_api.async_start_cleaning.reset_mock()
    await hass.services.async_call(
        FAN_DOMAIN, SERVICE_TURN_ON, {ATTR_ENTITY_ID: fan_id}, blocking=True
    )
    patch_api.async_start_cleaning.assert_awaited_once_with(CleaningTier.STANDARD)


async def test_fan_command_failure(
    hass: HomeAssistant, entry: MockConfigEntry, patch_api: MagicMock
) -> None:
    """Test a failed command is reported and the state kept."""
    fan_id = _entity_id(hass, "fan", "fan")
    patch_api.async_go_home.side_effect = SmartForceConnectionError("refused")

    with pytest.raises(HomeAssistantError, match="turn off"):
        await hass.services.async_call(
            FAN_DOMAIN, SERVICE_TURN_OFF, {ATTR_ENTITY_ID: fan_id}, blocking=True
        )

    assert hass.states.get(fan_id).attributes[ATTR_PERCENTAGE] == 66
