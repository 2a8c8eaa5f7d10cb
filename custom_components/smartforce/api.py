"""API client for SmartForce robotic vacuums."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from aiohttp import ClientTimeout
from aiohttp.client_exceptions import ClientError

from homeassistant.exceptions import HomeAssistantError

from .const import REQUEST_TIMEOUT
from .models import CleaningTier, RawDeviceStatus

_LOGGER = logging.getLogger(__name__)

# API endpoints
ENDPOINT_STATUS = "/status"
ENDPOINT_CLEAN_START_OR_CONTINUE = "/clean_start_or_continue"
ENDPOINT_GO_HOME = "/go_home"


class SmartForceProtocolError(HomeAssistantError):
    """Exception to indicate the vacuum sent an unusable response."""


class SmartForceConnectionError(HomeAssistantError):
    """Exception to indicate a connection error occurred."""


class SmartForceApiClient:
    """API client for a SmartForce vacuum."""

    def __init__(
        self, host: str, session: aiohttp.ClientSession | None = None
    ) -> None:
        """Initialize the API client.

        The vacuum serves a self-signed certificate, so the session created
        here skips certificate verification. Only this client's connector is
        affected.

        Args:
            host: IP address or hostname of the vacuum
            session: Optional session to use instead of creating one

        """
        self.host = host
        self.base_url = f"https://{host}"
        if session is None:
            session = aiohttp.ClientSession(
                connector=aiohttp.TCPConnector(ssl=False)
            )
        self._session = session

    async def async_validate_connection(self) -> bool:
        """Test if we can talk to the vacuum.

        Returns:
            True if connection is successful

        Raises:
            SmartForceConnectionError: If connection fails
            SmartForceProtocolError: If the status response is unusable

        """
        try:
            await self.async_get_status()
        except SmartForceConnectionError:
            _LOGGER.error("Failed to connect to SmartForce vacuum at %s", self.host)
            raise
        else:
            return True

    async def async_get_status(self) -> RawDeviceStatus:
        """Get the current status of the vacuum.

        Raises:
            SmartForceProtocolError: If a field is missing or has the wrong type
            SmartForceConnectionError: If connection fails

        """
        data = await self._async_get(ENDPOINT_STATUS)

        try:
            status = RawDeviceStatus(
                mode=_expect(data, "mode", str),
                cleaning_parameter_set=_expect(data, "cleaning_parameter_set", int),
                battery_level=_expect(data, "battery_level", int),
                charging=_expect(data, "charging", str),
            )
        except (KeyError, TypeError) as err:
            raise SmartForceProtocolError(
                f"Invalid status from SmartForce vacuum: {err}"
            ) from err

        _LOGGER.debug("Status from %s: %s", self.host, status)
        return status

    async def async_start_cleaning(self, tier: CleaningTier) -> None:
        """Start or continue cleaning with the given tier.

        Args:
            tier: Cleaning intensity to use

        Raises:
            SmartForceConnectionError: If connection fails

        """
        await self._async_get(
            ENDPOINT_CLEAN_START_OR_CONTINUE,
            params={"cleaning_parameter_set": tier.code},
            parse=False,
        )

    async def async_go_home(self) -> None:
        """Send the vacuum back to its dock.

        Raises:
            SmartForceConnectionError: If connection fails

        """
        await self._async_get(ENDPOINT_GO_HOME, parse=False)

    async def async_close(self) -> None:
        """Close the API client session."""
        if self._session:
            await self._session.close()

    async def _async_get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        parse: bool = True,
    ) -> Any:
        """Issue a GET request and optionally decode the JSON body."""
        try:
            response = await self._session.get(
                f"{self.base_url}{endpoint}",
                params=params,
                timeout=ClientTimeout(total=REQUEST_TIMEOUT),
            )
            try:
                response.raise_for_status()
                if not parse:
                    return None
                # The vacuum does not always label its JSON
                data = await response.json(content_type=None)
            finally:
                response.release()
        except (ClientError, asyncio.TimeoutError) as err:
            raise SmartForceConnectionError(
                f"Failed to connect to SmartForce vacuum: {err}"
            ) from err
        except ValueError as err:
            raise SmartForceProtocolError(
                f"Invalid response from SmartForce vacuum: {err}"
            ) from err

        if not isinstance(data, dict):
            raise SmartForceProtocolError(
                f"Unexpected response from SmartForce vacuum: {data!r}"
            )
        return data


def _expect(data: dict[str, Any], key: str, kind: type) -> Any:
    """Return data[key], checking it has the expected type."""
    value = data[key]
    # bool is an int subclass but never a valid value here
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TypeError(f"{key} should be {kind.__name__}, got {value!r}")
    return value
