"""Global fixtures for SmartForce integration."""

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from custom_components.smartforce.models import RawDeviceStatus

from .const import MOCK_HOST, MOCK_STATUS

pytest_plugins = "pytest_homeassistant_custom_component"


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> None:  # noqa: D103
    return


@pytest.fixture
def mock_api() -> MagicMock:
    """Return an API client whose calls succeed."""
    api = MagicMock()
    api.host = MOCK_HOST
    api.async_validate_connection = AsyncMock(return_value=True)
    api.async_get_status = AsyncMock(return_value=RawDeviceStatus(**MOCK_STATUS))
    api.async_start_cleaning = AsyncMock(return_value=None)
    api.async_go_home = AsyncMock(return_value=None)
    api.async_close = AsyncMock(return_value=None)
    return api


@pytest.fixture
def patch_api(mock_api: MagicMock) -> Generator[MagicMock]:
    """Make integration setup use the mock API client."""
    with patch(
        "custom_components.smartforce.SmartForceApiClient", return_value=mock_api
    ):
        yield mock_api
