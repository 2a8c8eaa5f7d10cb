"""Cached accessory state for a SmartForce vacuum."""

from __future__ import annotations

import logging

from .models import AccessoryState

_LOGGER = logging.getLogger(__name__)


class AccessoryStateCache:
    """Last known state of one vacuum.

    Only whole snapshots are swapped in. Snapshots are frozen, so readers
    never see fields from two different updates. The last writer wins.
    """

    def __init__(self, initial: AccessoryState | None = None) -> None:
        """Initialize the cache with a default state."""
        self._state = initial if initial is not None else AccessoryState()

    def read(self) -> AccessoryState:
        """Return the current snapshot."""
        return self._state

    def replace(self, state: AccessoryState) -> None:
        """Swap in a new snapshot."""
        _LOGGER.debug("Updated accessory state: %s", state)
        self._state = state
