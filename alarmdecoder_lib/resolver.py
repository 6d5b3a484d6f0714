"""Panel state resolution: control API status to PanelState."""

from __future__ import annotations

import logging
from typing import Protocol

from .const import NIGHT_MARKERS
from .types import PanelState, RawPanelStatus

logger = logging.getLogger(__name__)


class StatusSource(Protocol):
    async def async_get_status(self) -> RawPanelStatus: ...


def is_night_armed(status: RawPanelStatus) -> bool:
    """Return True when the keypad text shows night or instant arming."""
    return any(marker in status.last_message for marker in NIGHT_MARKERS)


def reduce_panel_status(status: RawPanelStatus) -> PanelState:
    """
    Reduce raw status flags to a PanelState.

    Precedence: alarming, then night/instant (which wins over both armed
    flags), then away-only, then stay, then disarmed.
    """
    if status.alarming:
        return PanelState.ALARM_TRIGGERED
    if is_night_armed(status):
        return PanelState.NIGHT_ARM
    if status.armed_away and not status.armed_stay:
        return PanelState.AWAY_ARM
    if status.armed_stay:
        return PanelState.STAY_ARM
    return PanelState.DISARMED


class PanelStateResolver:
    """Query the panel and reduce its status; raises on any failure."""

    def __init__(self, source: StatusSource) -> None:
        self._source = source
        self._last_status: RawPanelStatus | None = None

    @property
    def last_status(self) -> RawPanelStatus | None:
        """Return the status read by the last successful resolve."""
        return self._last_status

    async def async_resolve(self) -> PanelState:
        status = await self._source.async_get_status()
        state = reduce_panel_status(status)
        self._last_status = status
        logger.debug("current alarmdecoder panel state = %s", state.name)
        return state


__all__ = [
    "PanelStateResolver",
    "StatusSource",
    "is_night_armed",
    "reduce_panel_status",
]
