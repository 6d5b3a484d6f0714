"""Alarm control panel platform for the AlarmDecoder panel."""

from __future__ import annotations

import logging
from typing import Any

from alarmdecoder_lib import PanelState, TargetState

from homeassistant.components.alarm_control_panel import (
    AlarmControlPanelEntity,
    AlarmControlPanelEntityFeature,
    AlarmControlPanelState,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_HUB, DOMAIN, signal_panel_updated
from .entity import build_unique_id, panel_device_info, unique_base
from .hub import AlarmDecoderHub

_LOGGER = logging.getLogger(__name__)

_PANEL_STATE_TO_HA: dict[PanelState, AlarmControlPanelState] = {
    PanelState.STAY_ARM: AlarmControlPanelState.ARMED_HOME,
    PanelState.AWAY_ARM: AlarmControlPanelState.ARMED_AWAY,
    PanelState.NIGHT_ARM: AlarmControlPanelState.ARMED_NIGHT,
    PanelState.DISARMED: AlarmControlPanelState.DISARMED,
    PanelState.ALARM_TRIGGERED: AlarmControlPanelState.TRIGGERED,
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the AlarmDecoder panel from a config entry."""
    hub: AlarmDecoderHub = hass.data[DOMAIN][entry.entry_id][DATA_HUB]
    if hub.panel_info is None:
        _LOGGER.warning("Skipping adding alarm system panel")
        return
    async_add_entities([AlarmDecoderPanel(hub, entry)])


class AlarmDecoderPanel(AlarmControlPanelEntity):
    """
    The security system accessory.

    The displayed state is always the state last resolved from the panel.
    Arm and disarm requests send the command, then re-query the panel; the
    entity updates from the resulting publish, not from the request.
    """

    _attr_has_entity_name = True
    _attr_name = None
    _attr_code_arm_required = False
    _attr_supported_features = (
        AlarmControlPanelEntityFeature.ARM_HOME
        | AlarmControlPanelEntityFeature.ARM_AWAY
        | AlarmControlPanelEntityFeature.ARM_NIGHT
    )

    def __init__(self, hub: AlarmDecoderHub, entry: ConfigEntry) -> None:
        """Initialize the panel entity."""
        self._hub = hub
        self._attr_unique_id = build_unique_id(unique_base(entry), "panel", "0")
        self._attr_device_info = panel_device_info(hub, entry)
        self._attr_alarm_state = _panel_state_to_ha(hub.panel_state)

    async def async_added_to_hass(self) -> None:
        """Subscribe to panel state publishes."""
        self.async_on_remove(
            async_dispatcher_connect(
                self.hass,
                signal_panel_updated(self._hub.entry_id),
                self._handle_panel_state,
            )
        )

    @callback
    def _handle_panel_state(self, state: PanelState) -> None:
        self._attr_alarm_state = _panel_state_to_ha(state)
        self._attr_available = True
        self.async_write_ha_state()

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return additional state attributes."""
        state = self._hub.panel_state
        return {"panel_state": state.value if state is not None else None}

    async def async_update(self) -> None:
        """Poll the panel; the state is refreshed but not republished."""
        state = await self._hub.async_refresh_panel_state()
        if state is None:
            self._attr_available = False
            return
        self._attr_available = True
        self._attr_alarm_state = _panel_state_to_ha(state)

    async def async_alarm_disarm(self, code: str | None = None) -> None:
        """Disarm the panel."""
        await self._hub.async_set_target_state(TargetState.DISARM)

    async def async_alarm_arm_home(self, code: str | None = None) -> None:
        """Arm the panel in stay mode."""
        await self._hub.async_set_target_state(TargetState.STAY_ARM)

    async def async_alarm_arm_away(self, code: str | None = None) -> None:
        """Arm the panel in away mode."""
        await self._hub.async_set_target_state(TargetState.AWAY_ARM)

    async def async_alarm_arm_night(self, code: str | None = None) -> None:
        """Arm the panel in night mode."""
        await self._hub.async_set_target_state(TargetState.NIGHT_ARM)


def _panel_state_to_ha(state: PanelState | None) -> AlarmControlPanelState | None:
    if state is None:
        return None
    return _PANEL_STATE_TO_HA[state]
