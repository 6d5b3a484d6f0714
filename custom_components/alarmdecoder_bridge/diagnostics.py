"""Diagnostics support for the AlarmDecoder bridge."""

from __future__ import annotations

from typing import Any

from alarmdecoder_lib import RawPanelStatus
from alarmdecoder_lib.config import CONF_KEY

from homeassistant.components.diagnostics import async_redact_data
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import DATA_HUB, DOMAIN
from .hub import AlarmDecoderHub

TO_REDACT = {CONF_KEY, "body"}


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry."""
    data = hass.data.get(DOMAIN, {}).get(entry.entry_id)
    hub: AlarmDecoderHub | None = data.get(DATA_HUB) if data else None
    panel_state = hub.panel_state if hub is not None else None

    return {
        "entry_id": entry.entry_id,
        "config": async_redact_data(dict(entry.data), TO_REDACT),
        "hub_available": hub is not None,
        "panel_state": panel_state.value if panel_state is not None else None,
        "panel_status": _status_to_dict(hub.last_status) if hub is not None else None,
        "zones": [
            {
                "zone_id": zone.zone_id,
                "zone_type": zone.zone_type.value,
                "display_name": zone.display_name,
                "faulted": hub.reconciler.zone_state(zone.zone_id),
                "accessory_value": hub.zone_value(zone.zone_id).value,
            }
            for zone in hub.registry
        ]
        if hub is not None
        else [],
    }


def _status_to_dict(status: RawPanelStatus | None) -> dict[str, Any] | None:
    if status is None:
        return None
    return {
        "alarming": status.alarming,
        "armed_away": status.armed_away,
        "armed_stay": status.armed_stay,
        "last_message": status.last_message,
        "fire_detected": status.fire_detected,
        "on_battery": status.on_battery,
        "panicked": status.panicked,
        "powered": status.powered,
        "panel_type": status.panel_type,
        "zones_faulted": list(status.zones_faulted),
    }
