"""Set up the AlarmDecoder bridge integration."""

from __future__ import annotations

import logging

from alarmdecoder_lib import CONFIG_SCHEMA as BRIDGE_SCHEMA, BridgeConfig
import voluptuous as vol

from homeassistant.config_entries import SOURCE_IMPORT, ConfigEntry
from homeassistant.const import Platform
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.aiohttp_client import async_get_clientsession
from homeassistant.helpers.typing import ConfigType

from .const import DATA_HUB, DATA_VIEW_REGISTERED, DOMAIN
from .http import AlarmDecoderNotificationView
from .hub import AlarmDecoderHub

_LOGGER = logging.getLogger(__name__)

CONFIG_SCHEMA = vol.Schema({DOMAIN: BRIDGE_SCHEMA}, extra=vol.ALLOW_EXTRA)

PLATFORMS: list[Platform] = [
    Platform.ALARM_CONTROL_PANEL,
    Platform.BINARY_SENSOR,
]


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Import the YAML configuration into a config entry."""
    if DOMAIN not in config:
        return True
    hass.async_create_task(
        hass.config_entries.flow.async_init(
            DOMAIN,
            context={"source": SOURCE_IMPORT},
            data=dict(config[DOMAIN]),
        )
    )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the AlarmDecoder bridge from a config entry."""
    try:
        bridge_config = BridgeConfig.from_dict(entry.data)
    except vol.Invalid as err:
        _LOGGER.error("Invalid alarmdecoder_bridge configuration: %s", err)
        return False

    hub = AlarmDecoderHub(
        hass,
        entry.entry_id,
        bridge_config,
        async_get_clientsession(hass),
    )
    _LOGGER.debug(
        "Configured %s zones; panel %s",
        len(hub.registry),
        bridge_config.panel.name if bridge_config.panel else "not configured",
    )
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {DATA_HUB: hub}
    await hub.async_start()
    _async_register_view(hass)
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload an AlarmDecoder bridge config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
    data = hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
    if data is not None:
        hub: AlarmDecoderHub | None = data.get(DATA_HUB)
        if hub is not None:
            await hub.async_stop()
    return unload_ok


@callback
def _async_register_view(hass: HomeAssistant) -> None:
    """Register the notification view once; views cannot be removed."""
    domain_data = hass.data.setdefault(DOMAIN, {})
    if domain_data.get(DATA_VIEW_REGISTERED):
        return
    hass.http.register_view(AlarmDecoderNotificationView())
    domain_data[DATA_VIEW_REGISTERED] = True
    _LOGGER.debug("AlarmDecoder notification view registered")
