"""Binary sensors for AlarmDecoder zones."""

from __future__ import annotations

import logging
from typing import Any

from alarmdecoder_lib import (
    ZoneAccessoryValue,
    ZoneDescriptor,
    ZoneType,
    is_faulted_value,
)

from homeassistant.components.binary_sensor import (
    BinarySensorDeviceClass,
    BinarySensorEntity,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.dispatcher import async_dispatcher_connect
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DATA_HUB, DOMAIN, signal_zone_updated
from .entity import build_unique_id, unique_base, zone_device_info
from .hub import AlarmDecoderHub

_LOGGER = logging.getLogger(__name__)

_DEVICE_CLASS_BY_TYPE: dict[ZoneType, BinarySensorDeviceClass] = {
    ZoneType.CONTACT: BinarySensorDeviceClass.DOOR,
    ZoneType.MOTION: BinarySensorDeviceClass.MOTION,
    ZoneType.CO: BinarySensorDeviceClass.CO,
    ZoneType.SMOKE: BinarySensorDeviceClass.SMOKE,
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up AlarmDecoder zone binary sensors from a config entry."""
    hub: AlarmDecoderHub = hass.data[DOMAIN][entry.entry_id][DATA_HUB]
    if not len(hub.registry):
        _LOGGER.warning("Skipping adding alarm system zones")
        return
    entities = [AlarmDecoderZoneBinarySensor(hub, entry, zone) for zone in hub.registry]
    _LOGGER.debug("Adding %s zone entities", len(entities))
    async_add_entities(entities)


class AlarmDecoderZoneBinarySensor(BinarySensorEntity):
    """
    A zone accessory.

    Zone state only changes through notifications; the panel is never polled
    for it.
    """

    _attr_has_entity_name = True
    _attr_name = None
    _attr_should_poll = False

    def __init__(
        self,
        hub: AlarmDecoderHub,
        entry: ConfigEntry,
        zone: ZoneDescriptor,
    ) -> None:
        """Initialize the zone entity."""
        self._hub = hub
        self._zone = zone
        self._value: ZoneAccessoryValue = hub.zone_value(zone.zone_id)
        self._attr_unique_id = build_unique_id(unique_base(entry), "zone", zone.zone_id)
        self._attr_device_info = zone_device_info(entry, zone)
        self._attr_device_class = _DEVICE_CLASS_BY_TYPE[zone.zone_type]

    @property
    def is_on(self) -> bool:
        """Return True when the zone is faulted (open, motion, CO or smoke)."""
        return is_faulted_value(self._zone.zone_type, self._value)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return additional state attributes."""
        return {
            "zone_id": self._zone.zone_id,
            "zone_type": self._zone.zone_type.value,
            "fullname": self._zone.display_name,
            "accessory_value": self._value.value,
        }

    async def async_added_to_hass(self) -> None:
        """Subscribe to zone publishes."""
        self.async_on_remove(
            async_dispatcher_connect(
                self.hass,
                signal_zone_updated(self._hub.entry_id, self._zone.zone_id),
                self._handle_zone_value,
            )
        )

    @callback
    def _handle_zone_value(self, value: ZoneAccessoryValue) -> None:
        self._value = value
        self.async_write_ha_state()
