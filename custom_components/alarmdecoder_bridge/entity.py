"""Shared entity helpers for the AlarmDecoder bridge integration."""

from __future__ import annotations

from alarmdecoder_lib import ZoneDescriptor

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceInfo

from .const import DEFAULT_MANUFACTURER, DOMAIN
from .hub import AlarmDecoderHub


def unique_base(entry: ConfigEntry) -> str:
    """Return the stable unique ID base for this config entry."""
    return entry.unique_id or entry.entry_id


def build_unique_id(base: str, domain: str, item_id: str) -> str:
    """Build a stable unique ID in <base>:<domain>:<id> format."""
    return f"{base}:{domain}:{item_id}"


def panel_device_info(hub: AlarmDecoderHub, entry: ConfigEntry) -> DeviceInfo:
    """Build device info for the panel."""
    panel = hub.panel_info
    return DeviceInfo(
        identifiers={(DOMAIN, unique_base(entry))},
        name=panel.name if panel else entry.title,
        manufacturer=(panel.manufacturer if panel else None) or DEFAULT_MANUFACTURER,
        model=panel.model if panel else None,
        serial_number=panel.serialnumber if panel else None,
        sw_version=panel.firmware if panel else None,
    )


def zone_device_info(entry: ConfigEntry, zone: ZoneDescriptor) -> DeviceInfo:
    """Build device info for a zone, attached to the panel device."""
    return DeviceInfo(
        identifiers={(DOMAIN, build_unique_id(unique_base(entry), "zone", zone.zone_id))},
        name=zone.name or zone.display_name,
        manufacturer=zone.display_name,
        model=zone.zone_type.value,
        serial_number=zone.zone_id,
        via_device=(DOMAIN, unique_base(entry)),
    )
