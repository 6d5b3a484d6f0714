"""
Bridge configuration.

The configuration supplies the control API endpoints, the API key, the
optional panel description and the zone table. CONFIG_SCHEMA validates the
raw mapping (YAML or config entry data); BridgeConfig is the immutable view
the rest of the library works with.

Endpoints are individually optional: an endpoint that is needed but absent
is reported as ConfigurationMissing when it is used, not at load time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import voluptuous as vol

from .const import (
    COMMAND_ENDPOINTS,
    DEFAULT_TIMEOUT_S,
    ENDPOINT_GET,
)
from .errors import ConfigurationMissing

CONF_KEY = "key"
CONF_TIMEOUT = "timeout"
CONF_PANEL = "panel"
CONF_ENDPOINTS = "endpoints"
CONF_ZONES = "zones"
CONF_METHOD = "method"
CONF_URL = "url"
CONF_BODY = "body"
CONF_NAME = "name"
CONF_MANUFACTURER = "manufacturer"
CONF_MODEL = "model"
CONF_SERIALNUMBER = "serialnumber"
CONF_FIRMWARE = "firmware"
CONF_ID = "id"
CONF_TYPE = "type"
CONF_FULLNAME = "fullname"

ENDPOINT_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_METHOD): vol.All(str, vol.Upper),
        vol.Required(CONF_URL): str,
        vol.Optional(CONF_BODY): vol.Coerce(str),
    }
)

PANEL_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME): str,
        vol.Optional(CONF_MANUFACTURER): vol.Coerce(str),
        vol.Optional(CONF_MODEL): vol.Coerce(str),
        vol.Optional(CONF_SERIALNUMBER): vol.Coerce(str),
        vol.Optional(CONF_FIRMWARE): vol.Coerce(str),
    }
)

# Zone types are not restricted here; the registry reports and skips types
# it cannot represent.
ZONE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_ID): vol.Coerce(str),
        vol.Required(CONF_TYPE): vol.All(str, vol.Lower),
        vol.Required(CONF_NAME): str,
        vol.Optional(CONF_FULLNAME): str,
    }
)

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_KEY): str,
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT_S): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(CONF_PANEL): PANEL_SCHEMA,
        vol.Required(CONF_ENDPOINTS): vol.Schema(
            {
                vol.Optional(name): ENDPOINT_SCHEMA
                for name in (ENDPOINT_GET, *COMMAND_ENDPOINTS)
            }
        ),
        vol.Optional(CONF_ZONES): [ZONE_SCHEMA],
    },
    extra=vol.REMOVE_EXTRA,
)


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One control API call: HTTP method, URL and opaque key-code body."""

    method: str
    url: str
    body: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Endpoint":
        return cls(
            method=str(data[CONF_METHOD]),
            url=str(data[CONF_URL]),
            body=data.get(CONF_BODY),
        )


@dataclass(frozen=True, slots=True)
class PanelInfo:
    """Descriptive panel fields for the host's device registry."""

    name: str
    manufacturer: Optional[str] = None
    model: Optional[str] = None
    serialnumber: Optional[str] = None
    firmware: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ZoneConfig:
    """A zone entry exactly as configured; the type is not yet checked."""

    zone_id: str
    zone_type: str
    name: str
    fullname: str


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    key: str
    endpoints: Mapping[str, Endpoint]
    timeout_s: float = DEFAULT_TIMEOUT_S
    panel: Optional[PanelInfo] = None
    zones: tuple[ZoneConfig, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BridgeConfig":
        """Validate `data` with CONFIG_SCHEMA and build the config."""
        validated = CONFIG_SCHEMA(dict(data))
        panel_data = validated.get(CONF_PANEL)
        return cls(
            key=validated[CONF_KEY],
            timeout_s=validated[CONF_TIMEOUT],
            endpoints={
                name: Endpoint.from_dict(endpoint)
                for name, endpoint in validated[CONF_ENDPOINTS].items()
            },
            panel=PanelInfo(**panel_data) if panel_data else None,
            zones=tuple(
                ZoneConfig(
                    zone_id=zone[CONF_ID],
                    zone_type=zone[CONF_TYPE],
                    name=zone[CONF_NAME],
                    fullname=zone.get(CONF_FULLNAME) or zone[CONF_NAME],
                )
                for zone in validated.get(CONF_ZONES) or ()
            ),
        )

    def endpoint(self, name: str) -> Endpoint:
        """Return the named endpoint or raise ConfigurationMissing."""
        endpoint = self.endpoints.get(name)
        if endpoint is None:
            raise ConfigurationMissing(
                f"Endpoint '{name}' is not configured",
                details={"endpoint": name},
            )
        return endpoint


__all__ = [
    "BridgeConfig",
    "CONFIG_SCHEMA",
    "Endpoint",
    "PanelInfo",
    "ZoneConfig",
]
