"""Config flow for the AlarmDecoder bridge integration."""

from __future__ import annotations

import logging
from typing import Any

from alarmdecoder_lib import BridgeConfig
import voluptuous as vol

from homeassistant.config_entries import ConfigFlow, ConfigFlowResult

from .const import DEFAULT_TITLE, DOMAIN

_LOGGER = logging.getLogger(__name__)


class AlarmDecoderBridgeConfigFlow(ConfigFlow, domain=DOMAIN):
    """Create the single config entry from configuration.yaml."""

    VERSION = 1
    MINOR_VERSION = 1

    async def async_step_import(
        self, import_data: dict[str, Any]
    ) -> ConfigFlowResult:
        """Create or update the entry from the YAML configuration."""
        try:
            bridge_config = BridgeConfig.from_dict(import_data)
        except vol.Invalid as err:
            _LOGGER.error("Invalid alarmdecoder_bridge configuration: %s", err)
            return self.async_abort(reason="invalid_config")

        # One panel per installation.
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured(updates=dict(import_data))

        title = bridge_config.panel.name if bridge_config.panel else DEFAULT_TITLE
        return self.async_create_entry(title=title, data=dict(import_data))

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Endpoints and zones are only configurable in YAML."""
        return self.async_abort(reason="yaml_only")
