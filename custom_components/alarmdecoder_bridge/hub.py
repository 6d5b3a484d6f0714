"""Hub wrapping the AlarmDecoder client, zone registry and reconciler."""

from __future__ import annotations

import asyncio
import contextlib
import logging

import aiohttp
from alarmdecoder_lib import (
    AlarmDecoderClient,
    BridgeConfig,
    PanelCommandDispatcher,
    PanelInfo,
    PanelState,
    PanelStateResolver,
    RawPanelStatus,
    Reconciler,
    RegistryBackedSink,
    TargetState,
    UnknownZone,
    ZoneAccessoryValue,
    ZoneRegistry,
    default_zone_value,
)

from homeassistant.core import HomeAssistant, callback
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.dispatcher import async_dispatcher_send

from .const import signal_panel_updated, signal_zone_updated

_LOGGER = logging.getLogger(__name__)


class AlarmDecoderHub(RegistryBackedSink):
    """
    Accessory sink for one AlarmDecoder panel.

    Published states are fanned out to entities with dispatcher signals; the
    hub also remembers the last zone values so entities created later start
    from the current value.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        entry_id: str,
        config: BridgeConfig,
        session: aiohttp.ClientSession,
    ) -> None:
        """Initialize the hub."""
        super().__init__(ZoneRegistry.from_config(config.zones))
        self._hass = hass
        self._entry_id = entry_id
        self._config = config
        self._client = AlarmDecoderClient(config, session)
        self._resolver = PanelStateResolver(self._client)
        self._zone_values: dict[str, ZoneAccessoryValue] = {}
        self._tasks: set[asyncio.Task[None]] = set()
        self.reconciler = Reconciler(
            self,
            self._resolver,
            PanelCommandDispatcher(self._client),
        )

    @property
    def entry_id(self) -> str:
        """Return the config entry id this hub belongs to."""
        return self._entry_id

    @property
    def config(self) -> BridgeConfig:
        """Return the validated bridge configuration."""
        return self._config

    @property
    def panel_info(self) -> PanelInfo | None:
        """Return the configured panel description, if any."""
        return self._config.panel

    @property
    def panel_state(self) -> PanelState | None:
        """Return the last resolved panel state."""
        return self.reconciler.panel_state

    @property
    def last_status(self) -> RawPanelStatus | None:
        """Return the raw status behind the last resolved panel state."""
        return self._resolver.last_status

    def zone_value(self, zone_id: str) -> ZoneAccessoryValue:
        """Return the last published value for a zone, or its default."""
        value = self._zone_values.get(zone_id)
        if value is not None:
            return value
        return default_zone_value(self.registry.require(zone_id).zone_type)

    async def async_start(self) -> None:
        """Sync the panel state once at startup."""
        result = await self.reconciler.async_sync_panel_state()
        if not result.ok:
            _LOGGER.warning("Initial panel state sync failed: %s", result.error)

    async def async_stop(self) -> None:
        """Cancel notification tasks still in flight."""
        tasks = list(self._tasks)
        self._tasks.clear()
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    @callback
    def publish_panel_state(self, state: PanelState) -> None:
        """Publish a resolved panel state to the panel entity."""
        async_dispatcher_send(self._hass, signal_panel_updated(self._entry_id), state)

    @callback
    def publish_zone_state(self, zone_id: str, value: ZoneAccessoryValue) -> None:
        """Publish an encoded zone value to its zone entity."""
        if zone_id not in self.registry:
            raise UnknownZone(zone_id)
        self._zone_values[zone_id] = value
        async_dispatcher_send(
            self._hass, signal_zone_updated(self._entry_id, zone_id), value
        )

    @callback
    def async_handle_notification(self, message: str) -> None:
        """Apply a notification message in the background."""
        task = self._hass.async_create_task(self._async_process_notification(message))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _async_process_notification(self, message: str) -> None:
        result = await self.reconciler.async_handle_message(message)
        if not result.ok:
            _LOGGER.debug("Notification not fully applied: %s", result.error)

    async def async_set_target_state(self, target: TargetState) -> PanelState:
        """Request a panel state; raise if the command or the re-query fails."""
        result = await self.reconciler.async_set_target_state(target)
        if not result.ok:
            raise HomeAssistantError(
                f"Unable to set panel to {target.value}: {result.error}"
            ) from result.error
        return result.unwrap()

    async def async_refresh_panel_state(self) -> PanelState | None:
        """Re-query the panel without publishing; None when it fails."""
        result = await self.reconciler.async_get_current_state()
        if not result.ok:
            return None
        return result.data
