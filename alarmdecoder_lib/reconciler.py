"""
alarmdecoder_lib/reconciler.py

Reconciliation between the panel, its notification feed and the accessory
model.

Principles:
- PanelState is only ever set from a successful resolve, never from what a
  user asked for. A request is dispatched, then the panel is re-queried and
  whatever it reports is published.
- Resolve-and-publish sequences are serialized so an older resolve cannot
  overwrite a newer one. Zone updates are independent and not serialized.
- Zone state exists only for zones the sink knows about.
- Smoke zones are special: "There is a fire!" faults all of them and any
  "The alarm system has ..." message restores all of them. This does not
  reflect real zone state.
- Failures are logged and returned as Result.failure(); nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from .encoding import encode_zone_state
from .errors import AlarmDecoderError, UnknownZone
from .events import (
    FireAlarm,
    NotificationEvent,
    PanelStatusChanged,
    Unrecognized,
    ZoneChanged,
)
from .parser import parse_notification
from .sink import AccessorySink
from .types import PanelState, Result, TargetState, ZoneDescriptor, ZoneType

logger = logging.getLogger(__name__)


class Resolver(Protocol):
    async def async_resolve(self) -> PanelState: ...


class Dispatcher(Protocol):
    async def async_dispatch(self, target: TargetState) -> None: ...


class Reconciler:
    """Owns PanelState and ZoneState and applies events and requests to them."""

    def __init__(
        self,
        sink: AccessorySink,
        resolver: Resolver,
        dispatcher: Dispatcher,
    ) -> None:
        self._sink = sink
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._panel_state: PanelState | None = None
        self._zone_states: dict[str, bool] = {}
        self._panel_lock = asyncio.Lock()

    @property
    def panel_state(self) -> PanelState | None:
        """Return the last resolved panel state, or None before the first resolve."""
        return self._panel_state

    @property
    def zone_states(self) -> dict[str, bool]:
        return dict(self._zone_states)

    def zone_state(self, zone_id: str) -> bool | None:
        return self._zone_states.get(zone_id)

    # -------------------------
    # Notifications
    # -------------------------

    async def async_handle_message(self, message: str) -> Result[NotificationEvent]:
        """Parse a notification message and apply it."""
        logger.debug("Notification: %s", message)
        return await self.async_handle_event(parse_notification(message))

    async def async_handle_event(self, event: NotificationEvent) -> Result[NotificationEvent]:
        if isinstance(event, PanelStatusChanged):
            # Smoke zones are cleared before the re-query so a fire reported
            # while it is in flight stays set.
            errors = self._set_smoke_zones(False)
            result = await self.async_sync_panel_state()
            if not result.ok:
                return Result.failure(result.error)  # type: ignore[arg-type]
            return _event_result(event, errors)

        if isinstance(event, FireAlarm):
            logger.info("Fire reported; faulting all smoke zones")
            return _event_result(event, self._set_smoke_zones(True))

        if isinstance(event, ZoneChanged):
            try:
                self._set_zone_state(event.zone_id, event.faulted)
            except AlarmDecoderError as err:
                logger.warning("Zone notification for %s skipped: %s", event.zone_id, err)
                return Result.failure(err)
            return Result.success(event)

        if isinstance(event, Unrecognized):
            if event.parse_failure:
                logger.warning("Ignoring unparsable notification: %s", event.raw)
            else:
                logger.debug("Ignoring notification: %s", event.raw)
        return Result.success(event)

    def _set_zone_state(self, zone_id: str, faulted: bool) -> None:
        zone = self._sink.get_zone_descriptor(zone_id)
        if zone is None:
            raise UnknownZone(zone_id)
        self._apply_zone_state(zone, faulted)

    def _apply_zone_state(self, zone: ZoneDescriptor, faulted: bool) -> None:
        # Encode first so an unknown type leaves state and accessory untouched.
        value = encode_zone_state(zone.zone_type, faulted, zone_id=zone.zone_id)
        self._zone_states[zone.zone_id] = faulted
        self._sink.publish_zone_state(zone.zone_id, value)
        logger.debug("new zone %s accessory state = %s", zone.zone_id, value.value)

    def _set_smoke_zones(self, faulted: bool) -> list[AlarmDecoderError]:
        """Set every smoke zone; one failing zone does not stop the others."""
        errors: list[AlarmDecoderError] = []
        for zone in self._sink.list_zones_by_type(ZoneType.SMOKE):
            try:
                self._apply_zone_state(zone, faulted)
            except AlarmDecoderError as err:
                logger.warning("Smoke zone %s not updated: %s", zone.zone_id, err)
                errors.append(err)
        return errors

    # -------------------------
    # Panel
    # -------------------------

    async def async_sync_panel_state(self) -> Result[PanelState]:
        """Resolve the panel state and publish it."""
        return await self._async_resolve(publish=True)

    async def async_get_current_state(self) -> Result[PanelState]:
        """Resolve the panel state without publishing it."""
        return await self._async_resolve(publish=False)

    async def async_set_target_state(self, target: TargetState) -> Result[PanelState]:
        """
        Request a new panel state.

        On success the returned state is whatever the panel reports after the
        command, which may differ from `target` (e.g. STAY_ARM requested while
        the panel arms in instant mode resolves to NIGHT_ARM).
        """
        logger.info("SetPanelTargetState: %s", target)
        try:
            await self._dispatcher.async_dispatch(target)
        except AlarmDecoderError as err:
            logger.error("Panel command %s failed: %s", target, err)
            return Result.failure(err)
        return await self.async_sync_panel_state()

    async def _async_resolve(self, *, publish: bool) -> Result[PanelState]:
        async with self._panel_lock:
            try:
                state = await self._resolver.async_resolve()
            except AlarmDecoderError as err:
                logger.error("Unable to resolve panel state: %s", err)
                return Result.failure(err)
            previous = self._panel_state
            self._panel_state = state
            if previous is not state:
                logger.info("Panel state changed: %s -> %s", previous, state)
            if publish:
                try:
                    self._sink.publish_panel_state(state)
                except AlarmDecoderError as err:
                    logger.error("Unable to publish panel state %s: %s", state, err)
                    return Result.failure(err)
                logger.debug("new panel accessory state = %s", state.name)
        return Result.success(state)


def _event_result(
    event: NotificationEvent, errors: list[AlarmDecoderError]
) -> Result[NotificationEvent]:
    if errors:
        return Result.failure(errors[0])
    return Result.success(event)


__all__ = ["Dispatcher", "Reconciler", "Resolver"]
