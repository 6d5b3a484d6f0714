"""
alarmdecoder_lib/events.py

Notification events.

Rules:
- The parser constructs exactly one event per notification message.
- Events carry only what the reconciler needs; PanelStatusChanged and
  FireAlarm have no payload because the panel is re-queried instead.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NotificationEvent:
    KIND = "notification"

    @property
    def kind(self) -> str:
        return self.KIND


@dataclass(frozen=True, slots=True)
class PanelStatusChanged(NotificationEvent):
    KIND = "panel_status_changed"


@dataclass(frozen=True, slots=True)
class FireAlarm(NotificationEvent):
    KIND = "fire_alarm"


@dataclass(frozen=True, slots=True)
class ZoneChanged(NotificationEvent):
    KIND = "zone_changed"

    fullname: str
    zone_id: str
    faulted: bool


@dataclass(frozen=True, slots=True)
class Unrecognized(NotificationEvent):
    KIND = "unrecognized"

    raw: str
    # True when the message had a known prefix but did not match its pattern.
    parse_failure: bool = False


__all__ = [
    "FireAlarm",
    "NotificationEvent",
    "PanelStatusChanged",
    "Unrecognized",
    "ZoneChanged",
]
