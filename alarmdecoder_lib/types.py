"""Public types for the AlarmDecoder bridge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Mapping, Optional, TypeVar

T = TypeVar("T")


class PanelState(str, Enum):
    """Simplified panel state published to the accessory model."""

    STAY_ARM = "stay_arm"
    AWAY_ARM = "away_arm"
    NIGHT_ARM = "night_arm"
    DISARMED = "disarmed"
    ALARM_TRIGGERED = "alarm_triggered"


class TargetState(str, Enum):
    """Panel states a user can request."""

    STAY_ARM = "stay_arm"
    AWAY_ARM = "away_arm"
    NIGHT_ARM = "night_arm"
    DISARM = "disarm"


class ZoneType(str, Enum):
    """Zone sensor kinds supported by the accessory model."""

    CONTACT = "contact"
    MOTION = "motion"
    CO = "co"
    SMOKE = "smoke"


@dataclass(frozen=True, slots=True)
class ZoneDescriptor:
    """
    Immutable description of a configured zone.

    `zone_id` is the panel's zone number exactly as it appears in
    notifications ("07" and "7" are different zones).
    """

    zone_id: str
    zone_type: ZoneType
    display_name: str
    name: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RawPanelStatus:
    """
    Status fields reported by the control API.

    Only the first four fields drive the panel state; the rest are kept for
    logs and diagnostics.
    """

    alarming: bool = False
    armed_away: bool = False
    armed_stay: bool = False
    last_message: str = ""
    fire_detected: Optional[bool] = None
    on_battery: Optional[bool] = None
    panicked: Optional[bool] = None
    powered: Optional[bool] = None
    panel_type: Optional[str] = None
    zones_faulted: tuple[Any, ...] = ()

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "RawPanelStatus":
        """Create a status from the control API's JSON payload."""
        last_message = data.get("last_message_received")
        zones_faulted = data.get("panel_zones_faulted") or ()
        return cls(
            alarming=bool(data.get("panel_alarming", False)),
            armed_away=bool(data.get("panel_armed", False)),
            armed_stay=bool(data.get("panel_armed_stay", False)),
            last_message=str(last_message) if last_message else "",
            fire_detected=data.get("panel_fire_detected"),
            on_battery=data.get("panel_on_battery"),
            panicked=data.get("panel_panicked"),
            powered=data.get("panel_powered"),
            panel_type=data.get("panel_type"),
            zones_faulted=tuple(zones_faulted),
        )


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    ok: bool
    data: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(ok=True, data=value, error=None)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        return cls(ok=False, data=None, error=error)

    def unwrap(self) -> T:
        if self.ok:
            return self.data  # type: ignore[return-value]
        if self.error is not None:
            raise self.error
        raise RuntimeError("Result carries neither data nor error.")


__all__ = [
    "PanelState",
    "RawPanelStatus",
    "Result",
    "TargetState",
    "ZoneDescriptor",
    "ZoneType",
]
