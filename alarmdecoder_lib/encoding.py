"""Zone state to accessory value encoding."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .errors import UnknownZoneType
from .types import ZoneType


class ContactState(str, Enum):
    DETECTED = "detected"
    NOT_DETECTED = "not detected"


class MotionState(str, Enum):
    DETECTED = "detected"
    NOT_DETECTED = "not detected"


class CarbonMonoxideLevel(str, Enum):
    NORMAL = "normal"
    ABNORMAL = "abnormal"


class SmokeState(str, Enum):
    DETECTED = "detected"
    NOT_DETECTED = "not detected"


ZoneAccessoryValue = Union[ContactState, MotionState, CarbonMonoxideLevel, SmokeState]

# (faulted value, normal value) per zone type. A faulted contact zone is open,
# which the accessory model reports as "contact not detected".
_ENCODINGS: dict[ZoneType, tuple[ZoneAccessoryValue, ZoneAccessoryValue]] = {
    ZoneType.CONTACT: (ContactState.NOT_DETECTED, ContactState.DETECTED),
    ZoneType.MOTION: (MotionState.DETECTED, MotionState.NOT_DETECTED),
    ZoneType.CO: (CarbonMonoxideLevel.ABNORMAL, CarbonMonoxideLevel.NORMAL),
    ZoneType.SMOKE: (SmokeState.DETECTED, SmokeState.NOT_DETECTED),
}


def encode_zone_state(
    zone_type: ZoneType | str, faulted: bool, *, zone_id: str | None = None
) -> ZoneAccessoryValue:
    """Return the accessory value for a zone's faulted/normal state."""
    try:
        faulted_value, normal_value = _ENCODINGS[ZoneType(zone_type)]
    except (KeyError, ValueError) as err:
        raise UnknownZoneType(zone_id, zone_type) from err
    return faulted_value if faulted else normal_value


def default_zone_value(zone_type: ZoneType | str) -> ZoneAccessoryValue:
    """Return the value a zone accessory starts with before any notification."""
    return encode_zone_state(zone_type, False)


def is_faulted_value(zone_type: ZoneType | str, value: object) -> bool:
    """Return True when `value` is the faulted encoding for `zone_type`."""
    return value == encode_zone_state(zone_type, True)


__all__ = [
    "CarbonMonoxideLevel",
    "ContactState",
    "MotionState",
    "SmokeState",
    "ZoneAccessoryValue",
    "default_zone_value",
    "encode_zone_state",
    "is_faulted_value",
]
