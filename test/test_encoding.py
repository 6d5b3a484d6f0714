import pytest

from alarmdecoder_lib.encoding import (
    CarbonMonoxideLevel,
    ContactState,
    MotionState,
    SmokeState,
    default_zone_value,
    encode_zone_state,
    is_faulted_value,
)
from alarmdecoder_lib.errors import UnknownZoneType
from alarmdecoder_lib.types import ZoneType


@pytest.mark.parametrize(
    ("zone_type", "faulted", "expected"),
    [
        (ZoneType.CONTACT, True, ContactState.NOT_DETECTED),
        (ZoneType.CONTACT, False, ContactState.DETECTED),
        (ZoneType.MOTION, True, MotionState.DETECTED),
        (ZoneType.MOTION, False, MotionState.NOT_DETECTED),
        (ZoneType.CO, True, CarbonMonoxideLevel.ABNORMAL),
        (ZoneType.CO, False, CarbonMonoxideLevel.NORMAL),
        (ZoneType.SMOKE, True, SmokeState.DETECTED),
        (ZoneType.SMOKE, False, SmokeState.NOT_DETECTED),
    ],
)
def test_encoding_table(zone_type, faulted, expected):
    assert encode_zone_state(zone_type, faulted) is expected


def test_encoding_accepts_type_text():
    assert encode_zone_state("smoke", True) is SmokeState.DETECTED


def test_unknown_type_raises():
    with pytest.raises(UnknownZoneType) as excinfo:
        encode_zone_state("glassbreak", True, zone_id="4")
    assert excinfo.value.zone_id == "4"
    assert excinfo.value.details["zone_type"] == "glassbreak"


def test_default_is_the_normal_value():
    assert default_zone_value(ZoneType.CONTACT) is ContactState.DETECTED
    assert default_zone_value(ZoneType.CO) is CarbonMonoxideLevel.NORMAL


def test_is_faulted_value():
    assert is_faulted_value(ZoneType.CONTACT, ContactState.NOT_DETECTED) is True
    assert is_faulted_value(ZoneType.CONTACT, ContactState.DETECTED) is False
    assert is_faulted_value(ZoneType.MOTION, MotionState.DETECTED) is True
