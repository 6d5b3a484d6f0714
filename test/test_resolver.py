import pytest

from alarmdecoder_lib.errors import TransportFailure
from alarmdecoder_lib.resolver import PanelStateResolver, is_night_armed, reduce_panel_status
from alarmdecoder_lib.types import PanelState, RawPanelStatus

_DISARMED_PAYLOAD = {
    "last_message_received": '[10000001100000003A--],008,[f722000f1008001c28020000000000],'
    '" DISARMED CHIME   Ready to Arm  "',
    "panel_alarming": False,
    "panel_armed": False,
    "panel_armed_stay": False,
    "panel_bypassed": {},
    "panel_fire_detected": False,
    "panel_on_battery": False,
    "panel_panicked": False,
    "panel_powered": True,
    "panel_relay_status": [],
    "panel_type": "ADEMCO",
    "panel_zones_faulted": [],
}


def test_status_from_json():
    status = RawPanelStatus.from_json(_DISARMED_PAYLOAD)
    assert status.alarming is False
    assert status.armed_away is False
    assert status.armed_stay is False
    assert "DISARMED CHIME" in status.last_message
    assert status.panel_type == "ADEMCO"
    assert status.powered is True
    assert status.zones_faulted == ()


def test_status_from_json_tolerates_missing_fields():
    status = RawPanelStatus.from_json({"panel_armed": True, "last_message_received": None})
    assert status.armed_away is True
    assert status.last_message == ""


def test_disarmed_payload_reduces_to_disarmed():
    assert reduce_panel_status(RawPanelStatus.from_json(_DISARMED_PAYLOAD)) is PanelState.DISARMED


@pytest.mark.parametrize(
    ("armed_away", "armed_stay", "last_message"),
    [
        (False, False, ""),
        (True, False, ""),
        (False, True, ""),
        (True, True, "ARMED ***NIGHT***"),
        (True, False, "ARMED ***INSTANT***"),
    ],
)
def test_alarming_wins_over_everything(armed_away, armed_stay, last_message):
    status = RawPanelStatus(
        alarming=True,
        armed_away=armed_away,
        armed_stay=armed_stay,
        last_message=last_message,
    )
    assert reduce_panel_status(status) is PanelState.ALARM_TRIGGERED


def test_night_wins_over_armed_flags():
    status = RawPanelStatus(
        armed_away=True, armed_stay=True, last_message="ARMED ***NIGHT-STAY***"
    )
    assert reduce_panel_status(status) is PanelState.NIGHT_ARM


def test_instant_with_away_flag_is_night():
    status = RawPanelStatus(armed_away=True, last_message="ARMED ***INSTANT***")
    assert reduce_panel_status(status) is PanelState.NIGHT_ARM


def test_night_text_while_disarmed_flags_is_night():
    status = RawPanelStatus(last_message="NIGHT")
    assert reduce_panel_status(status) is PanelState.NIGHT_ARM


def test_away_only():
    status = RawPanelStatus(armed_away=True, last_message="ARMED ***AWAY***")
    assert reduce_panel_status(status) is PanelState.AWAY_ARM


def test_away_and_stay_flags_is_stay():
    status = RawPanelStatus(armed_away=True, armed_stay=True, last_message="ARMED ***STAY***")
    assert reduce_panel_status(status) is PanelState.STAY_ARM


def test_stay_only():
    assert reduce_panel_status(RawPanelStatus(armed_stay=True)) is PanelState.STAY_ARM


def test_night_markers_are_case_sensitive():
    assert is_night_armed(RawPanelStatus(last_message="night")) is False


class _FakeSource:
    def __init__(self, status=None, error=None) -> None:
        self.status = status
        self.error = error
        self.calls = 0

    async def async_get_status(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.status


@pytest.mark.asyncio
async def test_resolver_reduces_source_status():
    source = _FakeSource(RawPanelStatus(armed_away=True))
    resolver = PanelStateResolver(source)

    assert await resolver.async_resolve() is PanelState.AWAY_ARM
    assert source.calls == 1


@pytest.mark.asyncio
async def test_resolver_propagates_transport_failure():
    resolver = PanelStateResolver(_FakeSource(error=TransportFailure("down")))

    with pytest.raises(TransportFailure):
        await resolver.async_resolve()


@pytest.mark.asyncio
async def test_resolver_keeps_last_successful_status():
    status = RawPanelStatus.from_json(_DISARMED_PAYLOAD)
    source = _FakeSource(status)
    resolver = PanelStateResolver(source)
    assert resolver.last_status is None

    await resolver.async_resolve()
    assert resolver.last_status is status

    source.error = TransportFailure("down")
    with pytest.raises(TransportFailure):
        await resolver.async_resolve()
    assert resolver.last_status is status
