import asyncio
import json

import pytest

from alarmdecoder_lib import (
    BridgeConfig,
    ConfigurationMissing,
    ContactState,
    PanelState,
    SmokeState,
    TargetState,
    UnknownZone,
)
from custom_components.alarmdecoder_bridge import diagnostics, hub as hub_module
from custom_components.alarmdecoder_bridge.const import (
    DATA_HUB,
    DOMAIN,
    signal_panel_updated,
    signal_zone_updated,
)
from custom_components.alarmdecoder_bridge.hub import AlarmDecoderHub
from homeassistant.exceptions import HomeAssistantError

_RAW_CONFIG = {
    "key": "ABCDEF",
    "panel": {"name": "Alarm System", "manufacturer": "Honeywell"},
    "endpoints": {
        "get": {"method": "GET", "url": "http://decoder.local/api/v1/alarmdecoder"},
        "away": {"method": "POST", "url": "http://decoder.local/api/v1/alarmdecoder/send", "body": "12342"},
    },
    "zones": [
        {"id": "12", "type": "contact", "name": "front_door", "fullname": "Front Door"},
        {"id": "20", "type": "smoke", "name": "kitchen_smoke", "fullname": "Kitchen Smoke"},
    ],
}

_ARMED_AWAY = {
    "last_message_received": '" ARMED ***AWAY***"',
    "panel_alarming": False,
    "panel_armed": True,
    "panel_armed_stay": False,
    "panel_powered": True,
    "panel_type": "ADEMCO",
    "panel_zones_faulted": [12],
}


class _FakeHass:
    def __init__(self) -> None:
        self.data = {}
        self.tasks = []

    def async_create_task(self, target, name=None, eager_start=True):
        task = asyncio.create_task(target)
        self.tasks.append(task)
        return task


class _FakeResponse:
    def __init__(self, status, body, gate=None) -> None:
        self.status = status
        self._body = body
        self._gate = gate

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def read(self):
        if self._gate is not None:
            await self._gate.wait()
        return self._body


class _FakeSession:
    def __init__(self, status_payload=None, gate=None) -> None:
        self.body = json.dumps(status_payload or _ARMED_AWAY).encode()
        self.gate = gate
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if method == "GET":
            return _FakeResponse(200, self.body, self.gate)
        return _FakeResponse(200, b"")


class _FakeEntry:
    def __init__(self, entry_id, data) -> None:
        self.entry_id = entry_id
        self.data = data


@pytest.fixture
def signals(monkeypatch):
    sent = []

    def _record(hass, signal, *args):
        sent.append((signal, *args))

    monkeypatch.setattr(hub_module, "async_dispatcher_send", _record)
    return sent


def _hub(session=None):
    hass = _FakeHass()
    hub = AlarmDecoderHub(
        hass,
        "entry1",
        BridgeConfig.from_dict(_RAW_CONFIG),
        session or _FakeSession(),
    )
    return hass, hub


def test_publish_unknown_zone_raises_without_signal(signals):
    _, hub = _hub()

    with pytest.raises(UnknownZone):
        hub.publish_zone_state("99", ContactState.NOT_DETECTED)

    assert signals == []


def test_publish_zone_state_updates_value_and_signals(signals):
    _, hub = _hub()
    assert hub.zone_value("12") is ContactState.DETECTED

    hub.publish_zone_state("12", ContactState.NOT_DETECTED)

    assert hub.zone_value("12") is ContactState.NOT_DETECTED
    assert signals == [(signal_zone_updated("entry1", "12"), ContactState.NOT_DETECTED)]


@pytest.mark.asyncio
async def test_set_target_state_publishes_resolved_state(signals):
    session = _FakeSession()
    _, hub = _hub(session)

    state = await hub.async_set_target_state(TargetState.AWAY_ARM)

    assert state is PanelState.AWAY_ARM
    assert [method for method, _, _ in session.requests] == ["POST", "GET"]
    assert signals == [(signal_panel_updated("entry1"), PanelState.AWAY_ARM)]


@pytest.mark.asyncio
async def test_set_target_state_failure_raises_home_assistant_error(signals):
    session = _FakeSession()
    _, hub = _hub(session)

    with pytest.raises(HomeAssistantError) as excinfo:
        await hub.async_set_target_state(TargetState.NIGHT_ARM)

    assert isinstance(excinfo.value.__cause__, ConfigurationMissing)
    assert session.requests == []
    assert signals == []
    assert hub.panel_state is None


@pytest.mark.asyncio
async def test_fire_notification_during_panel_requery_stays_detected(signals):
    session = _FakeSession(gate=asyncio.Event())
    hass, hub = _hub(session)

    hub.async_handle_notification("The alarm system has been armed.")
    for _ in range(3):
        await asyncio.sleep(0)
    assert len(session.requests) == 1

    hub.async_handle_notification("There is a fire!")
    await hass.tasks[1]
    session.gate.set()
    await asyncio.gather(*hass.tasks)

    assert hub.zone_value("20") is SmokeState.DETECTED
    assert hub.reconciler.zone_state("20") is True
    assert hub.panel_state is PanelState.AWAY_ARM


@pytest.mark.asyncio
async def test_stop_cancels_notifications_in_flight(signals):
    session = _FakeSession(gate=asyncio.Event())
    hass, hub = _hub(session)

    hub.async_handle_notification("The alarm system has been disarmed.")
    await asyncio.sleep(0)
    await hub.async_stop()

    assert hass.tasks[0].cancelled()
    assert hub.panel_state is None


@pytest.mark.asyncio
async def test_diagnostics_include_raw_status_and_redact_key(signals):
    hass, hub = _hub()
    await hub.async_start()
    hub.publish_zone_state("12", ContactState.NOT_DETECTED)
    hass.data[DOMAIN] = {"entry1": {DATA_HUB: hub}}
    entry = _FakeEntry("entry1", dict(_RAW_CONFIG))

    result = await diagnostics.async_get_config_entry_diagnostics(hass, entry)

    assert result["config"]["key"] != "ABCDEF"
    assert result["config"]["endpoints"]["away"]["body"] != "12342"
    assert result["panel_state"] == "away_arm"
    assert result["panel_status"]["panel_type"] == "ADEMCO"
    assert result["panel_status"]["powered"] is True
    assert result["panel_status"]["zones_faulted"] == [12]
    assert {zone["zone_id"]: zone["accessory_value"] for zone in result["zones"]} == {
        "12": "not detected",
        "20": "not detected",
    }
