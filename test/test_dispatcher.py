import pytest

from alarmdecoder_lib.dispatcher import PanelCommandDispatcher
from alarmdecoder_lib.errors import ConfigurationMissing, TransportFailure
from alarmdecoder_lib.types import TargetState


class _FakeCommands:
    def __init__(self, error=None) -> None:
        self.sent = []
        self.error = error

    async def async_send_command(self, name):
        self.sent.append(name)
        if self.error is not None:
            raise self.error


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("target", "command"),
    [
        (TargetState.DISARM, "disarm"),
        (TargetState.AWAY_ARM, "away"),
        (TargetState.STAY_ARM, "stay"),
        (TargetState.NIGHT_ARM, "night"),
    ],
)
async def test_target_maps_to_command(target, command):
    commands = _FakeCommands()
    await PanelCommandDispatcher(commands).async_dispatch(target)
    assert commands.sent == [command]


@pytest.mark.asyncio
async def test_target_value_text_is_accepted():
    commands = _FakeCommands()
    await PanelCommandDispatcher(commands).async_dispatch("away_arm")
    assert commands.sent == ["away"]


@pytest.mark.asyncio
async def test_unmapped_target_is_configuration_missing():
    commands = _FakeCommands()
    with pytest.raises(ConfigurationMissing):
        await PanelCommandDispatcher(commands).async_dispatch("alarm_triggered")
    assert commands.sent == []


@pytest.mark.asyncio
async def test_send_errors_propagate():
    dispatcher = PanelCommandDispatcher(_FakeCommands(error=TransportFailure("down", status=500)))
    with pytest.raises(TransportFailure):
        await dispatcher.async_dispatch(TargetState.DISARM)
