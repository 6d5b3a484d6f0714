"""Panel command dispatch: TargetState to control API command."""

from __future__ import annotations

import logging
from typing import Protocol

from .const import ENDPOINT_AWAY, ENDPOINT_DISARM, ENDPOINT_NIGHT, ENDPOINT_STAY
from .errors import ConfigurationMissing
from .types import TargetState

logger = logging.getLogger(__name__)

COMMAND_BY_TARGET: dict[TargetState, str] = {
    TargetState.DISARM: ENDPOINT_DISARM,
    TargetState.AWAY_ARM: ENDPOINT_AWAY,
    TargetState.STAY_ARM: ENDPOINT_STAY,
    TargetState.NIGHT_ARM: ENDPOINT_NIGHT,
}


class CommandSink(Protocol):
    async def async_send_command(self, name: str) -> None: ...


class PanelCommandDispatcher:
    """
    Send the command for a requested target state.

    Success only means the control API accepted the request. Callers must
    re-query the panel to learn the state it actually reached.
    """

    def __init__(self, commands: CommandSink) -> None:
        self._commands = commands

    async def async_dispatch(self, target: TargetState) -> None:
        try:
            target = TargetState(target)
        except ValueError as err:
            raise ConfigurationMissing(
                f"No command is mapped to {target}",
                details={"target": str(target)},
            ) from err
        await self._commands.async_send_command(COMMAND_BY_TARGET[target])
        logger.debug("new alarmdecoder panel state requested = %s", target.name)


__all__ = ["COMMAND_BY_TARGET", "CommandSink", "PanelCommandDispatcher"]
