"""Accessory sink: where the reconciler publishes panel and zone states."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from .encoding import ZoneAccessoryValue
from .registry import ZoneRegistry
from .types import PanelState, ZoneDescriptor, ZoneType


class AccessorySink(Protocol):
    """
    Interface the reconciler drives.

    The reconciler only calls these methods; accessory creation and
    registration with the host belong to the implementation.
    """

    def publish_panel_state(self, state: PanelState) -> None: ...

    def publish_zone_state(self, zone_id: str, value: ZoneAccessoryValue) -> None: ...

    def get_zone_descriptor(self, zone_id: str) -> ZoneDescriptor | None: ...

    def list_zones_by_type(self, zone_type: ZoneType) -> Sequence[ZoneDescriptor]: ...


class RegistryBackedSink(ABC):
    """Sink base whose zone lookups are answered by a ZoneRegistry."""

    def __init__(self, registry: ZoneRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ZoneRegistry:
        return self._registry

    def get_zone_descriptor(self, zone_id: str) -> ZoneDescriptor | None:
        return self._registry.get_zone_descriptor(zone_id)

    def list_zones_by_type(self, zone_type: ZoneType) -> Sequence[ZoneDescriptor]:
        return self._registry.list_zones_by_type(zone_type)

    @abstractmethod
    def publish_panel_state(self, state: PanelState) -> None:
        """Push the resolved panel state to the panel accessory."""

    @abstractmethod
    def publish_zone_state(self, zone_id: str, value: ZoneAccessoryValue) -> None:
        """Push an encoded zone value to the zone accessory."""


__all__ = ["AccessorySink", "RegistryBackedSink"]
