"""Zone registry: zone id to descriptor, populated once at startup."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from .config import ZoneConfig
from .errors import UnknownZone, UnknownZoneType
from .types import ZoneDescriptor, ZoneType

logger = logging.getLogger(__name__)


class ZoneRegistry:
    """
    Keyed, read-only view of the configured zones.

    Lookups are by the zone id string exactly as the panel writes it.
    Duplicate ids keep the first entry.
    """

    def __init__(self, zones: Iterable[ZoneDescriptor] = ()) -> None:
        self._zones: dict[str, ZoneDescriptor] = {}
        for zone in zones:
            self._add(zone)

    @classmethod
    def from_config(cls, zones: Iterable[ZoneConfig]) -> "ZoneRegistry":
        """Build a registry from configured zones, skipping unknown types."""
        descriptors: list[ZoneDescriptor] = []
        for zone in zones:
            try:
                zone_type = ZoneType(zone.zone_type)
            except ValueError:
                err = UnknownZoneType(zone.zone_id, zone.zone_type)
                logger.warning("Skipping zone: %s", err)
                continue
            descriptors.append(
                ZoneDescriptor(
                    zone_id=zone.zone_id,
                    zone_type=zone_type,
                    display_name=zone.fullname,
                    name=zone.name,
                )
            )
        return cls(descriptors)

    def _add(self, zone: ZoneDescriptor) -> None:
        if zone.zone_id in self._zones:
            logger.warning("Zone %s already exists", zone.zone_id)
            return
        self._zones[zone.zone_id] = zone

    def __contains__(self, zone_id: object) -> bool:
        return zone_id in self._zones

    def __iter__(self) -> Iterator[ZoneDescriptor]:
        return iter(self._zones.values())

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def zones(self) -> Mapping[str, ZoneDescriptor]:
        return MappingProxyType(self._zones)

    def get_zone_descriptor(self, zone_id: str) -> ZoneDescriptor | None:
        return self._zones.get(zone_id)

    def require(self, zone_id: str) -> ZoneDescriptor:
        """Return the descriptor for `zone_id` or raise UnknownZone."""
        zone = self._zones.get(zone_id)
        if zone is None:
            raise UnknownZone(zone_id)
        return zone

    def list_zones_by_type(self, zone_type: ZoneType | str) -> list[ZoneDescriptor]:
        return [zone for zone in self._zones.values() if zone.zone_type == zone_type]


__all__ = ["ZoneRegistry"]
