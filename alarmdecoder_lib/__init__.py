"""
AlarmDecoder bridge library.

Framework-independent core that reconciles an AlarmDecoder panel (REST
control API plus text notifications) with a simple accessory model.
"""

from __future__ import annotations

from .client import AlarmDecoderClient
from .config import BridgeConfig, CONFIG_SCHEMA, Endpoint, PanelInfo, ZoneConfig
from .dispatcher import PanelCommandDispatcher
from .encoding import (
    CarbonMonoxideLevel,
    ContactState,
    MotionState,
    SmokeState,
    ZoneAccessoryValue,
    default_zone_value,
    encode_zone_state,
    is_faulted_value,
)
from .errors import (
    AlarmDecoderError,
    ConfigurationMissing,
    ErrorCode,
    ParseFailure,
    TransportFailure,
    UnknownZone,
    UnknownZoneType,
)
from .events import (
    FireAlarm,
    NotificationEvent,
    PanelStatusChanged,
    Unrecognized,
    ZoneChanged,
)
from .parser import decode_notification_body, parse_notification
from .reconciler import Reconciler
from .registry import ZoneRegistry
from .resolver import PanelStateResolver, reduce_panel_status
from .sink import AccessorySink, RegistryBackedSink
from .types import (
    PanelState,
    RawPanelStatus,
    Result,
    TargetState,
    ZoneDescriptor,
    ZoneType,
)

__version__ = "0.2.0"

__all__ = [
    "__version__",
    # Client
    "AlarmDecoderClient",
    # Config
    "BridgeConfig",
    "CONFIG_SCHEMA",
    "Endpoint",
    "PanelInfo",
    "ZoneConfig",
    # Encoding
    "CarbonMonoxideLevel",
    "ContactState",
    "MotionState",
    "SmokeState",
    "ZoneAccessoryValue",
    "default_zone_value",
    "encode_zone_state",
    "is_faulted_value",
    # Errors
    "AlarmDecoderError",
    "ConfigurationMissing",
    "ErrorCode",
    "ParseFailure",
    "TransportFailure",
    "UnknownZone",
    "UnknownZoneType",
    # Events
    "FireAlarm",
    "NotificationEvent",
    "PanelStatusChanged",
    "Unrecognized",
    "ZoneChanged",
    # Parsing
    "decode_notification_body",
    "parse_notification",
    # Reconciliation
    "AccessorySink",
    "PanelCommandDispatcher",
    "PanelStateResolver",
    "Reconciler",
    "RegistryBackedSink",
    "ZoneRegistry",
    "reduce_panel_status",
    # Types
    "PanelState",
    "RawPanelStatus",
    "Result",
    "TargetState",
    "ZoneDescriptor",
    "ZoneType",
]
