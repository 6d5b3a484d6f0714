"""
alarmdecoder_lib/errors.py

Typed errors for the AlarmDecoder bridge.

Every failure the reconciler reports is one of these. None of them are fatal
to the process; the reconciler returns them through Result.failure() and the
host integration decides how to surface them.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Error codes for the failure kinds the bridge distinguishes."""

    CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    PARSE_FAILURE = "PARSE_FAILURE"
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    UNKNOWN_ZONE_TYPE = "UNKNOWN_ZONE_TYPE"
    UNKNOWN = "UNKNOWN"


class AlarmDecoderError(Exception):
    """
    Base error for bridge operations.

    Carries a stable code, the HTTP status when one was received and any
    structured details useful for logs and diagnostics.
    """

    default_code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | str | None = None,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        if code is None:
            code = self.default_code
        self.code = code if isinstance(code, ErrorCode) else ErrorCode(code)
        self.status = status
        self.details = details or {}

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.code != ErrorCode.UNKNOWN:
            parts.append(f"code={self.code}")
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.details:
            parts.append(f"details={self.details}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({super().__str__()!r}, code={self.code!r}, "
            f"status={self.status!r}, details={self.details!r})"
        )


class ConfigurationMissing(AlarmDecoderError):
    """A required endpoint or configuration value is absent."""

    default_code = ErrorCode.CONFIGURATION_MISSING


class TransportFailure(AlarmDecoderError):
    """The control API could not be reached or answered with a non-2xx status."""

    default_code = ErrorCode.TRANSPORT_FAILURE


class ParseFailure(AlarmDecoderError):
    """A notification looked like a known message but did not match its pattern."""

    default_code = ErrorCode.PARSE_FAILURE


class UnknownZone(AlarmDecoderError):
    """A zone id is not present in the zone registry."""

    default_code = ErrorCode.UNKNOWN_ZONE

    def __init__(self, zone_id: str) -> None:
        super().__init__(f"Unknown zone {zone_id}", details={"zone_id": zone_id})
        self.zone_id = zone_id


class UnknownZoneType(AlarmDecoderError):
    """A zone carries a type the bridge cannot represent."""

    default_code = ErrorCode.UNKNOWN_ZONE_TYPE

    def __init__(self, zone_id: str | None, zone_type: object) -> None:
        super().__init__(
            f"Zone {zone_id} has an unknown type {zone_type}",
            details={"zone_id": zone_id, "zone_type": str(zone_type)},
        )
        self.zone_id = zone_id
        self.zone_type = zone_type


__all__ = [
    "AlarmDecoderError",
    "ConfigurationMissing",
    "ErrorCode",
    "ParseFailure",
    "TransportFailure",
    "UnknownZone",
    "UnknownZoneType",
]
