"""
Notification parsing.

AlarmDecoder's custom notification posts one human-readable message per
event, for example:

    The alarm system has been armed.
    The alarm system has been disarmed.
    The alarm system has been triggered on zone {zone_name} ({zone})!
    The alarm system has stopped signaling the alarm for zone {zone_name} ({zone}).
    There is a fire!
    Zone {zone_name} ({zone}) has been faulted.
    Zone {zone_name} ({zone}) has been restored.

Panel messages are not parsed further; the panel is re-queried instead. Zone
messages are parsed because the control API has no cheap per-zone status.
"""

from __future__ import annotations

import json
import logging
import re
from urllib.parse import parse_qs

from .const import (
    FIRE_PREFIX,
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    PANEL_STATUS_PREFIX,
    ZONE_FAULTED_WORD,
    ZONE_PREFIX,
)
from .errors import ParseFailure
from .events import (
    FireAlarm,
    NotificationEvent,
    PanelStatusChanged,
    Unrecognized,
    ZoneChanged,
)

logger = logging.getLogger(__name__)

_ZONE_RE = re.compile(r"^Zone (.+) \((\d+)\) has been (\w*)")


def parse_notification(message: str) -> NotificationEvent:
    """
    Convert a notification message into a typed event.

    Prefixes are checked in order and the first match wins. Messages with an
    unknown prefix are not an error; they become Unrecognized.
    """
    if message.startswith(PANEL_STATUS_PREFIX):
        return PanelStatusChanged()
    if message.startswith(FIRE_PREFIX):
        return FireAlarm()
    if message.startswith(ZONE_PREFIX):
        try:
            return _parse_zone_message(message)
        except ParseFailure as err:
            logger.warning("Unable to parse zone notification message: %s", err)
            return Unrecognized(raw=message, parse_failure=True)
    return Unrecognized(raw=message)


def _parse_zone_message(message: str) -> ZoneChanged:
    found = _ZONE_RE.match(message)
    if found is None:
        raise ParseFailure(
            "Zone message does not match the expected pattern",
            details={"message": message},
        )
    fullname, zone_id, word = found.groups()
    # zone_id stays a string; it is the registry key as written by the panel.
    return ZoneChanged(
        fullname=fullname,
        zone_id=zone_id,
        faulted=word == ZONE_FAULTED_WORD,
    )


def decode_notification_body(body: bytes, content_type: str | None = None) -> str | None:
    """
    Extract the `message` field from a notification request body.

    JSON and form-encoded bodies are accepted. Returns None when the body
    carries no string message.
    """
    text = body.decode("utf-8", errors="replace").strip()
    if not text:
        return None
    media_type = (content_type or "").split(";", 1)[0].strip().lower()

    if media_type != FORM_CONTENT_TYPE:
        try:
            payload = json.loads(text)
        except ValueError:
            if media_type == JSON_CONTENT_TYPE:
                logger.debug("Notification body is not valid JSON: %s", text)
                return None
        else:
            if isinstance(payload, dict):
                message = payload.get("message")
                return message if isinstance(message, str) else None
            return None

    values = parse_qs(text, keep_blank_values=True).get("message")
    if not values:
        return None
    return values[0]


__all__ = ["decode_notification_body", "parse_notification"]
