"""Constants shared by the AlarmDecoder bridge library."""

from __future__ import annotations

# Notification prefixes, as sent by AlarmDecoder's default message templates.
PANEL_STATUS_PREFIX = "The alarm system has"
FIRE_PREFIX = "There is a fire!"
ZONE_PREFIX = "Zone "

ZONE_FAULTED_WORD = "faulted"

# Substrings of last_message_received that mark night/instant arming.
NIGHT_MARKERS = ("NIGHT", "INSTANT")

ENDPOINT_GET = "get"
ENDPOINT_DISARM = "disarm"
ENDPOINT_AWAY = "away"
ENDPOINT_STAY = "stay"
ENDPOINT_NIGHT = "night"

COMMAND_ENDPOINTS = (ENDPOINT_DISARM, ENDPOINT_AWAY, ENDPOINT_STAY, ENDPOINT_NIGHT)

DEFAULT_TIMEOUT_S = 10.0

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
