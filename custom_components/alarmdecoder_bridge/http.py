"""HTTP view receiving AlarmDecoder notifications.

AlarmDecoder custom notification settings: URL <home-assistant>/api/alarmdecoder_bridge/notify,
POST, urlencoded or JSON, custom key "message", custom value "{{message}}".
"""

from __future__ import annotations

from http import HTTPStatus
import logging

from aiohttp import web
from alarmdecoder_lib import decode_notification_body

from homeassistant.components.http import KEY_HASS, HomeAssistantView
from homeassistant.core import HomeAssistant

from .const import DATA_HUB, DOMAIN, NOTIFY_URL, NOTIFY_VIEW_NAME
from .hub import AlarmDecoderHub

_LOGGER = logging.getLogger(__name__)


class AlarmDecoderNotificationView(HomeAssistantView):
    """Accept notifications; always answer 200 whatever the message was."""

    url = NOTIFY_URL
    name = NOTIFY_VIEW_NAME
    requires_auth = False

    async def post(self, request: web.Request) -> web.Response:
        """Handle a notification post."""
        body = await request.read()
        message = decode_notification_body(body, request.content_type)
        if message is None:
            _LOGGER.debug("Notification without a message: %s", body)
        else:
            hass = request.app[KEY_HASS]
            for hub in _iter_hubs(hass):
                hub.async_handle_notification(message)
        return _ok()

    async def _async_ignore(self, request: web.Request) -> web.Response:
        """Consume a non-POST request and answer it without producing an event."""
        await request.read()
        return _ok()

    # OPTIONS is left to Home Assistant's CORS handling.
    get = head = put = patch = delete = _async_ignore


def _ok() -> web.Response:
    return web.Response(status=HTTPStatus.OK, content_type="text/plain")


def _iter_hubs(hass: HomeAssistant) -> list[AlarmDecoderHub]:
    entries = hass.data.get(DOMAIN, {})
    return [
        data[DATA_HUB]
        for data in entries.values()
        if isinstance(data, dict) and DATA_HUB in data
    ]
