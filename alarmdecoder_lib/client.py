"""
REST client for the AlarmDecoder control API.

The client performs exactly two kinds of call: the status read (`get`
endpoint) and the key-code commands (`disarm`, `away`, `stay`, `night`).
Every call carries the configured API key, JSON content headers and a total
timeout. Any transport error, timeout, non-2xx status or undecodable body is
raised as TransportFailure; no call is retried.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .config import BridgeConfig, Endpoint
from .const import COMMAND_ENDPOINTS, ENDPOINT_GET, JSON_CONTENT_TYPE
from .errors import ConfigurationMissing, TransportFailure
from .types import RawPanelStatus

logger = logging.getLogger(__name__)


class AlarmDecoderClient:
    """Async client for one AlarmDecoder control API."""

    def __init__(self, config: BridgeConfig, session: aiohttp.ClientSession) -> None:
        self._config = config
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=config.timeout_s)

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": self._config.key,
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }

    async def async_get_status(self) -> RawPanelStatus:
        """Read the panel status."""
        endpoint = self._config.endpoint(ENDPOINT_GET)
        text = await self._async_request(endpoint, "")
        try:
            payload = json.loads(text)
        except ValueError as err:
            raise TransportFailure(
                "Panel status is not valid JSON",
                details={"url": endpoint.url},
            ) from err
        if not isinstance(payload, dict):
            raise TransportFailure(
                "Panel status is not a JSON object",
                details={"url": endpoint.url},
            )
        try:
            return RawPanelStatus.from_json(payload)
        except (TypeError, ValueError) as err:
            raise TransportFailure(
                "Panel status has unexpected field types",
                details={"url": endpoint.url},
            ) from err

    async def async_send_command(self, name: str) -> None:
        """Send the key codes configured for the named command endpoint."""
        if name not in COMMAND_ENDPOINTS:
            raise ConfigurationMissing(
                f"'{name}' is not a command endpoint",
                details={"endpoint": name},
            )
        endpoint = self._config.endpoint(name)
        if endpoint.body is None:
            raise ConfigurationMissing(
                f"Endpoint '{name}' has no key codes",
                details={"endpoint": name},
            )
        await self._async_request(endpoint, json.dumps({"keys": endpoint.body}))

    async def _async_request(self, endpoint: Endpoint, body: str) -> str:
        method = endpoint.method
        url = endpoint.url
        request_kwargs: dict[str, Any] = {
            "headers": self._headers(),
            "timeout": self._timeout,
        }
        if body:
            request_kwargs["data"] = body
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s %s", method, url, body)
        try:
            async with self._session.request(method, url, **request_kwargs) as response:
                status = response.status
                raw = await response.read()
        except asyncio.TimeoutError as err:
            logger.error("Failed: %s %s timed out after %ss", method, url, self._config.timeout_s)
            raise TransportFailure(
                "Control API request timed out",
                details={"method": method, "url": url},
            ) from err
        except aiohttp.ClientError as err:
            logger.error("Failed: %s %s [0] %s", method, url, err)
            raise TransportFailure(
                "Unable to make api call",
                details={"method": method, "url": url},
            ) from err

        if status < 200 or status > 299:
            logger.error("Failed: %s %s [%s]", method, url, status)
            raise TransportFailure(
                "Unable to make api call",
                status=status,
                details={"method": method, "url": url},
            )
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            logger.error("Failed: %s %s response is not UTF-8", method, url)
            raise TransportFailure(
                "Control API response is not valid UTF-8",
                status=status,
                details={"method": method, "url": url},
            ) from err


__all__ = ["AlarmDecoderClient"]
