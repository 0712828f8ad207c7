"""Minimal Webex REST client.

Wraps an aiohttp ClientSession owned by the caller. No retries and no
timeouts of its own: a failed call surfaces immediately as an AdapterError.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from aiohttp import ClientError, ClientSession

from config import DEFAULT_WEBEX_API_BASE
from core.errors import NetworkError, RateLimitError, TransportError

_log = logging.getLogger("chat-bridge.webex.client")

PLATFORM = "webex"


def _parse_retry_after(value: Optional[str]) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class WebexApiClient:
    """Bearer-authenticated JSON requests against the Webex API."""

    def __init__(
        self,
        session: ClientSession,
        token: str,
        api_base_url: str = DEFAULT_WEBEX_API_BASE,
    ) -> None:
        self._session = session
        self._token = token
        self._api_base_url = api_base_url.rstrip("/")

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    def resolve_url(self, path_or_url: str) -> str:
        """Absolute URLs (pagination links) pass through; paths join the base."""
        if path_or_url.startswith("http"):
            return path_or_url
        return f"{self._api_base_url}{path_or_url}"

    async def request(
        self,
        method: str,
        path_or_url: str,
        body: Optional[dict[str, Any]] = None,
    ) -> tuple[Any, Mapping[str, str]]:
        """Issue one request and return (decoded JSON, response headers).

        Raises:
            RateLimitError: status 429
            TransportError: any other non-success status, or a non-JSON body
            NetworkError: the request never produced a response
        """
        url = self.resolve_url(path_or_url)
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        payload = json.dumps(body) if body is not None else None

        _log.debug("Webex %s %s", method, url)
        try:
            async with self._session.request(method, url, headers=headers, data=payload) as resp:
                text = await resp.text()
                status = resp.status
                resp_headers = resp.headers
        except ClientError as e:
            raise NetworkError(PLATFORM, f"Webex API {method} {url} failed: {e}", e) from e

        if status == 429:
            raise RateLimitError(
                PLATFORM,
                _parse_retry_after(resp_headers.get("Retry-After")),
                method=method,
                url=url,
                status=status,
                body=text,
            )
        if status < 200 or status >= 300:
            raise TransportError(PLATFORM, method, url, status, text)

        if not text:
            return {}, resp_headers
        try:
            return json.loads(text), resp_headers
        except ValueError:
            raise TransportError(PLATFORM, method, url, status, f"invalid JSON: {text}") from None
