"""xkcd JSON API client.

Free API, no key required. Each call makes exactly one request with the
httpx default timeout; there are no retries; failures surface to the caller.
"""

import logging
from typing import Any

import httpx

from config import settings
from errors import UpstreamParseError, UpstreamTransportError

logger = logging.getLogger(__name__)


class XkcdClient:
    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = (base_url or settings.xkcd_base_url).rstrip("/")
        self._transport = transport

    def url_for(self, number: int | None = None) -> str:
        """URL of the latest comic, or of comic `number`."""
        if number is None:
            return f"{self.base_url}/info.0.json"
        return f"{self.base_url}/{number}/info.0.json"

    async def fetch(self, number: int | None = None) -> Any:
        url = self.url_for(number)

        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                resp = await client.get(url)
            except httpx.RequestError as e:
                logger.warning("xkcd fetch failed for %s: %s", url, e)
                raise UpstreamTransportError(None, str(e) or type(e).__name__, url) from e

        if not resp.is_success:
            logger.warning("xkcd returned %d for %s", resp.status_code, url)
            raise UpstreamTransportError(resp.status_code, resp.reason_phrase, url)

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("xkcd returned invalid JSON for %s: %s", url, e)
            raise UpstreamParseError(str(e), url) from e
