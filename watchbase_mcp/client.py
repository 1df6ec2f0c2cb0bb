"""
Async HTTP client for the WatchBase data API.

Every request carries the API key and format=json as query parameters
and is bounded by a single timeout. No retries, no caching.
"""

from typing import Any, Optional

import httpx

from .config import Config, Settings
from .logger import get_logger
from .translator import UpstreamRequest

log = get_logger("client")


class WatchBaseClient:
    """Async client for the WatchBase data API."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            params={"key": settings.api_key, "format": settings.response_format},
            timeout=settings.timeout,
            headers={"User-Agent": f"{Config.SERVER_NAME}/{Config.SERVER_VERSION}"},
            transport=transport,
            follow_redirects=True,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    async def fetch(self, request: UpstreamRequest) -> Any:
        """
        Issue one GET for `request` and return the decoded JSON body.
        A 2xx body that is not JSON is returned as text.

        Raises httpx.HTTPStatusError for non-2xx responses and
        httpx.RequestError (incl. timeouts) when no response arrived.
        """
        log.debug(f"GET {request.path} params={sorted(request.params)}")
        response = await self._http.get(request.path, params=request.params)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            return response.text

    async def close(self):
        await self._http.aclose()

    async def __aenter__(self) -> "WatchBaseClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()
