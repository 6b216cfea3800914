"""Shared plumbing for the per-provider upstream clients."""

import httpx
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional
from aqvision.core.errors import UpstreamError
import logging

logger = logging.getLogger(__name__)


class UpstreamRequest(BaseModel):
    """A fully built provider request. Never mutated after construction."""

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    url: str
    params: Dict[str, str] = {}
    json_body: Optional[Dict[str, Any]] = None


class UpstreamClient:
    """Issues one HTTP call per request through the shared httpx client."""

    provider = "Upstream"

    def __init__(self, http: httpx.AsyncClient, debug: bool = False):
        self.http = http
        self.debug = debug

    async def send(self, upstream_request: UpstreamRequest) -> httpx.Response:
        """Sends the request, mapping transport failures to UpstreamError."""
        try:
            return await self.http.request(
                upstream_request.method,
                upstream_request.url,
                params=upstream_request.params,
                json=upstream_request.json_body,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"{self.provider} request failed: {e}", exc_info=True)
            raise UpstreamError(self._failure_message(e)) from e

    async def fetch_json(self, upstream_request: UpstreamRequest) -> Any:
        """Sends the request and returns the decoded JSON body of a 2xx reply."""
        response = await self.send(upstream_request)
        if not response.is_success:
            logger.warning(
                f"{self.provider} answered {response.status_code} for {upstream_request.url}"
            )
            raise UpstreamError(
                f"{self.provider} fetch failed", upstream_status=response.status_code
            )
        return self.decode(response)

    def decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{self.provider} returned malformed JSON: {e}")
            raise UpstreamError(self._failure_message(e)) from e

    def _failure_message(self, exc: Exception) -> str:
        # Resolver and socket errors stay in the logs unless debugging.
        if self.debug and str(exc):
            return str(exc)
        return f"{self.provider} request failed ({type(exc).__name__})"
