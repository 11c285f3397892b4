"""
Outbound call to the chat completion endpoint
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from .config import RelaySettings
from .exceptions import UpstreamInvalidResponse, UpstreamUnreachable
from .models import ParsedChatRequest, UpstreamRequest

logger = logging.getLogger(__name__)


@dataclass
class UpstreamResult:
    """Decoded upstream body and the status it came with"""
    body: Any
    status_code: int


class UpstreamClient:
    """Posts one completion request per call. No retries."""

    def __init__(self, settings: RelaySettings, http_client: httpx.AsyncClient):
        self._url = settings.UPSTREAM_URL
        self._api_key = settings.OPENAI_API_KEY
        self._timeout = httpx.Timeout(settings.UPSTREAM_TIMEOUT_SECONDS)
        self._http = http_client

    @staticmethod
    def build_payload(parsed: ParsedChatRequest) -> dict:
        """Fixed model and sampling settings around the caller's messages"""
        return UpstreamRequest.from_parsed(parsed).to_payload()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }

    async def complete(self, parsed: ParsedChatRequest) -> UpstreamResult:
        payload = self.build_payload(parsed)
        logger.debug(f"Forwarding {len(parsed.messages)} messages to {self._url}")

        try:
            response = await self._http.post(
                self._url,
                json=payload,
                headers=self._headers(),
                timeout=self._timeout,
            )
        except httpx.HTTPError as e:
            raise UpstreamUnreachable(type(e).__name__) from e

        if response.is_error:
            logger.warning(f"Upstream answered {response.status_code}")

        try:
            body = response.json()
        except ValueError as e:
            raise UpstreamInvalidResponse(
                f"status {response.status_code}, {len(response.content)} bytes"
            ) from e

        return UpstreamResult(body=body, status_code=response.status_code)


def create_http_client() -> httpx.AsyncClient:
    """Shared connection pool for the lifetime of the app"""
    return httpx.AsyncClient()
