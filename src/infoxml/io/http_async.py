"""Asynchronous XML-over-HTTP client using httpx."""

import logging
from typing import Any, Optional

import httpx
from lxml import etree

from ..core.model import FetchError
from ..parsers.xml import response_to_xml
from .base import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Global async client
_client: Optional[httpx.AsyncClient] = None


def _get_client() -> httpx.AsyncClient:
    """Get or create the global httpx AsyncClient."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)
    return _client


class AsyncXmlClient:
    """Wraps an httpx AsyncClient and parses every GET response as XML."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = DEFAULT_TIMEOUT):
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def get(self, uri: str, **options: Any) -> etree._Element:
        """GET `uri` and return the root element of the parsed body."""
        try:
            response = await self._client.get(uri, **options)
        except httpx.HTTPError as e:
            raise FetchError(f"GET request failed: {e}") from e

        logger.debug("GET %s -> %s (%d bytes)", uri, response.status_code, len(response.content))
        if response.status_code >= 400:
            raise FetchError(
                f"GET request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        return response_to_xml(response)

    async def aclose(self):
        """Close the underlying client if this wrapper created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


async def open_xml_client_async(client: Optional[httpx.AsyncClient] = None,
                                timeout: float = DEFAULT_TIMEOUT) -> AsyncXmlClient:
    """Create an asynchronous XML client."""
    return AsyncXmlClient(client, timeout=timeout)


async def get_xml_async(uri: str, **options: Any) -> etree._Element:
    """One-shot GET through the shared module-level client."""
    return await AsyncXmlClient(_get_client()).get(uri, **options)


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
