"""Transport layer for infoxml - GET a resource and hand back parsed XML."""

# Re-export these for import convenience
from .base import XmlFetcher, AsyncXmlFetcher, DEFAULT_TIMEOUT
from .http_sync import XmlClient, open_xml_client, get_xml
from .http_async import AsyncXmlClient, open_xml_client_async, get_xml_async, close_global_client


def open_client(session=None, *, timeout: float = DEFAULT_TIMEOUT) -> XmlClient:
    """Factory function for a synchronous client, optionally around an existing session."""
    return open_xml_client(session, timeout=timeout)


async def open_client_async(client=None, *, timeout: float = DEFAULT_TIMEOUT) -> AsyncXmlClient:
    """Factory function for an asynchronous client, optionally around an existing httpx client."""
    return await open_xml_client_async(client, timeout=timeout)
