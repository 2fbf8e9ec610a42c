"""Base protocols and shared types for the transport layer."""

from typing import Any, Protocol, runtime_checkable

from lxml import etree


DEFAULT_TIMEOUT = 30.0  # seconds


@runtime_checkable
class XmlFetcher(Protocol):
    """Protocol for synchronous XML-fetching clients."""

    def get(self, uri: str, **options: Any) -> etree._Element:
        """GET `uri` and return the parsed body.
        Transport failure → FetchError, unparsable body → ParseError.
        """
        ...


@runtime_checkable
class AsyncXmlFetcher(Protocol):
    """Protocol for asynchronous XML-fetching clients."""

    async def get(self, uri: str, **options: Any) -> etree._Element:
        """GET `uri` and return the parsed body.
        Transport failure → FetchError, unparsable body → ParseError.
        """
        ...
