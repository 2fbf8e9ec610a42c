"""Synchronous XML-over-HTTP client using requests."""

import logging
from typing import Any, Optional

import requests
from lxml import etree

from ..core.model import FetchError
from ..parsers.xml import response_to_xml
from .base import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class XmlClient:
    """Wraps a requests session and parses every GET response as XML."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get(self, uri: str, **options: Any) -> etree._Element:
        """GET `uri` and return the root element of the parsed body.

        `options` are handed to ``Session.get`` untouched (headers, params,
        timeout, ...); only ``timeout`` gets a default.
        """
        options.setdefault("timeout", self.timeout)
        try:
            response = self._session.get(uri, **options)
        except requests.RequestException as e:
            raise FetchError(f"GET request failed: {e}") from e

        logger.debug("GET %s -> %s (%d bytes)", uri, response.status_code, len(response.content))
        if response.status_code >= 400:
            raise FetchError(
                f"GET request failed with status {response.status_code}",
                status_code=response.status_code,
            )

        return response_to_xml(response)

    def close(self):
        """Close the session if this client created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def open_xml_client(session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT) -> XmlClient:
    """Create a synchronous XML client."""
    return XmlClient(session, timeout=timeout)


def get_xml(uri: str, **options: Any) -> etree._Element:
    """One-shot GET through the shared module-level session."""
    return XmlClient(_get_session()).get(uri, **options)
