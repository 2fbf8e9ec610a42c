"""Hardened XML parsing of HTTP response bodies."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Protocol, Union

from lxml import etree

from ..core.model import ParseError

logger = logging.getLogger(__name__)

EMPTY_BODY_PLACEHOLDER = b"<root />"
ERROR_PREFIX = "Unable to parse response body into XML: "

# lxml keeps the default parser and the error log as global state; the
# save/set/restore sequence below is not atomic, so only one parse at a time.
_GLOBAL_STATE_LOCK = threading.Lock()


class HasContent(Protocol):
    """Anything with a raw body, e.g. ``requests.Response`` or ``httpx.Response``."""

    content: bytes


def _hardened_parser() -> etree.XMLParser:
    """Parser that never loads external entities, DTDs or network resources."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )


@contextmanager
def _scoped_parser_state(parser: etree.XMLParser) -> Iterator[etree.XMLParser]:
    """Install ``parser`` as the default parser with a clean error log.

    The previous default parser is put back and the error log cleared on
    every exit path.
    """
    with _GLOBAL_STATE_LOCK:
        previous = etree.get_default_parser()
        etree.set_default_parser(parser)
        etree.clear_error_log()
        try:
            yield parser
        finally:
            etree.clear_error_log()
            etree.set_default_parser(previous)


def _first_error(parser: etree.XMLParser) -> str | None:
    """First diagnostic the parser logged, warnings included."""
    errors = parser.error_log
    if len(errors):
        return errors[0].message
    return None


def parse_xml(body: Union[bytes, str]) -> etree._Element:
    """Parse ``body`` into an element tree, raising ``ParseError`` on failure.

    An empty body parses as a single empty ``<root />`` element.
    """
    if not body:
        body = EMPTY_BODY_PLACEHOLDER

    error_message = None
    xml = None
    with _scoped_parser_state(_hardened_parser()) as parser:
        try:
            xml = etree.fromstring(body, parser)
            error_message = _first_error(parser)
        except Exception as e:
            error_message = str(e) or e.__class__.__name__

    if error_message:
        logger.debug("XML parse failed: %s", error_message)
        raise ParseError(ERROR_PREFIX + error_message)

    return xml


def response_to_xml(response: HasContent) -> etree._Element:
    """Parse the body of an HTTP response into XML."""
    return parse_xml(response.content)
