"""infoxml - info-format parsing and XML-over-HTTP fetching."""

from .core.model import InfoNode, FetchError, ParseError              # re-export
from .parsers import InfoFormatParser, parse_info_format, parse_info_file
from .parsers import parse_xml, response_to_xml
from .io import XmlClient, AsyncXmlClient, open_client, open_client_async
from .io import get_xml, get_xml_async


__all__ = [
    "InfoFormatParser", "parse_info_format", "parse_info_file",
    "parse_xml", "response_to_xml",
    "XmlClient", "AsyncXmlClient", "open_client", "open_client_async",
    "get_xml", "get_xml_async",
    "InfoNode", "FetchError", "ParseError",
]
