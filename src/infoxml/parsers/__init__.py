"""Format parsers for infoxml."""

from .info import InfoFormatParser, parse_info_format, parse_info_file
from .xml import parse_xml, response_to_xml
