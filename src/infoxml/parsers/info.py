"""Parser for the ``.info`` key/value format.

The format is INI-like. White-space generally doesn't matter, except inside
values::

    key = value
    key = "value"
    key = 'value'
    key = "multi-line
    value"
    key
    =
    'value'

Arrays use an HTTP query-string style syntax::

    key[] = "numeric array"
    key[index] = "associative array"
    key[index][] = "nested numeric array"
    key[index][index] = "nested associative array"

Lines starting with a semi-colon never match the grammar and are therefore
dropped, as is every other line that is not a key/value pair (including
pairs whose value opens a quote that is never closed). Parsing never fails:
malformed input simply contributes nothing to the result.
"""

from __future__ import annotations

import logging
import re
from os import PathLike
from typing import Any, Mapping, Optional, Union

from ..core.model import InfoNode
from ..core.util import normalize_key, unquote, next_index

logger = logging.getLogger(__name__)

_ENTRY = re.compile(
    r"""
    ^\s*                            # start of a line, ignoring leading white-space
    ((?:
      [^=;\[\]]|                    # key names cannot contain = ; [ or ]
      \[[^\[\]]*\]                  # unless bracketed, balanced and not nested
    )+?)
    \s*=\s*                         # key and value separated by =
    (?:
      ("(?:[^"]|(?<=\\)")*")|       # double-quoted, may contain \" escapes
      ('(?:[^']|(?<=\\)')*')|       # single-quoted, may contain \' escapes
      ((?!\s*(?P<open>["'])(?:(?!(?P=open)).)*\Z)
      [^\r\n]*?)                    # bare value up to the end of the line,
                                    # unless it opens a quote never closed
    )\s*$
    """,
    re.MULTILINE | re.DOTALL | re.VERBOSE,
)

_KEY_SPLIT = re.compile(r"\]?\[")
_CONSTANT_NAME = re.compile(r"\w+\Z", re.ASCII)


class InfoFormatParser:
    """Turns info-format text into nested dicts.

    ``constants`` maps bare-word values to substitutes; a value is replaced
    only when it consists entirely of word characters and the name is a key
    of the mapping.
    """

    def __init__(self, constants: Optional[Mapping[str, Any]] = None):
        self.constants: Mapping[str, Any] = constants if constants is not None else {}

    def parse(self, data: str) -> InfoNode:
        info: InfoNode = {}
        entries = 0
        for match in _ENTRY.finditer(data):
            key, double, single, bare = match.group(1, 2, 3, 4)
            value = self._value(double, single, bare)
            self._insert(info, key, value)
            entries += 1
        logger.debug("Parsed %d info entries from %d characters", entries, len(data))
        return info

    # ------------------------------------------------------------------ #
    def _value(self, double: str | None, single: str | None, bare: str | None) -> Any:
        if double is not None:
            value = unquote(double)
        elif single is not None:
            value = unquote(single)
        else:
            value = bare or ""

        if _CONSTANT_NAME.match(value) and value in self.constants:
            return self.constants[value]
        return value

    @staticmethod
    def _insert(info: InfoNode, key: str, value: Any) -> None:
        *path, last = _KEY_SPLIT.split(key.rstrip("]"))

        parent = info
        for segment in path:
            slot = next_index(parent) if segment == "" else normalize_key(segment)
            if not isinstance(parent.get(slot), dict):
                parent[slot] = {}
            parent = parent[slot]

        slot = next_index(parent) if last == "" else normalize_key(last)
        parent[slot] = value


def parse_info_format(data: str, constants: Optional[Mapping[str, Any]] = None) -> InfoNode:
    """Parse info-format text and return the info dict."""
    return InfoFormatParser(constants).parse(data)


def parse_info_file(
    path: Union[str, PathLike],
    constants: Optional[Mapping[str, Any]] = None,
    encoding: str = "utf-8",
) -> InfoNode:
    """Read an ``.info`` file from disk and parse it."""
    with open(path, "r", encoding=encoding) as fp:
        return parse_info_format(fp.read(), constants)
