from __future__ import annotations
import re
from typing import Any, Dict

from .model import InfoKey, Result

# canonical decimal integers only: "0", "7", "-12" but not "007", "+1", "-0"
_INT_KEY = re.compile(r"(?:0|-?[1-9][0-9]*)\Z")

_UNESCAPE = {
    '"': re.compile(r'\\"'),
    "'": re.compile(r"\\'"),
}


def normalize_key(key: str) -> InfoKey:
    """Return ``int(key)`` for canonical integer strings, else the key itself."""
    if _INT_KEY.match(key):
        return int(key)
    return key


def unquote(raw: str) -> str:
    """Strip the surrounding quotes of ``raw`` and unescape quotes of that kind."""
    quote = raw[0]
    return _UNESCAPE[quote].sub(quote, raw[1:-1])


def next_index(node: Dict) -> int:
    """Implicit ``[]`` index: the number of entries already at this level."""
    return len(node)


def result_asdict(res: Result) -> Dict[str, Any]:
    """Return a JSON-serialisable dict for one CLI source."""
    if not res.success or res.data is None:
        return {"success": False, "source": res.source, "error": res.error}
    return {"success": True, "source": res.source, "data": res.data}
