from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Union

InfoKey = Union[str, int]
InfoValue = Any                  # str, constant value or nested InfoNode
InfoNode = Dict[InfoKey, InfoValue]


class ParseError(RuntimeError):
    """Raised when a response body cannot be parsed into XML."""
    pass


class FetchError(IOError):
    """Raised when the HTTP transport fails to deliver a response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class Result:
    success: bool
    source: str
    data: Dict[str, Any] | None
    error: str | None
