"""Error definitions for swapgen.

Every failure the header pipeline can report is a :class:`SwapError`
subclass carrying a stable ``code`` so callers can tell configuration
mistakes apart from sink I/O failures.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

E_GEOMETRY = "E_GEOMETRY"
E_LABEL_TOO_LONG = "E_LABEL_TOO_LONG"
E_IDENTIFIER = "E_IDENTIFIER"
E_BAD_PAGE_RANGE = "E_BAD_PAGE_RANGE"
E_BAD_PAGE_HEADER = "E_BAD_PAGE_HEADER"
E_BAD_PAGE_COUNT = "E_BAD_PAGE_COUNT"
E_SIZE_DETECTION = "E_SIZE_DETECTION"
E_WRITE_IO = "E_WRITE_IO"
E_READ_IO = "E_READ_IO"
E_HEADER_FORMAT = "E_HEADER_FORMAT"
E_INTERNAL = "E_INTERNAL"


@dataclass
class SwapError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class InvalidGeometry(SwapError):
    pass


class LabelTooLong(SwapError):
    pass


class InvalidIdentifier(SwapError):
    pass


class BadPageOutOfRange(SwapError):
    pass


class BadPageOnHeader(SwapError):
    pass


class TooManyBadPages(SwapError):
    pass


class SizeDetectionFailed(SwapError):
    pass


class SinkWriteFailed(SwapError):
    pass


class HeaderFormatError(SwapError):
    pass


def geometry_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> InvalidGeometry:
    return InvalidGeometry(code=E_GEOMETRY, message=message, context=context)


def internal_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> SwapError:
    return SwapError(code=E_INTERNAL, message=message, context=context)


__all__ = [
    "SwapError",
    "InvalidGeometry",
    "LabelTooLong",
    "InvalidIdentifier",
    "BadPageOutOfRange",
    "BadPageOnHeader",
    "TooManyBadPages",
    "SizeDetectionFailed",
    "SinkWriteFailed",
    "HeaderFormatError",
    "geometry_error",
    "internal_error",
    "E_GEOMETRY",
    "E_LABEL_TOO_LONG",
    "E_IDENTIFIER",
    "E_BAD_PAGE_RANGE",
    "E_BAD_PAGE_HEADER",
    "E_BAD_PAGE_COUNT",
    "E_SIZE_DETECTION",
    "E_WRITE_IO",
    "E_READ_IO",
    "E_HEADER_FORMAT",
    "E_INTERNAL",
]
