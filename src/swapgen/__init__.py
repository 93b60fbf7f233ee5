"""swapgen: write Linux swap area headers."""

from .format.errors import (
    SwapError,
    InvalidGeometry,
    LabelTooLong,
    BadPageOutOfRange,
    BadPageOnHeader,
    TooManyBadPages,
    SinkWriteFailed,
)
from .writer import SwapWriter

__version__ = "0.1.0"

__all__ = [
    "SwapWriter",
    "SwapError",
    "InvalidGeometry",
    "LabelTooLong",
    "BadPageOutOfRange",
    "BadPageOnHeader",
    "TooManyBadPages",
    "SinkWriteFailed",
]
