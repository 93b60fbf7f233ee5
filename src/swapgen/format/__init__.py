from .constants import SWAP_MAGIC, SWAP_VERSION, MIN_PAGES, MIN_PAGE_SIZE
from .errors import (
    SwapError,
    InvalidGeometry,
    LabelTooLong,
    InvalidIdentifier,
    BadPageOutOfRange,
    BadPageOnHeader,
    TooManyBadPages,
    SizeDetectionFailed,
    SinkWriteFailed,
    HeaderFormatError,
)
from .geometry import Geometry, resolve_geometry, bad_page_capacity
from .identity import generate_identifier, coerce_identifier, encode_label
from .badpages import validate_bad_pages
from .encoder import encode_header
from .decoder import SwapHeaderInfo, parse_header

__all__ = [
    "SWAP_MAGIC",
    "SWAP_VERSION",
    "MIN_PAGES",
    "MIN_PAGE_SIZE",
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
    "Geometry",
    "resolve_geometry",
    "bad_page_capacity",
    "generate_identifier",
    "coerce_identifier",
    "encode_label",
    "validate_bad_pages",
    "encode_header",
    "SwapHeaderInfo",
    "parse_header",
]
