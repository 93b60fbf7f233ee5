"""Read a swap header page back into its fields.

Public functions:
- parse_header(data, page_size=None) -> SwapHeaderInfo
- find_page_size(data) -> int
"""

from __future__ import annotations

import struct
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import (
    BAD_PAGES_OFFSET,
    LEGACY_MAGIC,
    METADATA_FIELDS_SIZE,
    METADATA_FORMAT,
    METADATA_OFFSET,
    SUSPEND_MAGICS,
    SWAP_MAGIC,
    SWAP_MAGIC_SIZE,
)
from .errors import E_HEADER_FORMAT, HeaderFormatError
from .geometry import bad_page_capacity
from .identity import format_identifier

__all__ = ["SwapHeaderInfo", "parse_header", "find_page_size"]

# Smallest first: a new header only replaces its own page, so a signature
# left by an earlier, larger page size can survive further in.
CANDIDATE_PAGE_SIZES = (2048, 4096, 8192, 16384, 32768, 65536)


@dataclass(slots=True)
class SwapHeaderInfo:
    page_size: int
    version: int
    last_page: int
    bad_page_count: int
    identifier: bytes
    label: bytes
    bad_pages: Tuple[int, ...]
    magic: bytes

    @property
    def page_count(self) -> int:
        return self.last_page + 1

    @property
    def label_text(self) -> str:
        return self.label.rstrip(b"\x00").decode("utf-8", errors="replace")

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["identifier"] = format_identifier(self.identifier)
        out["label"] = self.label_text
        out["bad_pages"] = list(self.bad_pages)
        out["magic"] = self.magic.decode("ascii", errors="replace")
        out["page_count"] = self.page_count
        return out


def _read_exact(data: bytes, offset: int, size: int, label: str) -> bytes:
    end = offset + size
    if end > len(data):
        raise HeaderFormatError(
            E_HEADER_FORMAT,
            f"Out of range read for {label}: {offset}+{size}>{len(data)}",
        )
    return data[offset:end]


def find_page_size(data: bytes) -> int:
    for size in CANDIDATE_PAGE_SIZES:
        if len(data) < size:
            continue
        if data[size - SWAP_MAGIC_SIZE : size] == SWAP_MAGIC:
            return size
    raise HeaderFormatError(
        E_HEADER_FORMAT, "no SWAPSPACE2 signature at any known page size"
    )


def parse_header(data: bytes, page_size: Optional[int] = None) -> SwapHeaderInfo:
    if page_size is None:
        page_size = find_page_size(data)
    magic = _read_exact(
        data, page_size - SWAP_MAGIC_SIZE, SWAP_MAGIC_SIZE, "signature"
    )
    if magic == LEGACY_MAGIC:
        raise HeaderFormatError(
            E_HEADER_FORMAT, "old style (version 0) swap signature"
        )
    if magic in SUSPEND_MAGICS:
        raise HeaderFormatError(
            E_HEADER_FORMAT, "area holds a suspend image, not swap"
        )
    if magic != SWAP_MAGIC:
        raise HeaderFormatError(
            E_HEADER_FORMAT,
            f"unknown signature {magic!r}",
            {"page_size": page_size},
        )
    raw = _read_exact(data, METADATA_OFFSET, METADATA_FIELDS_SIZE, "metadata")
    version, last_page, count, identifier, label = struct.unpack(
        METADATA_FORMAT, raw
    )
    capacity = bad_page_capacity(page_size)
    if count > capacity:
        raise HeaderFormatError(
            E_HEADER_FORMAT,
            f"bad page count {count} exceeds capacity {capacity}",
        )
    table = _read_exact(data, BAD_PAGES_OFFSET, count * 4, "bad page table")
    bad_pages = struct.unpack(f"<{count}I", table)
    return SwapHeaderInfo(
        page_size=page_size,
        version=version,
        last_page=last_page,
        bad_page_count=count,
        identifier=identifier,
        label=label,
        bad_pages=tuple(bad_pages),
        magic=magic,
    )
