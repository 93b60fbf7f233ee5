"""Pure binary packing of the swap header page.

Layout of one page of ``page_size`` bytes::

    [0, 1024)               boot area, zero
    1024                    version, last_page, nr_badpages  (<III)
    1036                    volume identifier (16 bytes)
    1052                    volume label (16 bytes, zero padded)
    1068                    reserved, zero, up to 1536
    1536                    bad page table, <I per entry
    ...                     zero
    [page_size - 10, end)   SWAPSPACE2

All integers are little-endian regardless of the host. The functions here
are side-effect free and assume their inputs were validated upstream.
"""

from __future__ import annotations

import struct
from typing import Sequence

from .constants import (
    BAD_PAGES_OFFSET,
    BAD_PAGE_ENTRY_SIZE,
    IDENTIFIER_SIZE,
    LABEL_SIZE,
    METADATA_BLOCK_SIZE,
    METADATA_FIELDS_SIZE,
    METADATA_FORMAT,
    METADATA_OFFSET,
    SWAP_MAGIC,
    SWAP_MAGIC_SIZE,
    SWAP_VERSION,
)
from .errors import internal_error
from .geometry import Geometry

__all__ = [
    "pack_metadata_block",
    "pack_bad_page_table",
    "encode_header",
]


def pack_metadata_block(
    last_page: int, identifier: bytes, label: bytes, bad_page_count: int
) -> bytes:
    if len(identifier) != IDENTIFIER_SIZE or len(label) != LABEL_SIZE:
        raise internal_error(
            "identity field size mismatch",
            {"identifier": len(identifier), "label": len(label)},
        )
    fields = struct.pack(
        METADATA_FORMAT,
        SWAP_VERSION,
        last_page,
        bad_page_count,
        identifier,
        label,
    )
    out = fields + b"\x00" * (METADATA_BLOCK_SIZE - METADATA_FIELDS_SIZE)
    if len(out) != METADATA_BLOCK_SIZE:
        raise internal_error(f"metadata block size mismatch: {len(out)}")
    return out


def pack_bad_page_table(bad_pages: Sequence[int]) -> bytes:
    return struct.pack(f"<{len(bad_pages)}I", *bad_pages)


def encode_header(
    geometry: Geometry,
    identifier: bytes,
    label: bytes,
    bad_pages: Sequence[int],
) -> bytes:
    page_size = geometry.page_size
    page = bytearray(page_size)
    meta = pack_metadata_block(
        geometry.last_page, identifier, label, len(bad_pages)
    )
    page[METADATA_OFFSET : METADATA_OFFSET + len(meta)] = meta
    table = pack_bad_page_table(bad_pages)
    table_end = BAD_PAGES_OFFSET + len(table)
    magic_offset = page_size - SWAP_MAGIC_SIZE
    if table_end > magic_offset:
        raise internal_error(
            "bad page table overlaps the signature",
            {
                "entries": len(table) // BAD_PAGE_ENTRY_SIZE,
                "page_size": page_size,
            },
        )
    page[BAD_PAGES_OFFSET:table_end] = table
    page[magic_offset:] = SWAP_MAGIC
    if len(page) != page_size:
        raise internal_error(
            f"header size mismatch: {len(page)} != {page_size}"
        )
    return bytes(page)
