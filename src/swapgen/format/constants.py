"""Swap header format constants (Linux ``union swap_header``, version 1)."""

from __future__ import annotations

SWAP_VERSION = 1
SWAP_MAGIC = b"SWAPSPACE2"
SWAP_MAGIC_SIZE = len(SWAP_MAGIC)

# Older / foreign signatures found in the same trailing slot.
LEGACY_MAGIC = b"SWAP-SPACE"
SUSPEND_MAGICS = (b"S1SUSPEND\x00", b"S2SUSPEND\x00")

BOOTBITS_SIZE = 1024
IDENTIFIER_SIZE = 16
LABEL_SIZE = 16

# version, last_page, nr_badpages, uuid, volume label
METADATA_FORMAT = "<III16s16s"
METADATA_FIELDS_SIZE = 4 + 4 + 4 + IDENTIFIER_SIZE + LABEL_SIZE
METADATA_PADDING_WORDS = 117
METADATA_BLOCK_SIZE = METADATA_FIELDS_SIZE + METADATA_PADDING_WORDS * 4

METADATA_OFFSET = BOOTBITS_SIZE
BAD_PAGES_OFFSET = METADATA_OFFSET + METADATA_BLOCK_SIZE
BAD_PAGE_ENTRY_SIZE = 4

MIN_PAGE_SIZE = 1024
MIN_PAGES = 10
# last_page is a u32 on disk.
MAX_PAGES = 0xFFFFFFFF

__all__ = [
    "SWAP_VERSION",
    "SWAP_MAGIC",
    "SWAP_MAGIC_SIZE",
    "LEGACY_MAGIC",
    "SUSPEND_MAGICS",
    "BOOTBITS_SIZE",
    "IDENTIFIER_SIZE",
    "LABEL_SIZE",
    "METADATA_FORMAT",
    "METADATA_FIELDS_SIZE",
    "METADATA_PADDING_WORDS",
    "METADATA_BLOCK_SIZE",
    "METADATA_OFFSET",
    "BAD_PAGES_OFFSET",
    "BAD_PAGE_ENTRY_SIZE",
    "MIN_PAGE_SIZE",
    "MIN_PAGES",
    "MAX_PAGES",
]
