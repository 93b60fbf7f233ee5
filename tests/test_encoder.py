from __future__ import annotations

import struct
import uuid

import pytest

from swapgen.format.constants import BAD_PAGES_OFFSET, METADATA_BLOCK_SIZE
from swapgen.format.decoder import parse_header
from swapgen.format.encoder import (
    encode_header,
    pack_bad_page_table,
    pack_metadata_block,
)
from swapgen.format.geometry import resolve_geometry
from swapgen.format.identity import encode_label

UUID = uuid.UUID("87705c6e-9673-4283-b33a-b87dbf6ec490")


def _nonzero_outside(data: bytes, *ranges) -> list[int]:
    skip = set()
    for start, end in ranges:
        skip.update(range(start, end))
    return [i for i, b in enumerate(data) if b and i not in skip]


def test_metadata_block_size():
    block = pack_metadata_block(9, UUID.bytes, encode_label(None), 0)
    assert len(block) == METADATA_BLOCK_SIZE == 512
    assert BAD_PAGES_OFFSET == 1536


def test_bad_page_table_little_endian():
    assert pack_bad_page_table([1, 0x01020304]) == bytes.fromhex(
        "01000000" "04030201"
    )
    assert pack_bad_page_table([]) == b""


def test_mkswap_compatible_layout():
    geo = resolve_geometry(4096, 40 * 1024)
    data = encode_header(geo, UUID.bytes, encode_label("🔀"), ())
    assert len(data) == 4096
    assert data[:1024] == b"\x00" * 1024
    assert data[1024:1036] == bytes.fromhex("01000000" "09000000" "00000000")
    assert data[1036:1052] == bytes.fromhex("87705c6e96734283b33ab87dbf6ec490")
    assert data[1052:1068] == b"\xf0\x9f\x94\x80" + b"\x00" * 12
    assert data[4086:] == b"SWAPSPACE2"
    assert _nonzero_outside(data, (1024, 1068), (4086, 4096)) == []


def test_no_label_field_is_zero():
    geo = resolve_geometry(4096, 40960)
    data = encode_header(geo, UUID.bytes, encode_label(None), ())
    assert data[1052:1068] == b"\x00" * 16


def test_bad_pages_follow_metadata_block():
    geo = resolve_geometry(4096, 4096 * 100)
    data = encode_header(geo, UUID.bytes, encode_label(None), (5, 5, 42))
    assert struct.unpack_from("<I", data, 1032)[0] == 3
    assert struct.unpack_from("<3I", data, 1536) == (5, 5, 42)
    assert _nonzero_outside(data, (1024, 1052), (1536, 1548), (4086, 4096)) == []


@pytest.mark.parametrize("page_size", [2048, 4096, 8192, 65536])
def test_header_is_one_page(page_size):
    geo = resolve_geometry(page_size, page_size * 12)
    data = encode_header(geo, UUID.bytes, encode_label("swap"), (11,))
    assert len(data) == page_size
    assert data[-10:] == b"SWAPSPACE2"
    assert struct.unpack_from("<I", data, 1028)[0] == 11


def test_full_bad_page_table_fits():
    geo = resolve_geometry(4096, 4096 * 1000)
    pages = tuple(range(1, geo.bad_page_capacity + 1))
    data = encode_header(geo, UUID.bytes, encode_label(None), pages)
    assert len(data) == 4096
    assert data[-10:] == b"SWAPSPACE2"


def test_roundtrip_through_decoder():
    geo = resolve_geometry(8192, 8192 * 64)
    data = encode_header(geo, UUID.bytes, encode_label("data-swap"), (3, 63, 3))
    info = parse_header(data)
    assert info.page_size == 8192
    assert info.version == 1
    assert info.last_page == 63
    assert info.page_count == 64
    assert info.identifier == UUID.bytes
    assert info.label_text == "data-swap"
    assert info.bad_page_count == 3
    assert info.bad_pages == (3, 63, 3)
