from __future__ import annotations

import pytest

from swapgen.format.decoder import find_page_size, parse_header
from swapgen.format.encoder import encode_header
from swapgen.format.errors import HeaderFormatError
from swapgen.format.geometry import resolve_geometry


def test_no_signature():
    with pytest.raises(HeaderFormatError):
        find_page_size(b"\x00" * 65536)


def test_legacy_signature_rejected():
    data = bytearray(4096)
    data[-10:] = b"SWAP-SPACE"
    with pytest.raises(HeaderFormatError) as ei:
        parse_header(bytes(data), 4096)
    assert "version 0" in ei.value.message


def test_suspend_signature_rejected():
    data = bytearray(4096)
    data[-10:] = b"S1SUSPEND\x00"
    with pytest.raises(HeaderFormatError):
        parse_header(bytes(data), 4096)


def test_truncated_input():
    with pytest.raises(HeaderFormatError):
        parse_header(b"\x00" * 100, 4096)


def test_smaller_page_size_wins_over_stale_signature():
    # A 2048-byte header written over an old 4096-byte one leaves the old
    # signature behind at the end of the first 4096 bytes.
    geometry = resolve_geometry(2048, 2048 * 20)
    header = encode_header(geometry, bytes(16), bytes(16), [])
    data = bytearray(8192)
    data[4086:4096] = b"SWAPSPACE2"
    data[:2048] = header
    assert find_page_size(bytes(data)) == 2048
    info = parse_header(bytes(data))
    assert info.page_size == 2048
    assert info.last_page == 19
