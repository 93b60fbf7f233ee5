from __future__ import annotations

import stat
import uuid
from pathlib import Path

import pytest

from swapgen.api import SwapOptions, create_swap, inspect_swap, parse_size
from swapgen.format.errors import E_READ_IO, LabelTooLong, SwapError

UUID = "87705c6e-9673-4283-b33a-b87dbf6ec490"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("40960", 40960),
        ("40K", 40960),
        ("40k", 40960),
        ("1.5M", 1572864),
        ("2G", 2 * 1024**3),
        ("1T", 1024**4),
        ("64KB", 65536),
        ("9007199254740993", 9007199254740993),
        ("0.5K", 512),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


@pytest.mark.parametrize(
    "text", ["", "K", "abc", "-4K", "inf", "infK", "nanM", "1.5", "1e3"]
)
def test_parse_size_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)


def test_create_new_swap_file(tmp_path: Path):
    target = tmp_path / "swapfile"
    res = create_swap(
        SwapOptions(
            path=target,
            size=40 * 1024,
            label="swap0",
            identifier=UUID,
            page_size=4096,
            bad_pages=(5,),
        )
    )
    assert res.page_count == 10
    assert res.usable_bytes == 40960
    assert res.identifier == UUID
    assert res.bad_pages == (5,)
    data = target.read_bytes()
    assert len(data) == 40960
    assert data[4086:4096] == b"SWAPSPACE2"
    assert stat.S_IMODE(target.stat().st_mode) == 0o600

    info = inspect_swap(target)
    assert info["identifier"] == UUID
    assert info["label"] == "swap0"
    assert info["last_page"] == 9
    assert info["bad_pages"] == [5]
    assert info["magic"] == "SWAPSPACE2"


def test_existing_file_is_resized(tmp_path: Path):
    target = tmp_path / "swapfile"
    target.write_bytes(b"\xaa" * 100000)
    res = create_swap(SwapOptions(path=target, size=81920, page_size=8192))
    assert res.page_count == 10
    data = target.read_bytes()
    assert len(data) == 81920
    assert data[:1024] == b"\x00" * 1024
    assert data[8182:8192] == b"SWAPSPACE2"
    # pages after the header are left alone
    assert data[8192:] == b"\xaa" * (81920 - 8192)


def test_existing_file_length_used_when_size_omitted(tmp_path: Path):
    target = tmp_path / "swapfile"
    target.write_bytes(bytes(4096 * 11 + 7))
    res = create_swap(SwapOptions(path=target, page_size=4096))
    assert res.page_count == 11
    assert target.stat().st_size == 4096 * 11 + 7
    assert uuid.UUID(res.identifier).version == 4


def test_invalid_config_leaves_disk_untouched(tmp_path: Path):
    target = tmp_path / "swapfile"
    with pytest.raises(LabelTooLong):
        create_swap(
            SwapOptions(path=target, size=40960, label="x" * 17, page_size=4096)
        )
    assert not target.exists()
    with pytest.raises(SwapError):
        create_swap(
            SwapOptions(path=target, size=40960, page_size=4096, bad_pages=(99,))
        )
    assert not target.exists()


def test_missing_path_without_size(tmp_path: Path):
    with pytest.raises(SwapError) as ei:
        create_swap(SwapOptions(path=tmp_path / "nope", page_size=4096))
    assert ei.value.code == E_READ_IO
