from __future__ import annotations

import uuid

import pytest

from swapgen.format.errors import InvalidIdentifier, LabelTooLong
from swapgen.format.identity import (
    coerce_identifier,
    encode_label,
    format_identifier,
    generate_identifier,
)


def test_generated_identifier_uses_random_source():
    ident = generate_identifier(lambda n: b"\xff" * n)
    assert len(ident) == 16
    # version 4 and RFC 4122 variant bits are applied
    assert ident[6] == 0x4F
    assert ident[8] == 0xBF
    assert uuid.UUID(bytes=ident).version == 4


def test_generated_identifiers_differ():
    assert generate_identifier() != generate_identifier()


def test_short_random_source_rejected():
    with pytest.raises(InvalidIdentifier):
        generate_identifier(lambda n: b"\x00" * (n - 1))


def test_coerce_identifier_forms():
    u = uuid.UUID("87705c6e-9673-4283-b33a-b87dbf6ec490")
    assert coerce_identifier(u) == u.bytes
    assert coerce_identifier(str(u)) == u.bytes
    assert coerce_identifier(u.hex) == u.bytes
    assert coerce_identifier(bytearray(u.bytes)) == u.bytes
    assert format_identifier(u.bytes) == str(u)


def test_raw_identifier_passes_through_unchanged():
    raw = bytes(range(16))
    assert coerce_identifier(raw) == raw


@pytest.mark.parametrize("bad", [b"\x00" * 15, "not-a-uuid", 42])
def test_coerce_identifier_rejects(bad):
    with pytest.raises(InvalidIdentifier):
        coerce_identifier(bad)


def test_missing_label_is_all_zero():
    assert encode_label(None) == b"\x00" * 16


def test_label_exactly_16_bytes():
    assert encode_label("a" * 16) == b"a" * 16


def test_label_17_bytes_rejected():
    with pytest.raises(LabelTooLong) as ei:
        encode_label("a" * 17)
    assert ei.value.context["length"] == 17


def test_multibyte_label_counts_bytes():
    assert encode_label("🔀") == "🔀".encode("utf-8") + b"\x00" * 12
    assert encode_label("é" * 8) == "é".encode("utf-8") * 8
    with pytest.raises(LabelTooLong):
        encode_label("🔀" * 4 + "x")
