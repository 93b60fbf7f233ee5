"""Volume identifier and label fields."""

from __future__ import annotations

import os
import uuid
from typing import Any, Callable, Optional

from .constants import IDENTIFIER_SIZE, LABEL_SIZE
from .errors import E_IDENTIFIER, E_LABEL_TOO_LONG, InvalidIdentifier, LabelTooLong

__all__ = [
    "RandomSource",
    "generate_identifier",
    "coerce_identifier",
    "encode_label",
    "format_identifier",
]

RandomSource = Callable[[int], bytes]


def generate_identifier(random_source: Optional[RandomSource] = None) -> bytes:
    """Draw a fresh version-4 UUID from ``random_source`` (``os.urandom``)."""
    source = random_source or os.urandom
    raw = source(IDENTIFIER_SIZE)
    if len(raw) != IDENTIFIER_SIZE:
        raise InvalidIdentifier(
            E_IDENTIFIER,
            f"random source returned {len(raw)} bytes",
            {"expected": IDENTIFIER_SIZE},
        )
    return uuid.UUID(bytes=bytes(raw), version=4).bytes


def coerce_identifier(value: Any) -> bytes:
    if isinstance(value, uuid.UUID):
        return value.bytes
    if isinstance(value, (bytes, bytearray)):
        if len(value) != IDENTIFIER_SIZE:
            raise InvalidIdentifier(
                E_IDENTIFIER,
                f"identifier must be {IDENTIFIER_SIZE} bytes, got {len(value)}",
                {"length": len(value)},
            )
        return bytes(value)
    if isinstance(value, str):
        try:
            return uuid.UUID(value.strip()).bytes
        except ValueError as exc:
            raise InvalidIdentifier(
                E_IDENTIFIER, f"invalid identifier {value!r}"
            ) from exc
    raise InvalidIdentifier(
        E_IDENTIFIER, f"unsupported identifier type {type(value).__name__}"
    )


def format_identifier(identifier: bytes) -> str:
    return str(uuid.UUID(bytes=bytes(identifier)))


def encode_label(label: Optional[str]) -> bytes:
    if label is None:
        return b"\x00" * LABEL_SIZE
    # No truncation: a label that does not fit is rejected.
    data = label.encode("utf-8")
    if len(data) > LABEL_SIZE:
        raise LabelTooLong(
            E_LABEL_TOO_LONG,
            f"label is {len(data)} bytes, at most {LABEL_SIZE} allowed",
            {"label": label, "length": len(data)},
        )
    return data + b"\x00" * (LABEL_SIZE - len(data))
