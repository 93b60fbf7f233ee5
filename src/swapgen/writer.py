"""Builder-style entry point that writes a swap header to a byte sink.

:class:`SwapWriter` is an immutable configuration value. Each ``with_*``
setter validates its argument immediately and returns a new writer, so a
half-configured writer never exists::

    size = (
        SwapWriter()
        .with_label("🔀")
        .with_page_size(4096)
        .write(sink, region_length=40 * 1024)
    )

``write`` validates everything before touching the sink, then emits one
page at the sink's current position and returns the usable size of the
area (``page_count * page_size``).
"""

from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import Any, BinaryIO, Iterable, Optional, Tuple

from .format.badpages import check_bad_page_index, validate_bad_pages
from .format.encoder import encode_header
from .format.errors import (
    E_SIZE_DETECTION,
    E_WRITE_IO,
    SinkWriteFailed,
    SizeDetectionFailed,
)
from .format.geometry import (
    Geometry,
    host_page_size,
    resolve_geometry,
    validate_page_size,
)
from .format.identity import (
    RandomSource,
    coerce_identifier,
    encode_label,
    format_identifier,
    generate_identifier,
)
from .logging import get_logger

__all__ = ["SwapWriter", "detect_region_length"]


def detect_region_length(sink: BinaryIO) -> int:
    """Length of ``sink`` found by seeking to its end; the position is kept."""
    try:
        pos = sink.tell()
        end = sink.seek(0, io.SEEK_END)
        sink.seek(pos, io.SEEK_SET)
    except (OSError, AttributeError) as exc:
        raise SizeDetectionFailed(
            E_SIZE_DETECTION, f"cannot determine sink size: {exc}"
        ) from exc
    return end


def _write_all(sink: BinaryIO, data: bytes) -> None:
    # Raw sinks may accept part of the buffer per call; None or 0 means no
    # progress is possible.
    view = memoryview(data)
    done = 0
    while done < len(data):
        try:
            written = sink.write(view[done:])
        except OSError as exc:
            raise SinkWriteFailed(
                E_WRITE_IO,
                f"writing swap header failed: {exc}",
                {"written": done, "bytes": len(data)},
            ) from exc
        if not written:
            raise SinkWriteFailed(
                E_WRITE_IO,
                f"sink accepted no bytes after {done} of {len(data)}",
                {"written": done, "bytes": len(data)},
            )
        done += written


@dataclass(frozen=True, slots=True)
class SwapWriter:
    label: Optional[str] = None
    identifier: Optional[bytes] = None
    bad_pages: Tuple[int, ...] = ()
    page_size: Optional[int] = None
    random_source: Optional[RandomSource] = None

    def with_label(self, label: str) -> "SwapWriter":
        encode_label(label)
        return replace(self, label=label)

    def with_identifier(self, identifier: Any) -> "SwapWriter":
        return replace(self, identifier=coerce_identifier(identifier))

    def with_bad_pages(self, pages: Iterable[int]) -> "SwapWriter":
        checked = tuple(check_bad_page_index(p) for p in pages)
        return replace(self, bad_pages=checked)

    def with_page_size(self, page_size: int) -> "SwapWriter":
        return replace(self, page_size=validate_page_size(page_size))

    def with_random_source(self, source: RandomSource) -> "SwapWriter":
        return replace(self, random_source=source)

    def resolve(self, region_length: int) -> Geometry:
        page_size = self.page_size
        if page_size is None:
            page_size = host_page_size()
        return resolve_geometry(page_size, region_length)

    def build_header(self, region_length: int) -> Tuple[Geometry, bytes]:
        """Validate the configuration against ``region_length`` and encode.

        Returns the resolved geometry together with exactly one page of
        header bytes.
        """
        geometry = self.resolve(region_length)
        bad_pages = validate_bad_pages(self.bad_pages, geometry)
        label = encode_label(self.label)
        if self.identifier is None:
            identifier = generate_identifier(self.random_source)
        else:
            identifier = coerce_identifier(self.identifier)
        header = encode_header(geometry, identifier, label, bad_pages)
        get_logger().debug(
            "Encoded swap header: uuid=%s label=%r bad_pages=%d",
            format_identifier(identifier),
            self.label or "",
            len(bad_pages),
        )
        return geometry, header

    def write(self, sink: BinaryIO, region_length: Optional[int] = None) -> int:
        if region_length is None:
            region_length = detect_region_length(sink)
        geometry, header = self.build_header(region_length)
        _write_all(sink, header)
        return geometry.usable_bytes
