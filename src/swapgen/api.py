"""High-level API for swapgen: create and inspect swap areas on disk."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Sequence

from .format.decoder import CANDIDATE_PAGE_SIZES, parse_header
from .format.errors import E_READ_IO, E_WRITE_IO, SinkWriteFailed, SwapError
from .format.identity import format_identifier, generate_identifier
from .logging import get_logger, section
from .reporting import get_reporter, task
from .writer import SwapWriter, detect_region_length

__all__ = [
    "SwapOptions",
    "SwapResult",
    "parse_size",
    "create_swap",
    "inspect_swap",
]

_SIZE_SUFFIXES = {
    "K": 1024,
    "M": 1024**2,
    "G": 1024**3,
    "T": 1024**4,
}


@dataclass(slots=True)
class SwapOptions:
    path: Path
    # Region length in bytes; None means use the current length of ``path``.
    size: int | None = None
    label: str | None = None
    identifier: Any = None
    page_size: int | None = None
    bad_pages: Sequence[int] = field(default_factory=tuple)


@dataclass(slots=True)
class SwapResult:
    path: Path
    page_size: int
    page_count: int
    usable_bytes: int
    identifier: str
    label: str | None
    bad_pages: tuple[int, ...]


def parse_size(text: str) -> int:
    """Parse ``"40K"``, ``"512M"``, ``"2G"`` or a plain byte count."""
    value = text.strip().upper()
    if value.endswith("B"):
        value = value[:-1]
    multiplier = 1
    if value and value[-1] in _SIZE_SUFFIXES:
        multiplier = _SIZE_SUFFIXES[value[-1]]
        value = value[:-1]
    try:
        if multiplier == 1:
            number = int(value)
        else:
            # Fractions only make sense with a unit: "1.5M".
            number = int(Decimal(value) * multiplier)
    except (ArithmeticError, ValueError) as exc:
        raise ValueError(f"invalid size {text!r}") from exc
    if number < 0:
        raise ValueError(f"invalid size {text!r}")
    return number


def _configure(options: SwapOptions) -> SwapWriter:
    writer = SwapWriter()
    if options.label is not None:
        writer = writer.with_label(options.label)
    if options.page_size is not None:
        writer = writer.with_page_size(options.page_size)
    if options.bad_pages:
        writer = writer.with_bad_pages(options.bad_pages)
    # Pin the identifier so the dry run and the real write agree.
    identifier = options.identifier
    if identifier is None:
        identifier = generate_identifier()
    return writer.with_identifier(identifier)


def _target_length(options: SwapOptions) -> int:
    if options.size is not None:
        return options.size
    try:
        with options.path.open("rb") as f:
            return detect_region_length(f)
    except OSError as exc:
        raise SwapError(
            E_READ_IO, f"cannot open {options.path}: {exc}"
        ) from exc


def create_swap(options: SwapOptions) -> SwapResult:
    """Write a swap header to ``options.path``.

    A missing path is created as a regular file of ``options.size`` bytes and
    an existing regular file is resized to it. Block devices are never
    resized. Nothing on disk changes if the configuration is invalid.
    """
    logger = get_logger()
    rep = get_reporter()
    path = options.path
    with section(f"Create swap {path.name}"):
        with task("swap.validate", "Validate configuration") as meta:
            writer = _configure(options)
            region_length = _target_length(options)
            geometry, _ = writer.build_header(region_length)
            meta.update(pages=geometry.page_count, page_size=geometry.page_size)
        with task("swap.write", "Write swap header") as meta:
            existed = path.exists()
            try:
                with path.open("r+b" if existed else "w+b") as f:
                    regular = stat.S_ISREG(os.fstat(f.fileno()).st_mode)
                    if regular and options.size is not None:
                        f.truncate(options.size)
                    usable = writer.write(f, region_length)
                    f.flush()
                    os.fsync(f.fileno())
                if not existed:
                    path.chmod(0o600)
            except OSError as exc:
                raise SinkWriteFailed(
                    E_WRITE_IO, f"cannot write {path}: {exc}"
                ) from exc
            meta.update(bytes=usable, bad_pages=len(writer.bad_pages))
    identifier = format_identifier(writer.identifier)
    logger.info(
        "Set up swapspace version 1, size = %d bytes (%d pages), LABEL=%s, UUID=%s",
        usable,
        geometry.page_count,
        options.label or "(none)",
        identifier,
    )
    rep.verbose(f"trailing unusable bytes: {region_length - usable}")
    return SwapResult(
        path=path,
        page_size=geometry.page_size,
        page_count=geometry.page_count,
        usable_bytes=usable,
        identifier=identifier,
        label=options.label,
        bad_pages=tuple(writer.bad_pages),
    )


def inspect_swap(path: str | Path, page_size: Optional[int] = None) -> dict:
    path = Path(path)
    length = page_size or max(CANDIDATE_PAGE_SIZES)
    try:
        with path.open("rb") as f:
            data = f.read(length)
    except OSError as exc:
        raise SwapError(E_READ_IO, f"cannot read {path}: {exc}") from exc
    info = parse_header(data, page_size)
    return info.to_dict()
