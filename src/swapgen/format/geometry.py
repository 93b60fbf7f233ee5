"""Page geometry for a swap area.

Turns a page size and the byte length of the target region into the page
count, the ``last_page`` index stored in the header and the capacity of the
bad-page table.
"""

from __future__ import annotations

import resource
from dataclasses import dataclass

from ..logging import get_logger
from .constants import (
    BAD_PAGES_OFFSET,
    BAD_PAGE_ENTRY_SIZE,
    MAX_PAGES,
    MIN_PAGES,
    MIN_PAGE_SIZE,
    SWAP_MAGIC_SIZE,
)
from .errors import geometry_error

__all__ = [
    "Geometry",
    "host_page_size",
    "validate_page_size",
    "bad_page_capacity",
    "resolve_geometry",
]


@dataclass(frozen=True, slots=True)
class Geometry:
    page_size: int
    region_length: int
    page_count: int
    bad_page_capacity: int

    @property
    def last_page(self) -> int:
        return self.page_count - 1

    @property
    def usable_bytes(self) -> int:
        return self.page_count * self.page_size


def host_page_size() -> int:
    return resource.getpagesize()


def validate_page_size(page_size: int) -> int:
    """Check ``page_size`` can carry a swap header and return it.

    The page must be a power of two no smaller than ``MIN_PAGE_SIZE`` and
    large enough to hold the boot area, the metadata block and the
    trailing signature.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise geometry_error(
            "page size must be an integer", {"page_size": page_size}
        )
    if page_size <= 0 or page_size & (page_size - 1):
        raise geometry_error(
            f"page size {page_size} is not a power of two",
            {"page_size": page_size},
        )
    if page_size < MIN_PAGE_SIZE:
        raise geometry_error(
            f"page size {page_size} is below the minimum {MIN_PAGE_SIZE}",
            {"page_size": page_size, "minimum": MIN_PAGE_SIZE},
        )
    if page_size < BAD_PAGES_OFFSET + SWAP_MAGIC_SIZE:
        raise geometry_error(
            f"page size {page_size} cannot hold the swap header",
            {
                "page_size": page_size,
                "required": BAD_PAGES_OFFSET + SWAP_MAGIC_SIZE,
            },
        )
    return page_size


def bad_page_capacity(page_size: int) -> int:
    # Entries live between the metadata block and the signature.
    room = page_size - SWAP_MAGIC_SIZE - BAD_PAGES_OFFSET
    return max(0, room // BAD_PAGE_ENTRY_SIZE)


def resolve_geometry(page_size: int, region_length: int) -> Geometry:
    validate_page_size(page_size)
    if region_length < 0:
        raise geometry_error(
            f"region length {region_length} is negative",
            {"region_length": region_length},
        )
    page_count = region_length // page_size
    if page_count < MIN_PAGES:
        raise geometry_error(
            f"swap area needs at least {MIN_PAGES} pages, got {page_count}",
            {
                "page_count": page_count,
                "page_size": page_size,
                "region_length": region_length,
                "minimum": MIN_PAGES,
            },
        )
    if page_count > MAX_PAGES:
        get_logger().warning(
            "Swap area too large: %d pages, only using %d", page_count, MAX_PAGES
        )
        page_count = MAX_PAGES
    geometry = Geometry(
        page_size=page_size,
        region_length=region_length,
        page_count=page_count,
        bad_page_capacity=bad_page_capacity(page_size),
    )
    get_logger().debug(
        "Geometry: page_size=%d pages=%d last_page=%d trailing=%d",
        page_size,
        page_count,
        geometry.last_page,
        region_length - geometry.usable_bytes,
    )
    return geometry
