"""Bad-page list validation.

Indices are kept in the order given. Repeated indices are not merged: each
occurrence takes a table slot and counts toward ``nr_badpages``, matching
what mkswap writes for the same input.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .errors import (
    E_BAD_PAGE_COUNT,
    E_BAD_PAGE_HEADER,
    E_BAD_PAGE_RANGE,
    BadPageOnHeader,
    BadPageOutOfRange,
    TooManyBadPages,
)
from .geometry import Geometry

__all__ = ["check_bad_page_index", "validate_bad_pages"]


def check_bad_page_index(index: int) -> int:
    """Reject indices that are never valid, whatever the geometry."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise BadPageOutOfRange(
            E_BAD_PAGE_RANGE, f"bad page index {index!r} is not an integer"
        )
    if index == 0:
        raise BadPageOnHeader(
            E_BAD_PAGE_HEADER, "page 0 holds the swap header and cannot be bad"
        )
    if index < 0:
        raise BadPageOutOfRange(
            E_BAD_PAGE_RANGE,
            f"bad page index {index} is negative",
            {"index": index},
        )
    return index


def validate_bad_pages(
    indices: Iterable[int], geometry: Geometry
) -> Tuple[int, ...]:
    pages = tuple(indices)
    for index in pages:
        check_bad_page_index(index)
        if index >= geometry.page_count:
            raise BadPageOutOfRange(
                E_BAD_PAGE_RANGE,
                f"bad page {index} is beyond the last page {geometry.last_page}",
                {"index": index, "page_count": geometry.page_count},
            )
    if len(pages) > geometry.bad_page_capacity:
        raise TooManyBadPages(
            E_BAD_PAGE_COUNT,
            f"{len(pages)} bad pages exceed the table capacity "
            f"{geometry.bad_page_capacity}",
            {
                "count": len(pages),
                "capacity": geometry.bad_page_capacity,
                "page_size": geometry.page_size,
            },
        )
    return pages
