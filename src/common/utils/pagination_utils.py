"""Utility functions for paging and sorting product listings."""

import math

ALLOWED_SORT_FIELDS: tuple[str, ...] = ("id", "name", "price")
DEFAULT_SORT_FIELD = "id"


def normalize_sort_field(sort: str | None) -> str:
    """Returns the sort field if it is allow-listed, otherwise falls back to ``id``."""
    if sort in ALLOWED_SORT_FIELDS:
        return sort
    return DEFAULT_SORT_FIELD


def calculate_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def calculate_total_pages(total_count: int, limit: int) -> int:
    """Number of pages needed to show ``total_count`` rows, ``limit`` rows per page."""
    if limit <= 0:
        return 0
    return math.ceil(total_count / limit)
