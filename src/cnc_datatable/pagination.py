from __future__ import annotations

from dataclasses import dataclass

from .models import Row
from .validation import validate_page_size


@dataclass(frozen=True)
class PageSlice:
    rows: list[Row]
    total_pages: int
    total_count: int
    range_start: int = 0
    range_end: int = 0


def total_pages_for(count: int, page_size: int) -> int:
    return max(1, (count + page_size - 1) // page_size)


def paginate(rows: list[Row], current_page: int, page_size: int) -> PageSlice:
    """Slice ``rows`` down to ``current_page``.

    Pages outside ``[1, total_pages]`` come back empty; the page number is never
    corrected here (see :func:`clamp_page`).
    """
    validate_page_size(page_size)
    total = len(rows)
    total_pages = total_pages_for(total, page_size)
    if current_page < 1 or current_page > total_pages:
        return PageSlice(rows=[], total_pages=total_pages, total_count=total)

    start = (current_page - 1) * page_size
    page_rows = list(rows[start : start + page_size])
    if not page_rows:
        return PageSlice(rows=[], total_pages=total_pages, total_count=total)
    return PageSlice(
        rows=page_rows,
        total_pages=total_pages,
        total_count=total,
        range_start=start + 1,
        range_end=start + len(page_rows),
    )


def single_page(rows: list[Row]) -> PageSlice:
    total = len(rows)
    return PageSlice(rows=list(rows), total_pages=1, total_count=total, range_start=1 if total else 0, range_end=total)


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, page), max(1, total_pages))


def next_page_number(current_page: int, total_pages: int) -> int:
    if current_page >= total_pages:
        return current_page
    return max(1, current_page + 1)


def previous_page_number(current_page: int, total_pages: int) -> int:
    return clamp_page(current_page - 1, total_pages)


def page_window(current_page: int, total_pages: int, siblings: int = 1) -> list[int | None]:
    """Page buttons to show: first, last and ``siblings`` around the current page.

    ``None`` marks a gap that the pager renders as an ellipsis.
    """
    pages = [
        page
        for page in range(1, max(1, total_pages) + 1)
        if page in (1, total_pages) or abs(page - current_page) <= siblings
    ]
    window: list[int | None] = []
    for page in pages:
        if window and page - window[-1] > 1:
            window.append(None)
        window.append(page)
    return window
