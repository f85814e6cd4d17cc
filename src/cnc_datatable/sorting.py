from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Sequence

from .models import Row, SortDirection


def _fallback_key(value: Any) -> tuple[str, str]:
    return (type(value).__name__, str(value))


def compare_values(left: Any, right: Any) -> int:
    """Three-way compare with native ordering.

    Pairs that cannot be ordered natively (``None``, mixed types) are ordered by
    type name and then by their string form, so sorting never raises.
    """
    try:
        if left < right:
            return -1
        if left > right:
            return 1
        return 0
    except TypeError:
        left_key, right_key = _fallback_key(left), _fallback_key(right)
        return (left_key > right_key) - (left_key < right_key)


def sort_rows(
    rows: Sequence[Row],
    sort_column: str | None,
    sort_direction: SortDirection | str = SortDirection.ASC,
) -> Sequence[Row]:
    if not sort_column:
        return rows
    sign = -1 if SortDirection(sort_direction) is SortDirection.DESC else 1

    # ties fall back to input position in both directions
    def _compare(left: tuple[int, Row], right: tuple[int, Row]) -> int:
        result = compare_values(left[1].get(sort_column), right[1].get(sort_column)) * sign
        return result or (left[0] - right[0])

    ordered = sorted(enumerate(rows), key=cmp_to_key(_compare))
    return [row for _, row in ordered]


def next_sort_state(
    current_column: str | None,
    current_direction: SortDirection,
    requested_column: str,
) -> tuple[str, SortDirection]:
    if current_column == requested_column:
        return requested_column, SortDirection(current_direction).flipped()
    return requested_column, SortDirection.ASC
