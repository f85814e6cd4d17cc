from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from .models import ColumnDescriptor, Row

ColumnRef = Union[ColumnDescriptor, str]


def _column_key(column: ColumnRef) -> str:
    return column if isinstance(column, str) else column.key


def _contains(value: Any, probe: str) -> bool:
    return probe in str(value).lower()


def row_matches(row: Row, columns: Sequence[ColumnRef], term: str) -> bool:
    probe = term.lower()
    return any(_contains(row.get(_column_key(column)), probe) for column in columns)


def filter_rows(rows: Sequence[Row], columns: Sequence[ColumnRef], search_term: str) -> Sequence[Row]:
    """Keep rows where any column value contains ``search_term``, ignoring case.

    Values are compared through ``str()``; an empty term returns ``rows`` itself.
    """
    if not search_term:
        return rows
    return [row for row in rows if row_matches(row, columns, search_term)]


def apply_column_filters(rows: Sequence[Row], column_filters: Mapping[str, str]) -> Sequence[Row]:
    if not column_filters:
        return rows
    filtered = rows
    for key, value in column_filters.items():
        if not value:
            continue
        probe = value.lower()
        filtered = [row for row in filtered if _contains(row.get(key, ""), probe)]
    return filtered
