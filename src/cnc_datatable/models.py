from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from .config import DEFAULT_PAGE_SIZE
from .selection import PositionSelection, Selection

Row = Mapping[str, Any]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ColumnDescriptor(BaseModel):
    """How to read, sort and display one field of a row.

    ``align``, ``width`` and ``render`` belong to the presentation layer and are
    carried through untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True, arbitrary_types_allowed=True)

    key: str = Field(min_length=1)
    header: str
    sortable: bool = True
    filterable: bool = False
    align: Literal["left", "center", "right"] = "left"
    width: str | None = None
    render: Callable[..., Any] | None = None


class TableOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    searchable: bool = True
    sortable: bool = True
    selectable: bool = False
    pagination: bool = True
    page_size: StrictInt | None = None
    empty_message: str | None = None
    selection_mode: Literal["position", "identity"] = "position"
    row_key: str | None = None


@dataclass
class ViewState:
    page_size: int = DEFAULT_PAGE_SIZE
    search_term: str = ""
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1
    column_filters: dict[str, str] = field(default_factory=dict)
    selection: Selection = field(default_factory=PositionSelection)


@dataclass(frozen=True)
class PageView:
    page_rows: tuple[Row, ...]
    total_pages: int
    total_count: int
    selected_rows: tuple[Row, ...]
    current_page: int
    page_size: int
    range_start: int
    range_end: int
    has_previous: bool
    has_next: bool
    page_numbers: tuple[int | None, ...]
    selected_positions: tuple[int, ...] = ()
    all_selected: bool = False
    search_term: str = ""
    sort_column: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    empty_message: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.page_rows

    @property
    def is_out_of_range(self) -> bool:
        return self.current_page < 1 or self.current_page > self.total_pages

    def render(self) -> dict[str, Any]:
        return {
            "rows": list(self.page_rows),
            "count": len(self.page_rows),
            "total": self.total_count,
            "page": self.current_page,
            "page_size": self.page_size,
            "total_pages": self.total_pages,
            "range": {"start": self.range_start, "end": self.range_end},
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "page_numbers": list(self.page_numbers),
            "selected_rows": list(self.selected_rows),
            "selected_positions": list(self.selected_positions),
            "all_selected": self.all_selected,
            "search_term": self.search_term,
            "sort": {"column": self.sort_column, "direction": self.sort_direction.value},
            "empty": self.is_empty,
            "empty_message": self.empty_message if self.is_empty else None,
        }
