from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .config import TableSettings, load_settings
from .errors import ErrorCatalog
from .filtering import apply_column_filters, filter_rows
from .logging import configure_logging, get_logger, log_json
from .models import ColumnDescriptor, PageView, Row, SortDirection, TableOptions, ViewState
from .pagination import (
    PageSlice,
    next_page_number,
    page_window,
    paginate,
    previous_page_number,
    single_page,
)
from .selection import make_selection
from .sorting import next_sort_state, sort_rows
from .validation import coerce_columns, coerce_options, reject, validate_page_size

logger = get_logger(__name__)

SelectionCallback = Callable[[list[Row]], None]
RowClickCallback = Callable[[Row], None]


class DataTableEngine:
    """Search, sort, paginate and select over an in-memory row collection.

    Every operation recomputes the whole pipeline from the current
    :class:`ViewState` and returns the resulting :class:`PageView`. One engine
    owns one view state; engines never share state.
    """

    def __init__(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        data: Iterable[Row] = (),
        options: TableOptions | Mapping[str, Any] | None = None,
        *,
        on_selection_change: SelectionCallback | None = None,
        on_row_click: RowClickCallback | None = None,
        settings: TableSettings | None = None,
        **option_overrides: Any,
    ) -> None:
        self.settings = settings or TableSettings()
        self.options = coerce_options(options, **option_overrides)
        self.columns = coerce_columns(columns)
        page_size = self.options.page_size if self.options.page_size is not None else self.settings.page_size
        validate_page_size(page_size)
        self.on_selection_change = on_selection_change
        self.on_row_click = on_row_click
        self._rows: list[Row] = list(data)
        self.state = ViewState(
            page_size=page_size,
            selection=make_selection(self.options.selection_mode, self.options.row_key),
        )
        self._log("init", columns=len(self.columns), rows=len(self._rows), page_size=page_size)

    @classmethod
    def from_env(
        cls,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        data: Iterable[Row] = (),
        options: TableOptions | Mapping[str, Any] | None = None,
        *,
        env_file: str | None = None,
        **kwargs: Any,
    ) -> "DataTableEngine":
        settings = load_settings(env_file)
        configure_logging(settings.log_level)
        return cls(columns, data, options, settings=settings, **kwargs)

    # pipeline

    @property
    def rows(self) -> list[Row]:
        return list(self._rows)

    @property
    def empty_message(self) -> str:
        if self.options.empty_message is not None:
            return self.options.empty_message
        return self.settings.empty_message

    def sorted_rows(self) -> list[Row]:
        rows = filter_rows(self._rows, self.columns, self.state.search_term)
        rows = apply_column_filters(rows, self.state.column_filters)
        rows = sort_rows(rows, self.state.sort_column, self.state.sort_direction)
        return list(rows)

    def _page(self) -> PageSlice:
        rows = self.sorted_rows()
        if not self.options.pagination:
            return single_page(rows)
        return paginate(rows, self.state.current_page, self.state.page_size)

    def _build_view(self, page: PageSlice) -> PageView:
        state = self.state
        if self.options.pagination:
            current_page = state.current_page
            page_numbers = tuple(page_window(current_page, page.total_pages, self.settings.page_window_siblings))
        else:
            current_page = 1
            page_numbers = (1,)
        selection = state.selection
        if self.options.selectable:
            selected_rows = tuple(selection.selected_rows(page.rows))
            selected_positions = tuple(selection.selected_positions(page.rows))
            all_selected = selection.is_all_selected(page.rows)
        else:
            selected_rows, selected_positions, all_selected = (), (), False
        return PageView(
            page_rows=tuple(page.rows),
            total_pages=page.total_pages,
            total_count=page.total_count,
            selected_rows=selected_rows,
            current_page=current_page,
            page_size=state.page_size,
            range_start=page.range_start,
            range_end=page.range_end,
            has_previous=current_page > 1,
            has_next=current_page < page.total_pages,
            page_numbers=page_numbers,
            selected_positions=selected_positions,
            all_selected=all_selected,
            search_term=state.search_term,
            sort_column=state.sort_column,
            sort_direction=state.sort_direction,
            empty_message=self.empty_message,
        )

    def get_view(self) -> PageView:
        return self._build_view(self._page())

    # search, sort and filters

    def set_search_term(self, term: str) -> PageView:
        if not self.options.searchable:
            self._log("set_search_term.ignored", reason="searchable_disabled")
            return self.get_view()
        self.state.search_term = term or ""
        view = self.get_view()
        self._log("set_search_term", term_length=len(self.state.search_term), total=view.total_count)
        return view

    def request_sort(self, column_key: str) -> PageView:
        if not self.options.sortable or not self.column(column_key).sortable:
            self._log("request_sort.ignored", column=column_key)
            return self.get_view()
        self.state.sort_column, self.state.sort_direction = next_sort_state(
            self.state.sort_column, self.state.sort_direction, column_key
        )
        self._log("request_sort", column=column_key, direction=self.state.sort_direction.value)
        return self.get_view()

    def set_column_filter(self, column_key: str, term: str | None) -> PageView:
        column = self.column(column_key)
        if not column.filterable:
            reject(ErrorCatalog.COLUMN_NOT_FILTERABLE, details={"column": column_key})
        if term:
            self.state.column_filters[column_key] = term
        else:
            self.state.column_filters.pop(column_key, None)
        view = self.get_view()
        self._log("set_column_filter", column=column_key, total=view.total_count)
        return view

    def clear_column_filters(self) -> PageView:
        self.state.column_filters.clear()
        self._log("clear_column_filters")
        return self.get_view()

    # pagination

    def set_page(self, page: int) -> PageView:
        self.state.current_page = page
        view = self.get_view()
        self._log("set_page", page=page, total_pages=view.total_pages, out_of_range=view.is_out_of_range)
        return view

    def next_page(self) -> PageView:
        total_pages = self._page().total_pages
        return self.set_page(next_page_number(self.state.current_page, total_pages))

    def previous_page(self) -> PageView:
        total_pages = self._page().total_pages
        return self.set_page(previous_page_number(self.state.current_page, total_pages))

    def set_page_size(self, page_size: int) -> PageView:
        validate_page_size(page_size)
        self.state.page_size = page_size
        self._log("set_page_size", page_size=page_size)
        return self.get_view()

    # selection

    def toggle_row_selection(self, position: int) -> PageView:
        if not self._selection_enabled("toggle_row_selection"):
            return self.get_view()
        page = self._page()
        changed = self.state.selection.toggle(position, page.rows)
        if changed:
            self._emit_selection(page)
        self._log("toggle_row_selection", position=position, changed=changed, selected=len(self.state.selection))
        return self._build_view(page)

    def select_all_on_page(self) -> PageView:
        if not self._selection_enabled("select_all_on_page"):
            return self.get_view()
        page = self._page()
        self.state.selection.select_all(page.rows)
        self._emit_selection(page)
        self._log("select_all_on_page", selected=len(self.state.selection))
        return self._build_view(page)

    def toggle_select_all(self) -> PageView:
        if not self._selection_enabled("toggle_select_all"):
            return self.get_view()
        page = self._page()
        self.state.selection.toggle_all(page.rows)
        self._emit_selection(page)
        self._log("toggle_select_all", selected=len(self.state.selection))
        return self._build_view(page)

    def clear_selection(self) -> PageView:
        if not self._selection_enabled("clear_selection"):
            return self.get_view()
        page = self._page()
        self.state.selection.clear()
        self._emit_selection(page)
        self._log("clear_selection")
        return self._build_view(page)

    def is_all_selected(self) -> bool:
        if not self.options.selectable:
            return False
        return self.state.selection.is_all_selected(self._page().rows)

    def click_row(self, position: int) -> Row | None:
        rows = self._page().rows
        if not 0 <= position < len(rows):
            return None
        row = rows[position]
        if self.on_row_click is not None:
            self.on_row_click(row)
        return row

    # collection and configuration updates

    def set_data(self, data: Iterable[Row]) -> PageView:
        self._rows = list(data)
        self._log("set_data", rows=len(self._rows))
        return self.get_view()

    def set_columns(self, columns: Iterable[ColumnDescriptor | Mapping[str, Any]]) -> PageView:
        self.columns = coerce_columns(columns)
        keys = {column.key for column in self.columns}
        if self.state.sort_column not in keys:
            self.state.sort_column = None
            self.state.sort_direction = SortDirection.ASC
        for key in [key for key in self.state.column_filters if key not in keys]:
            self.state.column_filters.pop(key)
        self._log("set_columns", columns=len(self.columns))
        return self.get_view()

    def reset_view(self) -> PageView:
        had_selection = len(self.state.selection) > 0
        self.state = ViewState(
            page_size=self.state.page_size,
            selection=make_selection(self.options.selection_mode, self.options.row_key),
        )
        page = self._page()
        if had_selection and self.options.selectable:
            self._emit_selection(page)
        self._log("reset_view")
        return self._build_view(page)

    def column(self, column_key: str) -> ColumnDescriptor:
        column = next((column for column in self.columns if column.key == column_key), None)
        if column is None:
            reject(ErrorCatalog.UNKNOWN_COLUMN, details={"column": column_key})
        return column

    def _selection_enabled(self, operation: str) -> bool:
        if self.options.selectable:
            return True
        self._log(f"{operation}.ignored", reason="selectable_disabled")
        return False

    def _emit_selection(self, page: PageSlice) -> None:
        if self.on_selection_change is None:
            return
        self.on_selection_change(self.state.selection.selected_rows(page.rows))

    def _log(self, operation: str, **fields: Any) -> None:
        log_json(logger, {"event": f"datatable.{operation}", **fields}, level=logging.DEBUG)
