from .config import ConfigError, TableSettings, load_settings
from .engine import DataTableEngine
from .errors import ErrorCatalog, ErrorDefinition, TableConfigError, TableError
from .filtering import apply_column_filters, filter_rows, row_matches
from .logging import configure_logging
from .models import ColumnDescriptor, PageView, SortDirection, TableOptions, ViewState
from .pagination import (
    PageSlice,
    clamp_page,
    next_page_number,
    page_window,
    paginate,
    previous_page_number,
    total_pages_for,
)
from .selection import IdentitySelection, PositionSelection, Selection, make_selection
from .sorting import compare_values, next_sort_state, sort_rows
from .validation import coerce_columns, coerce_options, validate_page_size

__version__ = "0.1.0"

__all__ = [
    "ColumnDescriptor",
    "ConfigError",
    "DataTableEngine",
    "ErrorCatalog",
    "ErrorDefinition",
    "IdentitySelection",
    "PageSlice",
    "PageView",
    "PositionSelection",
    "Selection",
    "SortDirection",
    "TableConfigError",
    "TableError",
    "TableOptions",
    "TableSettings",
    "ViewState",
    "apply_column_filters",
    "clamp_page",
    "coerce_columns",
    "coerce_options",
    "compare_values",
    "configure_logging",
    "filter_rows",
    "load_settings",
    "make_selection",
    "next_page_number",
    "next_sort_state",
    "page_window",
    "paginate",
    "previous_page_number",
    "row_matches",
    "sort_rows",
    "total_pages_for",
    "validate_page_size",
]
