from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable, Mapping, Sequence

from .errors import ErrorCatalog, TableConfigError

PageRows = Sequence[Mapping[str, Any]]


class Selection(ABC):
    """Row marks scoped to whatever page slice is passed in.

    Subclasses decide what gets stored; every operation receives the current
    page rows so nothing here outlives a recomputation.
    """

    mode = ""

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def toggle(self, position: int, page_rows: PageRows) -> bool:
        ...

    @abstractmethod
    def select_all(self, page_rows: PageRows) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def is_all_selected(self, page_rows: PageRows) -> bool:
        ...

    @abstractmethod
    def selected_positions(self, page_rows: PageRows) -> list[int]:
        ...

    def selected_rows(self, page_rows: PageRows) -> list[Mapping[str, Any]]:
        return [page_rows[position] for position in self.selected_positions(page_rows) if position < len(page_rows)]

    def toggle_all(self, page_rows: PageRows) -> None:
        if self.is_all_selected(page_rows):
            self.clear()
        else:
            self.select_all(page_rows)


def _in_page(position: int, page_rows: PageRows) -> bool:
    return 0 <= position < len(page_rows)


class PositionSelection(Selection):
    """Selection keyed by page-relative index.

    Positions are not remapped when the page, sort or filter changes.
    """

    mode = "position"

    def __init__(self) -> None:
        self.positions: set[int] = set()

    def __len__(self) -> int:
        return len(self.positions)

    def toggle(self, position: int, page_rows: PageRows) -> bool:
        if not _in_page(position, page_rows):
            return False
        if position in self.positions:
            self.positions.discard(position)
        else:
            self.positions.add(position)
        return True

    def select_all(self, page_rows: PageRows) -> None:
        self.positions = set(range(len(page_rows)))

    def clear(self) -> None:
        self.positions.clear()

    def is_all_selected(self, page_rows: PageRows) -> bool:
        return bool(page_rows) and len(self.positions) == len(page_rows)

    def selected_positions(self, page_rows: PageRows) -> list[int]:
        return sorted(self.positions)


class IdentitySelection(Selection):
    """Selection keyed by a stable value read from each row under ``row_key``."""

    mode = "identity"

    def __init__(self, row_key: str) -> None:
        self.row_key = row_key
        self.keys: set[Hashable] = set()

    def __len__(self) -> int:
        return len(self.keys)

    def key_of(self, row: Mapping[str, Any]) -> Hashable:
        return row.get(self.row_key)

    def toggle(self, position: int, page_rows: PageRows) -> bool:
        if not _in_page(position, page_rows):
            return False
        key = self.key_of(page_rows[position])
        if key in self.keys:
            self.keys.discard(key)
        else:
            self.keys.add(key)
        return True

    def select_all(self, page_rows: PageRows) -> None:
        self.keys = {self.key_of(row) for row in page_rows}

    def clear(self) -> None:
        self.keys.clear()

    def is_all_selected(self, page_rows: PageRows) -> bool:
        return bool(page_rows) and all(self.key_of(row) in self.keys for row in page_rows)

    def selected_positions(self, page_rows: PageRows) -> list[int]:
        return [index for index, row in enumerate(page_rows) if self.key_of(row) in self.keys]


def make_selection(mode: str = "position", row_key: str | None = None) -> Selection:
    if mode == "identity":
        if not row_key:
            raise TableConfigError(ErrorCatalog.ROW_KEY_REQUIRED, details={"selection_mode": mode})
        return IdentitySelection(row_key)
    return PositionSelection()
