from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    INVALID_PAGE_SIZE = ErrorDefinition("INVALID_PAGE_SIZE", "Page size must be a positive integer")
    DUPLICATE_COLUMN_KEY = ErrorDefinition("DUPLICATE_COLUMN_KEY", "Column keys must be unique")
    UNKNOWN_COLUMN = ErrorDefinition("UNKNOWN_COLUMN", "Unknown column key")
    COLUMN_NOT_FILTERABLE = ErrorDefinition("COLUMN_NOT_FILTERABLE", "Column does not accept filters")
    ROW_KEY_REQUIRED = ErrorDefinition(
        "ROW_KEY_REQUIRED",
        "Identity selection requires a row_key",
    )
    INVALID_OPTIONS = ErrorDefinition("INVALID_OPTIONS", "Invalid table configuration")


class TableError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)

    @property
    def code(self) -> str:
        return self.error.code

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.error.code}: {self.error.message}"
        return f"{self.error.code}: {self.error.message} ({self.details})"


class TableConfigError(TableError, ValueError):
    """Raised synchronously when a table is configured or driven with invalid input."""
