from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ErrorCatalog, ErrorDefinition, TableConfigError
from .logging import get_logger, log_json
from .models import ColumnDescriptor, TableOptions

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def reject(error: ErrorDefinition, details: object | None = None) -> None:
    log_json(
        logger,
        {"event": "datatable.config_rejected", "code": error.code, "details": details},
        level=logging.WARNING,
    )
    raise TableConfigError(error, details=details)


def _coerce(value: M | Mapping[str, Any], model_type: type[M], location: str) -> M:
    if isinstance(value, model_type):
        return value
    try:
        return model_type.model_validate(value)
    except PydanticValidationError as exc:
        issue = exc.errors()[0] if exc.errors() else {"loc": (), "msg": "Invalid value"}
        field = ".".join(str(part) for part in (location, *issue.get("loc", ())))
        reject(ErrorCatalog.INVALID_OPTIONS, details={"field": field, "reason": issue.get("msg", "Invalid value")})
        raise


def coerce_columns(columns: Iterable[ColumnDescriptor | Mapping[str, Any]]) -> list[ColumnDescriptor]:
    resolved = [_coerce(column, ColumnDescriptor, f"columns[{index}]") for index, column in enumerate(columns)]
    seen: set[str] = set()
    duplicates: list[str] = []
    for column in resolved:
        if column.key in seen and column.key not in duplicates:
            duplicates.append(column.key)
        seen.add(column.key)
    if duplicates:
        reject(ErrorCatalog.DUPLICATE_COLUMN_KEY, details={"keys": duplicates})
    return resolved


def coerce_options(options: TableOptions | Mapping[str, Any] | None = None, **overrides: Any) -> TableOptions:
    if options is None:
        base = TableOptions()
    else:
        base = _coerce(options, TableOptions, "options")
    if not overrides:
        return base
    return _coerce({**base.model_dump(exclude_unset=True), **overrides}, TableOptions, "options")


def validate_page_size(page_size: Any) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        reject(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": page_size})
    return page_size
