from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_PAGE_SIZE = 10
DEFAULT_EMPTY_MESSAGE = "No data available"
DEFAULT_PAGE_WINDOW_SIBLINGS = 1
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class TableSettings:
    page_size: int = DEFAULT_PAGE_SIZE
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    page_window_siblings: int = DEFAULT_PAGE_WINDOW_SIBLINGS
    log_level: str = DEFAULT_LOG_LEVEL


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def load_settings(env_file: str | None = None) -> TableSettings:
    """Load table defaults from the environment with optional .env override."""
    load_dotenv(env_file)

    page_size = _read_int("CNC_DATATABLE_PAGE_SIZE", str(DEFAULT_PAGE_SIZE))
    _validate(page_size > 0, f"Invalid CNC_DATATABLE_PAGE_SIZE: expected > 0, got {page_size}")

    siblings = _read_int("CNC_DATATABLE_PAGE_WINDOW_SIBLINGS", str(DEFAULT_PAGE_WINDOW_SIBLINGS))
    _validate(
        siblings >= 0,
        f"Invalid CNC_DATATABLE_PAGE_WINDOW_SIBLINGS: expected >= 0, got {siblings}",
    )

    empty_message = os.getenv("CNC_DATATABLE_EMPTY_MESSAGE", DEFAULT_EMPTY_MESSAGE).strip() or DEFAULT_EMPTY_MESSAGE

    log_level = (os.getenv("CNC_DATATABLE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    _validate(log_level in _LOG_LEVELS, f"Invalid CNC_DATATABLE_LOG_LEVEL: {log_level!r}")

    return TableSettings(
        page_size=page_size,
        empty_message=empty_message,
        page_window_siblings=siblings,
        log_level=log_level,
    )
