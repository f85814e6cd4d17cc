from __future__ import annotations

import json
import logging


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger("cnc_datatable")
    logger.setLevel(level)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_json(logger: logging.Logger, payload: dict, level: int = logging.INFO) -> None:
    if not logger.isEnabledFor(level):
        return
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str, sort_keys=True))
