from __future__ import annotations

import logging
import os
from typing import Literal

ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__package__)


def set_log_level(level: int | Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]) -> None:
    if not isinstance(level, (int, str)):
        msg = f"level must be an int or a str, got {type(level).__name__}"
        raise TypeError(msg)
    if isinstance(level, str) and level not in ALLOWED_LOG_LEVELS:
        msg = f"string level must be one of {ALLOWED_LOG_LEVELS}, got {level!r}"
        raise ValueError(msg)

    logger.setLevel(level)


def _env_log_level(value: str | None) -> int | str:
    match value:
        case None:
            return logging.WARNING
        case v if v.isdigit():
            return int(v)
        case v if v.upper() in ALLOWED_LOG_LEVELS:
            return v.upper()
        case _:
            return logging.WARNING


if not logger.handlers:
    formatter = logging.Formatter(
        "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(_env_log_level(os.getenv("MONADIC_LOG_LEVEL")))
    logger.propagate = False
