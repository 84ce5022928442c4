"""Logging configuration for the ``abn_ofx`` package.

Library modules only call ``logging.getLogger(__name__)``; the entry point
calls :func:`configure_logging` once to attach a single stderr handler to the
package logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "abn_ofx"
_LEVEL_ENV = "ABN_OFX_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

logging.getLogger(_PKG_LOGGER_NAME).addHandler(logging.NullHandler())


def _level_from_name(value: str) -> Optional[int]:
    value = value.strip().upper()
    if value.isdigit():
        return int(value)
    numeric = getattr(logging, value, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: Optional[Union[int, str]]) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        parsed = _level_from_name(level)
        if parsed is not None:
            return parsed
    env_val = os.getenv(_LEVEL_ENV)
    if env_val:
        parsed = _level_from_name(env_val)
        if parsed is not None:
            return parsed
    return logging.WARNING


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """Attach one ``StreamHandler`` to the package logger and return it.

    ``level`` defaults to ``ABN_OFX_LOG_LEVEL`` when set, otherwise WARNING.
    Calling this again replaces the previously attached handler.
    """

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    numeric = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    return logger
