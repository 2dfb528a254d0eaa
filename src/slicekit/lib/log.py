from typing import Any
import os
import logging

import rich.logging

__all__ = 'logger', 'set_level'


def _parse_level(name: str | None) -> int:
    """Level number for a level name, WARNING for a missing or unknown name"""
    return logging.getLevelNamesMapping().get((name or "").strip().upper(), logging.WARNING)


_LEVEL = _parse_level(os.environ.get("SLICEKIT_LOG_LEVEL"))
_COLOR = os.environ.get("SLICEKIT_NO_COLOR_LOG", "") != "1"


class SliceLogFormatter(logging.Formatter):
    """Formatter that applies %-style arguments before rendering"""

    def format(self, record: logging.LogRecord) -> Any:
        msg = record.getMessage()
        record.msg = msg
        record.args = ()

        # RichHandler renders time and level by itself
        if _COLOR:
            return msg

        return super().format(record)


# Create logger
logger = logging.getLogger("slicekit")
# Remove existing handlers before adding new one
if logger.hasHandlers():
    logger.handlers.clear()

if _COLOR:
    handler: logging.Handler = rich.logging.RichHandler(
        show_time=True,
        show_level=True,
        omit_repeated_times=False,
        markup=False,
        show_path=False,
    )
else:
    handler = logging.StreamHandler()
handler.setFormatter(SliceLogFormatter(
    "%(asctime)s %(levelname)-7s %(message)s",
    datefmt="[%Y-%m-%d %H:%M:%S%z]")
)
logger.addHandler(handler)
logger.setLevel(_LEVEL)


def set_level(level: int | str) -> None:
    """
    Set the level of the package logger.

    :param level: Level name (e.g. "DEBUG") or number
    """
    logger.setLevel(level.upper() if isinstance(level, str) else level)
