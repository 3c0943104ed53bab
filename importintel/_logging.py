"""Logging sink used by the analyzer.

The library never configures handlers; callers inject any object with a
``log(level, msg)`` method. A :class:`logging.Logger` qualifies.
"""

from __future__ import annotations

import logging
from typing import Protocol


LOGGER_NAME = "importintel"


class LogSink(Protocol):
    def log(self, level: int, msg: str) -> None: ...


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
