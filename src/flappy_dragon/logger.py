"""Leveled logging for the game loop.

Minimum level comes from the FLAPPY_DRAGON_LOG_LEVEL environment variable.
"""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from .constants import LOG_LEVEL_ENV

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _min_level() -> int:
    return _LEVELS.get(os.environ.get(LOG_LEVEL_ENV, "INFO").upper(), 20)


@dataclass
class Logger:
    name: str
    stream: TextIO | None = sys.stderr

    def _log(self, level: str, *parts):
        if _LEVELS[level] < _min_level() or self.stream is None:
            return
        ts = time.strftime("%H:%M:%S")
        msg = " ".join(str(p) for p in parts)
        self.stream.write(f"[{ts}] {level:<5} {self.name}: {msg}\n")
        self.stream.flush()

    def debug(self, *parts):
        self._log("DEBUG", *parts)

    def info(self, *parts):
        self._log("INFO", *parts)

    def warn(self, *parts):
        self._log("WARN", *parts)

    def error(self, *parts):
        self._log("ERROR", *parts)


def get_logger(name: str = "game") -> Logger:
    return Logger(name)


__all__ = ["get_logger", "Logger"]
