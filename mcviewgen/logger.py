"""Console and daily-rotated file logging."""

from __future__ import annotations

import logging
import os
import sys
import threading
import time
from datetime import datetime

from mcviewgen.model import Config

PREFIX = "DR"
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

COLOR_RESET = "\x1b[0m"
_COLORS = {
    logging.CRITICAL: "\x1b[1;31m",
    logging.ERROR: "\x1b[31m",
    logging.WARNING: "\x1b[33m",
    logging.INFO: "\x1b[37m",
    logging.DEBUG: "\x1b[32m",
    TRACE: "\x1b[36m",
}

_LEVEL_ORDER = [TRACE, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL]
_START = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "error": 4}


def get_log_levels(level: str) -> list[int]:
    """Levels enabled by a configured level name; unknown names mean info."""
    return list(_LEVEL_ORDER[_START.get(level, 2):])


def level_color_code(level: int) -> str:
    """ANSI colour escape for a log level."""
    return _COLORS.get(level, _COLORS[logging.INFO])


class LogFormatter(logging.Formatter):
    """``[PREFIX] [LEVEL] [time] file:line: message`` lines, optionally coloured."""

    def __init__(self, prefix: str = PREFIX, enable_color: bool = False) -> None:
        super().__init__()
        self.prefix = prefix
        self.enable_color = enable_color

    def format(self, record: logging.LogRecord) -> str:
        parts = []
        if self.enable_color:
            parts.append(level_color_code(record.levelno))
        if getattr(record, "raw", False):
            parts.append(record.getMessage())
        else:
            stamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
            caller = f" {record.filename}:{record.lineno}" if record.filename else ""
            parts.append(
                f"[{self.prefix}] [{record.levelname.upper()}] [{stamp}]{caller}: {record.getMessage()} \n"
            )
        if self.enable_color:
            parts.append(COLOR_RESET)
        return "".join(parts)


class DailyFileWriter:
    """Appends text to ``<directory>/YYYY-MM-DD.log``, pruning files older than ``max_age``."""

    def __init__(self, directory: str, max_age: float = 0.0, force_new: bool = False) -> None:
        self.directory = directory
        self.max_age = max_age
        self.force_new = force_new
        self._lock = threading.Lock()
        self._day: str | None = None
        self._fh = None

    def _target(self, day: str) -> str:
        path = os.path.join(self.directory, f"{day}.log")
        if not self.force_new:
            return path
        n = 1
        candidate = path
        while os.path.exists(candidate):
            candidate = f"{path}.{n}"
            n += 1
        return candidate

    def _purge(self) -> None:
        if self.max_age <= 0:
            return
        cutoff = time.time() - self.max_age
        for name in os.listdir(self.directory):
            full = os.path.join(self.directory, name)
            if ".log" in name and full != getattr(self._fh, "name", None):
                if os.path.isfile(full) and os.path.getmtime(full) < cutoff:
                    os.remove(full)

    def write(self, text: str) -> int:
        with self._lock:
            day = datetime.now().strftime("%Y-%m-%d")
            if self._fh is None or day != self._day:
                if self._fh is not None:
                    self._fh.close()
                os.makedirs(self.directory, exist_ok=True)
                self._fh = open(self._target(day), "a", encoding="utf-8")
                self._day = day
                self._purge()
            written = self._fh.write(text)
            self._fh.flush()
            return written

    def close(self) -> None:
        with self._lock:
            if self._fh is not None:
                self._fh.close()
                self._fh = None


class LocalHandler(logging.Handler):
    """Writes formatted records to a writer object or appends them to a file path."""

    def __init__(self, target, formatter: logging.Formatter | None = None, levels=None) -> None:
        super().__init__()
        if isinstance(target, str):
            self.path, self.writer = target, None
        elif hasattr(target, "write"):
            self.path, self.writer = "", target
        else:
            raise TypeError(f"unsupported type: {type(target).__name__}")
        self.levels = list(levels or [])
        self.setFormatter(formatter or LogFormatter())

    def _write(self, text: str) -> None:
        if self.writer is not None:
            self.writer.write(text)
        elif self.path:
            os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(text)

    def emit(self, record: logging.LogRecord) -> None:
        if self.levels and record.levelno not in self.levels:
            return
        try:
            text = self.format(record)
            with self.lock:
                self._write(text)
        except Exception:
            self.handleError(record)

    def exec_log_write(self, text: str) -> None:
        """Print ``text`` and write it unadorned to the handler's target."""
        print(text, end="")
        record = logging.makeLogRecord({"msg": text, "levelno": logging.INFO, "levelname": "INFO", "raw": True})
        with self.lock:
            self._write(self.format(record))


def init_logging(config: Config, parent_path: str) -> LocalHandler:
    """Configure the package logger from ``config`` and return the file handler."""
    log_cfg = config.log
    writer = DailyFileWriter(os.path.join(parent_path, "logs"), log_cfg.aging, log_cfg.force_new)
    levels = get_log_levels(log_cfg.level)
    logger = logging.getLogger("mcviewgen")
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.setLevel(levels[0])
    logger.propagate = False
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(LogFormatter(PREFIX, log_cfg.colorful))
    console.terminator = ""
    logger.addHandler(console)
    handler = LocalHandler(writer, LogFormatter(PREFIX, False), levels)
    logger.addHandler(handler)
    return handler