# logger_utils.py - logging setup and performance metrics (timings, counts)

from __future__ import annotations

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# parent of every module logger in the package
ROOT_LOGGER = "intelligent_spellchecker"

# file entries are written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_metrics_logger = logging.getLogger(f"{ROOT_LOGGER}.metrics")


class Log:
    """Configures the package logger and records metrics through it."""

    _handlers: list = []

    @classmethod
    def setup(cls, level: str = "WARNING", path: Optional[str] = None) -> logging.Logger:
        """
        Attach a rich console handler (stderr) and, if `path` is set, a file handler.
        Calling again replaces the handlers installed by the previous call.
        """
        logger = logging.getLogger(ROOT_LOGGER)
        for h in cls._handlers:
            logger.removeHandler(h)
            h.close()
        cls._handlers = []

        console = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        console.setFormatter(logging.Formatter("%(message)s"))
        cls._handlers.append(console)

        if path:
            folder = os.path.dirname(path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            fh = logging.FileHandler(path, encoding="utf-8")
            fh.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
            cls._handlers.append(fh)

        for h in cls._handlers:
            logger.addHandler(h)
        logger.setLevel(level.upper())
        return logger

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts, sizes).
        Example: build bk-tree done: 1.532s
        """
        _metrics_logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("build filter"):
                do_some_work()
        The elapsed seconds are logged on exit and kept on the timer as `.elapsed`.
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            Log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
