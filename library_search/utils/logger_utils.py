# logger_utils.py - logging messages and timing metrics for library_search

import logging
import os
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER = "library_search"


def get_logger(name: str = ROOT_LOGGER, level: Optional[str] = None, log_path: Optional[str] = None) -> logging.Logger:
    """
    Create or retrieve a logger under the library_search namespace.

    - level: string level (e.g. INFO, DEBUG); None leaves the current level alone
    - log_path: also append to this file ("" or None = console only)
    Console output goes through a RichHandler on stderr, attached once to the
    package root logger so child loggers never print twice.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True))
        root.setLevel(logging.WARNING)

    if level:
        root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if log_path:
        _attach_file(root, log_path)
    return logging.getLogger(name)


def _attach_file(logger: logging.Logger, path: str) -> None:
    path = os.path.abspath(path)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == path:
            return
    os.makedirs(os.path.dirname(path), exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


class Log:
    """Helpers for metric lines and timed blocks."""

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (timing, counts etc.) on the metrics logger.
        Example: search done: 0.002s
        """
        get_logger("metrics").info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("load catalog"):
                load_sample_catalog(index)
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        Log.metric(f"{self.label} done", round(self.elapsed, 4), "s")
