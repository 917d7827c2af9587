# logger_utils.py - logging setup and timing helpers for the shell/tools
# Library modules only create loggers (logging.getLogger(__name__)); handlers
# are configured here, once, by whoever runs the program.

import logging
import os
import time
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("emoji_predictor")


def setup_logging(level: str = "WARNING", log_path: Optional[str] = None) -> None:
    """
    Configure root logging for the CLI/tools.
    level: logging level name ("DEBUG", "INFO", ...); unknown names fall back to WARNING.
    log_path: optional file that receives the same records as the console.
    """
    lvl = logging.getLevelName(str(level).upper())
    if not isinstance(lvl, int):
        lvl = logging.WARNING

    handlers = [logging.StreamHandler()]
    if log_path:
        os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(level=lvl, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers, force=True)


class Log:
    """Timing helpers that report through the package logger."""

    @staticmethod
    def metric(tag, value, unit=""):
        """Record a metric line, e.g. "word query done: 0.001s"."""
        logger.info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label):
        """
        Measure a block of code:
            with Log.time_block("sentence query"):
                predict_for_sentence(text)
        """
        return _Timer(label)


class _Timer:
    """Context manager used by Log.time_block."""

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
        return False
