from __future__ import annotations

import logging
import sys
from pathlib import Path

NOISY_LOGGERS = ("aiosqlite", "asyncpg", "multipart")


class _ThirdPartyFilter(logging.Filter):
    """Keep taskboard and uvicorn logs, only warnings and up from other libraries."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(("taskboard", "uvicorn")):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str | int = "INFO", log_dir: str | Path | None = None) -> None:
    """
    Configure the root logger with a stderr handler and, when log_dir is
    given, a file handler receiving everything at DEBUG.

    Safe to call more than once: previous handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level if isinstance(level, int) else level.upper())
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyFilter())
    root.addHandler(ch)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "taskboard.log"), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
