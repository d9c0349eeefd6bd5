# roster/logging/logging.py
"""Application loggers that write to ``roster.log`` and, optionally, stderr.

Each named logger is configured once; later :func:`get_logger` calls return
it unchanged until :func:`reset_logger` drops its handlers. The log directory
comes from ``ROSTER_LOG_DIR`` (default ``~/.roster/logs``) and the default
level from ``ROSTER_LOG_LEVEL`` (default ``INFO``).
"""
import logging
import os
import sys
from pathlib import Path

FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"

_configured: set[str] = set()


def log_file_path(log_file=None) -> Path:
    if log_file is not None:
        return Path(log_file)
    log_dir = os.environ.get("ROSTER_LOG_DIR") or Path.home() / ".roster" / "logs"
    return Path(log_dir) / "roster.log"


def _default_level() -> int:
    name = os.environ.get("ROSTER_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name="roster", level=None, log_file=None, console=True, propagate=False):
    """Return the logger ``name``, attaching file/console handlers on first use."""
    logger = logging.getLogger(name)
    if name in _configured:
        return logger

    path = log_file_path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    handlers: list[logging.Handler] = [logging.FileHandler(path, encoding="utf-8")]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_default_level() if level is None else level)
    logger.propagate = propagate
    _configured.add(name)
    return logger


def reset_logger(name=None):
    """Close and detach handlers of ``name`` (or every configured logger)."""
    names = list(_configured) if name is None else [name]
    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _configured.discard(n)
