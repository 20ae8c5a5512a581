"""Log file setup.

Logs go to a rotating file under the XDG state directory
(``~/.local/state/hyprzoom/hyprzoom.log`` by default); nothing is written to
the terminal so hyprzoom stays quiet when bound to a key.
"""
from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

APP_NAME = "hyprzoom"

_FORMAT = "%(asctime)s - %(name)-24s - %(levelname)-8s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def state_dir() -> Path:
    base = os.environ.get("XDG_STATE_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".local" / "state" / APP_NAME


def default_log_file() -> Path:
    return state_dir() / f"{APP_NAME}.log"


def setup_logging(level: int, log_file: Path | None = None) -> Path:
    """Attach an appending rotating file handler to the root logger.

    Calling again replaces the handler installed by the previous call.
    Raises OSError if the directory or file cannot be created.
    """
    global _handler

    path = Path(log_file) if log_file is not None else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    # 1MB max, keep 5 backups
    handler = RotatingFileHandler(
        path,
        maxBytes=1 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    handler.setLevel(level)

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()
    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler
    return path


def teardown_logging() -> None:
    """Remove and close the handler installed by setup_logging()."""
    global _handler

    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
        _handler.close()
        _handler = None
