from __future__ import annotations

import logging
import pathlib
import sys
import threading
import time
import traceback
from typing import Optional, Union

import orjson

LOG_FILE_NAME = "reversi-agent.log"

FMT = "%(asctime)s.%(msecs)03d %(levelname)s [%(process)d] %(name)s - %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_log_path() -> pathlib.Path:
    return pathlib.Path.cwd() / LOG_FILE_NAME


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, pathlib.Path]] = LOG_FILE_NAME,
    overwrite: bool = True,
) -> None:
    """Configure root logging to stderr and, optionally, a log file.

    stdout is left alone: the duel protocol talks over it.
    - Overwrites the log file on first setup (per process) if overwrite is True
    - Installs sys.excepthook and threading excepthook
    - Captures warnings via logging
    """
    root_logger = logging.getLogger()
    if getattr(root_logger, "_ra_logging_configured", False):
        return

    formatter = logging.Formatter(fmt=FMT, datefmt=DATEFMT)
    handlers: list[logging.Handler] = []
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w" if overwrite else "a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setFormatter(formatter)
    handlers.append(stderr_handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, handlers=handlers, force=True)
    root_logger._ra_logging_configured = True  # type: ignore[attr-defined]

    logging.captureWarnings(True)
    sys.excepthook = _log_unhandled_exception  # type: ignore[assignment]
    threading.excepthook = _log_thread_exception  # type: ignore[assignment]


def _log_unhandled_exception(exc_type, exc_value, exc_tb) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("unhandled")
    tb_str = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.critical("Unhandled exception:\n%s", tb_str)


def _log_thread_exception(args) -> None:  # type: ignore[no-untyped-def]
    logger = logging.getLogger("thread")
    tb_str = "".join(traceback.format_exception(args.exc_type, args.exc_value, args.exc_traceback))
    logger.critical("Unhandled thread exception in %s:\n%s", getattr(args, "thread", None), tb_str)


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line under the ``event.<module>`` logger.
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    line = orjson.dumps(payload).decode("utf-8")
    logging.getLogger(f"event.{module}").info(line)
