"""Logovanie Kvízovky: Rich na konzolu, rotujúci log súbor a trace-id ťahu.

Knižničný kód si len pýta `logging.getLogger("kvizovka.<modul>")`;
handlery nastavuje jedine `configure_logging` (volá ho CLI).
"""
from __future__ import annotations

import logging
import os
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

from .config import log_level

PROJECT_LOGGER = "kvizovka"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s [%(trace_id)s] %(message)s"
MAX_LOG_BYTES = 1_000_000
LOG_BACKUPS = 5

# Číslo ťahu ("move-3"); `Game.make_move` ho nastaví na celý ťah
TRACE_ID_VAR: ContextVar[str] = ContextVar("trace_id", default="-")


class _TraceIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = TRACE_ID_VAR.get()
        return True


def default_log_path() -> str:
    """`KVIZOVKA_LOG_PATH`, inak `kvizovka.log` vedľa balíka."""
    override = os.getenv("KVIZOVKA_LOG_PATH")
    if override:
        return override
    return str(Path(__file__).resolve().parents[1] / "kvizovka.log")


def _console_handler(level: int, trace: logging.Filter) -> logging.Handler:
    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setLevel(level)
    handler.addFilter(trace)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(path: str, trace: logging.Filter) -> logging.Handler | None:
    try:
        handler = RotatingFileHandler(
            path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError as exc:
        logging.getLogger(PROJECT_LOGGER).warning("log_file_unavailable path=%s error=%s", path, exc)
        return None
    handler.setLevel(logging.DEBUG)
    handler.addFilter(trace)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def configure_logging(*, log_path: str | None = None) -> logging.Logger:
    """Nastaví koreňový logger raz; pri ďalšom volaní ho nechá tak.

    Konzola loguje od `KVIZOVKA_LOG_LEVEL`, súbor vždy od DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        return logging.getLogger(PROJECT_LOGGER)

    trace = _TraceIdFilter()
    root.setLevel(logging.DEBUG)
    root.addHandler(_console_handler(log_level(), trace))
    file_handler = _file_handler(log_path or default_log_path(), trace)
    if file_handler is not None:
        root.addHandler(file_handler)
    return logging.getLogger(PROJECT_LOGGER)
