"""Logging setup for the textparser CLI and library.

Logs never share stdout with the analysis report: they go to stderr, or to
``TEXTPARSER_LOG_FILE`` when it is set. Timestamps are UTC in both formats.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import time
from datetime import datetime, timezone
from typing import Dict, Optional

from .config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineno": record.lineno,
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


class UtcTextFormatter(logging.Formatter):
    """Plain text records with a UTC ``asctime``."""

    converter = time.gmtime

    def __init__(self) -> None:
        super().__init__(fmt=TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def _level(name: Optional[str], default: int = logging.WARNING) -> int:
    return getattr(logging, (name or "").upper(), default)


def _library_levels(settings: Settings) -> Dict[str, int]:
    # spaCy and gensim log model loading at INFO
    return {
        "spacy": _level(settings.spacy_log_level),
        "gensim": _level(settings.gensim_log_level),
    }


def _make_handler(log_file: Optional[str], formatter: logging.Formatter) -> logging.Handler:
    if log_file:
        parent = os.path.dirname(log_file)
        if parent:
            os.makedirs(parent, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def configure_logging(override_level: Optional[str] = None, force: bool = False) -> None:
    """Install the root handler from ``TEXTPARSER_LOG_*`` settings.

    Args:
        override_level: Level name that wins over ``TEXTPARSER_LOG_LEVEL``
            (the CLI passes "DEBUG" for ``--verbose``)
        force: Replace handlers that are already installed. Without it, an
            application that configured logging itself only gets its root
            level adjusted.
    """
    settings = get_settings()
    root_logger = logging.getLogger()
    level = _level(override_level or settings.log_level)

    if root_logger.handlers and not force:
        root_logger.setLevel(level)
        return

    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    formatter = JsonLogFormatter() if settings.log_format == "json" else UtcTextFormatter()
    root_logger.addHandler(_make_handler(settings.log_file, formatter))
    root_logger.setLevel(level)

    for name, library_level in _library_levels(settings).items():
        logging.getLogger(name).setLevel(library_level)
