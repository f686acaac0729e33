"""Logging configuration for SceneWriter.

structlog events are handed to the standard library and rendered by a
``ProcessorFormatter`` on each handler, so library logs and SceneWriter's own
events share one output format and pytest's ``caplog`` sees both.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    TimeStamper,
    add_log_level,
    dict_tracebacks,
    format_exc_info,
)
from structlog.stdlib import ProcessorFormatter, add_logger_name, filter_by_level

from scenewriter.config.settings import SceneWriterSettings

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "structured":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "logger", "event"],
            drop_missing=True,
        )
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.rich_traceback,
    )


def _build_formatter(log_format: str) -> ProcessorFormatter:
    """Create the stdlib formatter that renders structlog and foreign records."""
    return ProcessorFormatter(
        processors=[
            ProcessorFormatter.remove_processors_meta,
            _renderer(log_format),
        ],
        foreign_pre_chain=[
            TimeStamper(fmt="iso"),
            add_log_level,
            add_logger_name,
        ],
    )


def _build_handlers(settings: SceneWriterSettings) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                filename=str(log_path),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    return handlers


def configure_logging(settings: SceneWriterSettings) -> None:
    """Configure stdlib logging and structlog from settings.

    Args:
        settings: Settings holding the level, format, log file, and debug flag

    Raises:
        ValueError: If the log level is unknown to the logging module
    """
    level = logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        raise ValueError(f"Invalid log level '{settings.log_level}'")

    formatter = _build_formatter(settings.log_format)
    handlers = _build_handlers(settings)
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    processors: list[Any] = [
        merge_contextvars,
        filter_by_level,
        add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
    ]
    # Console output keeps exc_info for the rich traceback formatter
    if settings.log_format == "json":
        processors.append(dict_tracebacks)
    elif settings.log_format == "structured":
        processors.append(format_exc_info)
    if settings.debug:
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.LINENO,
                    CallsiteParameter.FUNC_NAME,
                ]
            )
        )
    processors.append(ProcessorFormatter.wrap_for_formatter)

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
