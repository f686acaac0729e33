"""SceneWriter configuration: settings and logging."""

from __future__ import annotations

from functools import cache
from typing import Any

from scenewriter.config import logging as _logging
from scenewriter.config.logging import configure_logging
from scenewriter.config.settings import (
    SceneWriterSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    read_config_file,
    set_settings,
)
from scenewriter.config.settings import reset_settings as _reset_settings

__all__ = [
    "SceneWriterSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_settings_for_cli",
    "read_config_file",
    "reset_settings",
    "set_settings",
]


@cache
def _configure_once() -> None:
    configure_logging(get_settings())


@cache
def get_logger(name: str) -> Any:
    """Get a logger for ``name`` (usually ``__name__``).

    The first call configures logging from the global settings; loggers are
    cached per name.
    """
    _configure_once()
    return _logging.get_logger(name)


def reset_settings() -> None:
    """Forget the global settings and the logger cache."""
    _reset_settings()
    _configure_once.cache_clear()
    get_logger.cache_clear()
