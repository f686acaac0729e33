"""SceneWriter configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scenewriter.exceptions import ConfigurationError, check_config_keys


def _load_yaml(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f)


def _load_toml(path: Path) -> Any:
    with path.open("rb") as f:
        return tomllib.load(f)


def _load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


CONFIG_LOADERS: dict[str, Callable[[Path], Any]] = {
    ".yaml": _load_yaml,
    ".yml": _load_yaml,
    ".toml": _load_toml,
    ".json": _load_json,
}
CONFIG_SUFFIXES = (".yaml", ".json", ".toml")


def read_config_file(config_path: Path | str) -> dict[str, Any]:
    """Read one configuration file into a plain dictionary.

    Args:
        config_path: YAML, TOML, or JSON file

    Returns:
        The file's top-level mapping; empty for an empty file

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the format is unsupported, the content is not
            a mapping, or it uses a misnamed key
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    loader = CONFIG_LOADERS.get(path.suffix.lower())
    if loader is None:
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {path.suffix}",
            hint="Use a .yaml, .yml, .toml, or .json file",
            details={"file": str(path), "supported": sorted(CONFIG_LOADERS)},
        )

    data = loader(path) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            message="Configuration file must contain a mapping",
            details={"file": str(path), "found": type(data).__name__},
        )

    check_config_keys(data)
    return data


class SceneWriterSettings(BaseSettings):
    """Settings for exports, the cover page, the house font, and logging.

    Sources, from highest to lowest precedence: command-line overrides,
    configuration files (later files win), ``SCENEWRITER_*`` environment
    variables, a ``.env`` file, and the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENEWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Export
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory exported screenplays are written to",
    )
    author_placeholder: str = Field(
        default="Anonymous",
        description="Cover byline used when no author name is given",
    )
    cover_date_format: str = Field(
        default="%B %d, %Y",
        description="strftime format of the export date on the cover",
    )
    document_description: str = Field(
        default="Screenplay created by SceneWriter",
        description="Description stored in the document properties",
    )

    # House font
    font_name: str = Field(default="Courier New", description="Document font")
    font_size_pt: int = Field(default=12, ge=6, le=72, description="Font size")

    # Logging
    debug: bool = Field(default=False, description="Add call sites to log events")
    log_level: str = Field(
        default="WARNING",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Logging level",
    )
    log_format: str = Field(
        default="console",
        pattern="^(console|json|structured)$",
        description="Log renderer: console, json, or structured key=value",
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    @field_validator("output_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand ``~`` and environment variables and make the path absolute."""
        if v is None:
            return None
        if not isinstance(v, str | os.PathLike):
            raise ValueError(f"Expected a path, got {type(v).__name__}: {v!r}")
        return Path(os.path.expandvars(os.fspath(v))).expanduser().resolve()

    @field_validator("log_level", "log_format", mode="before")
    @classmethod
    def normalize_case(cls, v: Any, info: ValidationInfo) -> Any:
        """Accept log level and format names in any case."""
        if not isinstance(v, str):
            return v
        return v.upper() if info.field_name == "log_level" else v.lower()

    @classmethod
    def from_env(cls) -> SceneWriterSettings:
        """Settings from environment variables, ``.env``, and defaults."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> SceneWriterSettings:
        """Settings from one YAML, TOML, or JSON file (over the environment)."""
        return cls(**read_config_file(config_path))

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: Iterable[Path | str] | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> SceneWriterSettings:
        """Merge configuration files and command-line values.

        Missing files are skipped with a warning. ``None`` values in
        ``cli_args`` mean "not given" and do not override anything.

        Args:
            config_files: Files to read; later files override earlier ones
            cli_args: Values from command-line options

        Returns:
            Merged settings
        """
        data: dict[str, Any] = {}
        for config_file in config_files or ():
            try:
                data.update(read_config_file(config_file))
            except FileNotFoundError:
                from scenewriter.config.logging import get_logger

                get_logger(__name__).warning(
                    "Configuration file not found, skipping",
                    config_file=str(config_file),
                )

        data.update({k: v for k, v in (cli_args or {}).items() if v is not None})
        return cls(**data)


_settings: SceneWriterSettings | None = None


def default_config_paths() -> list[Path]:
    """Existing user and project configuration files, lowest precedence first."""
    user_dir = Path.home() / ".config" / "scenewriter"
    candidates = [user_dir / f"config{suffix}" for suffix in CONFIG_SUFFIXES]
    candidates += [Path.cwd() / f"scenewriter{suffix}" for suffix in CONFIG_SUFFIXES]
    return [path for path in candidates if path.is_file()]


def get_settings() -> SceneWriterSettings:
    """Return the global settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = SceneWriterSettings.from_multiple_sources(default_config_paths())
    return _settings


def set_settings(settings: SceneWriterSettings) -> None:
    """Replace the global settings."""
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Forget the global settings so the next access reloads them."""
    global _settings
    _settings = None


reset_settings = clear_settings_cache


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> SceneWriterSettings:
    """Settings for a CLI command.

    Args:
        config_file: Command-specific configuration file; the global
            settings are used when omitted
        cli_overrides: Option values; ``None`` entries are ignored

    Returns:
        Settings with the overrides applied

    Raises:
        FileNotFoundError: If ``config_file`` does not exist
    """
    if config_file is not None:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return SceneWriterSettings.from_multiple_sources([config_file], cli_overrides)

    settings = get_settings()
    overrides = {k: v for k, v in (cli_overrides or {}).items() if v is not None}
    if not overrides:
        return settings
    return SceneWriterSettings(**{**settings.model_dump(), **overrides})
