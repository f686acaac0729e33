"""SceneWriter exceptions.

Every error carries a message, an optional hint on how to fix it, and optional
details; ``str()`` renders all three so the CLI can print errors as-is.
"""

from __future__ import annotations

from typing import Any


class SceneWriterError(Exception):
    """Base class for SceneWriter errors."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: What went wrong
            hint: How to fix it
            details: Extra context, rendered as ``key: value`` lines
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Render message, hint, and details as multi-line text."""
        lines = [f"Error: {self.message}"]
        if self.hint:
            lines.append(f"Hint: {self.hint}")
        if self.details:
            lines.append("Details:")
            lines.extend(f"  {key}: {value}" for key, value in self.details.items())
        return "\n".join(lines)


class ConfigurationError(SceneWriterError):
    """Invalid settings or configuration files."""


class ValidationError(SceneWriterError):
    """Invalid export input, such as an unknown season or episode."""


class BundleError(SceneWriterError):
    """A project bundle that cannot be read or has the wrong shape."""


class ExportError(SceneWriterError):
    """Serializing or saving a screenplay failed."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        original_error: Exception | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: What went wrong
            filename: Name of the document being exported
            original_error: Underlying exception
            hint: How to fix it
        """
        self.filename = filename
        self.original_error = original_error

        details: dict[str, Any] = {}
        if filename:
            details["filename"] = filename
        if original_error is not None:
            details["original_error"] = (
                f"{type(original_error).__name__}: {original_error}"
            )
        super().__init__(message, hint=hint, details=details or None)


# Keys people commonly write instead of the real setting names
MISNAMED_CONFIG_KEYS = {
    "author": "author_placeholder",
    "font": "font_name",
    "font_size": "font_size_pt",
    "output": "output_dir",
}


def check_config_keys(config: dict[str, Any]) -> None:
    """Reject configuration keys that look like misspelled setting names.

    Raises:
        ConfigurationError: Naming the key to use instead
    """
    for wrong, correct in MISNAMED_CONFIG_KEYS.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "invalid_key": wrong,
                    "correct_key": correct,
                    "found_keys": sorted(config),
                },
            )
