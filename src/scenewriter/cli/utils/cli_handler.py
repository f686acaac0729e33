"""Shared error and success reporting for CLI commands."""

from __future__ import annotations

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from scenewriter.cli.formatters.json_formatter import JsonFormatter
from scenewriter.config import get_logger
from scenewriter.exceptions import SceneWriterError, ValidationError

logger = get_logger(__name__)


class CLIHandler:
    """Report command outcomes on the console or as JSON."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the handler.

        Args:
            console: Rich console for human-readable output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def error_text(self, error: Exception) -> str:
        """Console text for an error.

        SceneWriter errors already render an ``Error:`` line plus any hint and
        details; validation errors are labelled as such.
        """
        text = str(error)
        if isinstance(error, ValidationError):
            return f"Validation {text}"
        if isinstance(error, SceneWriterError):
            return text
        return f"Error: {text}"

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> NoReturn:
        """Log and print an error, then exit.

        Args:
            error: The failure
            json_output: Print a JSON error payload instead of text
            exit_code: Process exit code

        Raises:
            typer.Exit: Always
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            print(self.json_formatter.format_error_response(error, exit_code))
        else:
            self.console.print(self.error_text(error), style="red", markup=False)

        raise typer.Exit(exit_code)

    def handle_success(
        self, message: str, data: Any = None, json_output: bool = False
    ) -> None:
        """Print a success message, or a JSON payload with ``data``."""
        if json_output:
            print(self.json_formatter.format_success(message, data))
        else:
            self.console.print(f"[green]{escape(message)}[/green]")
