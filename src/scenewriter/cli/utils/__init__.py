"""CLI helpers."""

from scenewriter.cli.utils.cli_handler import CLIHandler

__all__ = ["CLIHandler"]
