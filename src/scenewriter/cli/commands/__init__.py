"""CLI command modules."""

from scenewriter.cli.commands.export import export_command
from scenewriter.cli.commands.preview import preview_command

__all__ = ["export_command", "preview_command"]
