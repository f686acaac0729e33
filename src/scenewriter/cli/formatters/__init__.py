"""Output formatters for the SceneWriter CLI."""

from scenewriter.cli.formatters.block_formatter import (
    BlockTableFormatter,
    block_to_dict,
)
from scenewriter.cli.formatters.json_formatter import JsonFormatter

__all__ = ["BlockTableFormatter", "JsonFormatter", "block_to_dict"]
