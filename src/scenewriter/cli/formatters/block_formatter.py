"""Preview formatter showing parsed screenplay blocks."""

from __future__ import annotations

from typing import Any

from rich.table import Table
from rich.text import Text

from scenewriter.assembly import AssembledScript
from scenewriter.parser import (
    Action,
    Blank,
    Block,
    Character,
    Dialogue,
    Parenthetical,
    SceneHeading,
)

_BLOCK_STYLES = {
    SceneHeading: "bold cyan",
    Action: "white",
    Character: "bold yellow",
    Dialogue: "green",
    Parenthetical: "magenta",
    Blank: "dim",
}


def block_kind(block: Block) -> str:
    """Variant name of a block."""
    return type(block).__name__


def block_text(block: Block) -> str:
    """Display text of a block."""
    if isinstance(block, Character):
        return block.name
    if isinstance(block, Blank):
        return ""
    return block.text


def block_to_dict(block: Block) -> dict[str, Any]:
    """JSON-ready representation of a block."""
    return {"type": block_kind(block), "text": block_text(block)}


class BlockTableFormatter:
    """Render an assembled script's cover and blocks for the terminal."""

    def table(self, script: AssembledScript) -> Table:
        """Build a rich table of the body blocks.

        Args:
            script: Assembled script

        Returns:
            Table with one row per block
        """
        table = Table(title=script.cover.title, show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Block", style="cyan")
        table.add_column("Text", no_wrap=False)

        for index, block in enumerate(script.blocks, start=1):
            style = _BLOCK_STYLES.get(type(block), "white")
            table.add_row(
                str(index),
                block_kind(block),
                Text(block_text(block), style=style),
            )
        return table

    def to_dict(self, script: AssembledScript) -> dict[str, Any]:
        """JSON-ready representation of the cover and blocks."""
        cover = script.cover
        return {
            "cover": {
                "title": cover.title,
                "season": cover.season_line,
                "episode": cover.episode_line,
                "author": cover.author,
                "date": cover.date_line,
            },
            "scene_count": script.scene_count,
            "blocks": [block_to_dict(block) for block in script.blocks],
        }
