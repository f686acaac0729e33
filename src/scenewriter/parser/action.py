"""Action text parsing."""

from __future__ import annotations

from scenewriter.parser.blocks import Action, Blank, Block
from scenewriter.utils import ScreenplayUtils


def parse_action_lines(lines: list[str]) -> list[Block]:
    """Turn lines outside dialogue blocks into ``Action`` and ``Blank`` blocks.

    Each paragraph group becomes one ``Action`` with its line breaks kept.
    Each blank line becomes one ``Blank``; runs of blank lines are not
    collapsed.

    Args:
        lines: Action lines in source order

    Returns:
        Blocks in source order
    """
    blocks: list[Block] = []
    for group in ScreenplayUtils.group_by_blank_lines(lines):
        if group:
            blocks.append(Action(text="\n".join(line.strip() for line in group)))
        else:
            blocks.append(Blank())
    return blocks
