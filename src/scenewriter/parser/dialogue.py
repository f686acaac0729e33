"""Dialogue block parsing."""

from __future__ import annotations

from scenewriter.parser.blocks import Blank, Block, Character, Dialogue, Parenthetical
from scenewriter.utils import ScreenplayUtils

DEFAULT_CUE = "CHARACTER"


def parse_dialogue_block(cue: str, lines: list[str]) -> list[Block]:
    """Turn the lines captured inside one ``@:`` ... ``:@`` block into blocks.

    The cue becomes an upper-cased ``Character`` block. Parenthetical lines
    stand alone; consecutive other lines of a paragraph group form one
    ``Dialogue`` with its line breaks kept. Blank lines become ``Blank``
    blocks, except those before the first spoken line.

    Args:
        cue: Character name from the ``@:`` line
        lines: Lines between the markers, markers excluded

    Returns:
        ``Character`` followed by the cue's dialogue content
    """
    blocks: list[Block] = [Character(name=cue.strip().upper() or DEFAULT_CUE)]
    has_content = False

    for group in ScreenplayUtils.group_by_blank_lines(lines):
        if not group:
            if has_content:
                blocks.append(Blank())
            continue

        pending: list[str] = []
        for line in group:
            if ScreenplayUtils.is_parenthetical(line):
                if pending:
                    blocks.append(Dialogue(text="\n".join(pending)))
                    pending = []
                blocks.append(Parenthetical(text=line.strip()))
            else:
                pending.append(line.strip())
        if pending:
            blocks.append(Dialogue(text="\n".join(pending)))
        has_content = True

    if not has_content:
        # A cue is never left without dialogue
        blocks.append(Dialogue(text=""))

    return blocks
