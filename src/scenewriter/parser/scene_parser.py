"""Parse one scene's free text into typed blocks."""

from __future__ import annotations

from scenewriter.config import get_logger
from scenewriter.parser.action import parse_action_lines
from scenewriter.parser.blocks import Block
from scenewriter.parser.dialogue import parse_dialogue_block
from scenewriter.parser.segmenter import MarkupSegmenter, SegmentKind

logger = get_logger(__name__)


class SceneContentParser:
    """Parse scene content written with the ``@:`` / ``:@`` dialogue markup."""

    def __init__(self) -> None:
        """Initialize the parser."""
        self.segmenter = MarkupSegmenter()

    def parse(self, content: str | None) -> list[Block]:
        """Parse raw scene text.

        Never raises: unterminated dialogue blocks close at end of input and
        stray ``:@`` lines are kept as action text.

        Args:
            content: Raw scene text

        Returns:
            Blocks in source order; empty for blank content
        """
        if not content or not content.strip():
            return []

        blocks: list[Block] = []
        segments = self.segmenter.segment(content)
        for segment in segments:
            if segment.kind is SegmentKind.DIALOGUE_BLOCK:
                blocks.extend(parse_dialogue_block(segment.cue or "", segment.lines))
            else:
                blocks.extend(parse_action_lines(segment.lines))

        logger.debug(
            "Parsed scene content",
            segments=len(segments),
            blocks=len(blocks),
        )
        return blocks
