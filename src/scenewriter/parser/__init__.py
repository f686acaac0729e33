"""Scene markup parser for SceneWriter."""

from __future__ import annotations

from .action import parse_action_lines
from .blocks import (
    Action,
    Blank,
    Block,
    Character,
    Dialogue,
    Parenthetical,
    SceneHeading,
)
from .dialogue import parse_dialogue_block
from .scene_parser import SceneContentParser
from .segmenter import MarkupSegmenter, Segment, SegmentKind

__all__ = [
    "Action",
    "Blank",
    "Block",
    "Character",
    "Dialogue",
    "MarkupSegmenter",
    "Parenthetical",
    "SceneContentParser",
    "SceneHeading",
    "Segment",
    "SegmentKind",
    "parse_action_lines",
    "parse_dialogue_block",
]
