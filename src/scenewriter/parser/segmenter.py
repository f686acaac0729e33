"""Split raw scene text into action and dialogue-block segments."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from scenewriter.utils import ScreenplayUtils


class SegmentKind(str, Enum):
    """Kinds of raw segments."""

    ACTION = "action"
    DIALOGUE_BLOCK = "dialogue_block"


class ScanState(str, Enum):
    """States of the markup scanner."""

    IN_ACTION = "in_action"
    IN_DIALOGUE = "in_dialogue"


@dataclass
class Segment:
    """A contiguous run of source lines of one kind.

    ``cue`` is only set for dialogue blocks and holds the trimmed name from
    the ``@:`` line; ``lines`` never contains the marker lines themselves.
    """

    kind: SegmentKind
    lines: list[str] = field(default_factory=list)
    cue: str | None = None


class MarkupSegmenter:
    """Two-state scanner over the lines of one scene.

    Transitions:
      IN_ACTION   --"@:name"--> IN_DIALOGUE
      IN_DIALOGUE --":@"------> IN_ACTION
      IN_DIALOGUE --"@:name"--> IN_DIALOGUE (previous block closed)
      any         --EOF-------> done (open block closed)
    A ":@" line seen IN_ACTION is plain action text.
    """

    CUE_PATTERN = re.compile(r"^@:(.*)$")
    END_PATTERN = re.compile(r"^:@\s*$")

    def segment(self, content: str) -> list[Segment]:
        """Segment scene text.

        Args:
            content: Raw scene text, possibly containing dialogue markup

        Returns:
            Segments in source order
        """
        segments: list[Segment] = []
        state = ScanState.IN_ACTION
        current: Segment | None = None

        for line in ScreenplayUtils.normalize_newlines(content).split("\n"):
            cue_match = self.CUE_PATTERN.match(line)

            if cue_match:
                if current is not None:
                    segments.append(current)
                current = Segment(
                    kind=SegmentKind.DIALOGUE_BLOCK, cue=cue_match.group(1).strip()
                )
                state = ScanState.IN_DIALOGUE
            elif state is ScanState.IN_DIALOGUE and self.END_PATTERN.match(line):
                if current is not None:
                    segments.append(current)
                current = None
                state = ScanState.IN_ACTION
            elif state is ScanState.IN_DIALOGUE:
                if current is not None:
                    current.lines.append(line)
            else:
                if current is None:
                    current = Segment(kind=SegmentKind.ACTION)
                current.lines.append(line)

        if current is not None:
            segments.append(current)

        return segments
