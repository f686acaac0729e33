"""Unit tests for the dialogue markup segmenter."""

import pytest

from scenewriter.parser import MarkupSegmenter, SegmentKind


class TestMarkupSegmenter:
    """Test cases for MarkupSegmenter."""

    @pytest.fixture
    def segmenter(self):
        """Create a segmenter instance."""
        return MarkupSegmenter()

    def test_action_only(self, segmenter):
        """Text without markup is one action segment."""
        segments = segmenter.segment("Line one.\nLine two.")

        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.ACTION
        assert segments[0].lines == ["Line one.", "Line two."]
        assert segments[0].cue is None

    def test_action_then_dialogue(self, segmenter):
        """Markers split action from dialogue and are not kept as lines."""
        segments = segmenter.segment("He enters.\n\n@:JOE\nHi.\n:@")

        assert [s.kind for s in segments] == [
            SegmentKind.ACTION,
            SegmentKind.DIALOGUE_BLOCK,
        ]
        assert segments[0].lines == ["He enters.", ""]
        assert segments[1].cue == "JOE"
        assert segments[1].lines == ["Hi."]

    def test_cue_is_trimmed(self, segmenter):
        """Whitespace around the cue name is dropped."""
        segments = segmenter.segment("@:  Mary Ann  \nHello.\n:@")

        assert segments[0].cue == "Mary Ann"

    def test_unterminated_block_closes_at_end(self, segmenter):
        """A block without ':@' extends to the end of the scene."""
        segments = segmenter.segment("@:JOE\nHi.\nStill talking.")

        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.DIALOGUE_BLOCK
        assert segments[0].lines == ["Hi.", "Still talking."]

    def test_stray_end_marker_is_action(self, segmenter):
        """':@' outside a block is ordinary action text."""
        segments = segmenter.segment("Before.\n:@\nAfter.")

        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.ACTION
        assert segments[0].lines == ["Before.", ":@", "After."]

    def test_new_cue_closes_open_block(self, segmenter):
        """A second '@:' inside a block starts a new block."""
        segments = segmenter.segment("@:JOE\nHi.\n@:MARY\nHello.\n:@")

        assert [s.cue for s in segments] == ["JOE", "MARY"]
        assert segments[0].lines == ["Hi."]
        assert segments[1].lines == ["Hello."]

    def test_end_marker_tolerates_trailing_whitespace(self, segmenter):
        """':@' followed by spaces still closes the block."""
        segments = segmenter.segment("@:JOE\nHi.\n:@   \nLater.")

        assert [s.kind for s in segments] == [
            SegmentKind.DIALOGUE_BLOCK,
            SegmentKind.ACTION,
        ]
        assert segments[1].lines == ["Later."]

    def test_indented_markers_are_text(self, segmenter):
        """Markers must start the line."""
        segments = segmenter.segment("  @:JOE\nHi.")

        assert len(segments) == 1
        assert segments[0].kind is SegmentKind.ACTION

    def test_crlf_line_endings(self, segmenter):
        """Windows line endings segment like LF."""
        segments = segmenter.segment("He enters.\r\n@:JOE\r\nHi.\r\n:@")

        assert segments[0].lines == ["He enters."]
        assert segments[1].cue == "JOE"
        assert segments[1].lines == ["Hi."]

    def test_empty_block(self, segmenter):
        """A block with no lines is still a segment."""
        segments = segmenter.segment("@:JOE\n:@")

        assert len(segments) == 1
        assert segments[0].lines == []
