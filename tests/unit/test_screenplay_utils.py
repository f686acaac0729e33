"""Unit tests for screenplay utilities."""

import pytest

from scenewriter.models import LocationTag, TimeOfDay
from scenewriter.utils import ScreenplayUtils


class TestFormatSceneHeading:
    """Test cases for slug line formatting."""

    def test_basic_heading(self):
        """Tags and title combine into a slug line."""
        heading = ScreenplayUtils.format_scene_heading(
            LocationTag.EXT, "Parking Lot", TimeOfDay.NIGHT
        )
        assert heading == "EXT. PARKING LOT - NIGHT"

    def test_title_is_trimmed_and_upper_cased(self):
        """Title whitespace is removed."""
        assert (
            ScreenplayUtils.format_scene_heading("int", "  kitchen ", "day")
            == "INT. KITCHEN - DAY"
        )

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_missing_title(self, title):
        """Empty titles become UNTITLED."""
        assert (
            ScreenplayUtils.format_scene_heading("INT", title, "DAY")
            == "INT. UNTITLED - DAY"
        )

    def test_missing_tags_default(self):
        """Missing tags default to INT and DAY."""
        assert (
            ScreenplayUtils.format_scene_heading(None, "Office", None)
            == "INT. OFFICE - DAY"
        )


class TestScreenplayUtils:
    """Test cases for the remaining helpers."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("(smiles)", True),
            ("  (beat)  ", True),
            ("()", True),
            ("(smiles) and waves", False),
            ("Hello (there)", False),
            ("", False),
        ],
    )
    def test_is_parenthetical(self, line, expected):
        """Only fully parenthesised lines are directions."""
        assert ScreenplayUtils.is_parenthetical(line) is expected

    def test_group_by_blank_lines(self):
        """Each blank line is its own empty group."""
        groups = ScreenplayUtils.group_by_blank_lines(["a", "b", "", "", "c"])

        assert groups == [["a", "b"], [], [], ["c"]]

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("My Show! #1", "My_Show_1"),
            ("  spaced  out  ", "spaced_out"),
            ("!!!", ""),
            ("Café Noir", "Caf_Noir"),
        ],
    )
    def test_sanitize_filename_segment(self, text, expected):
        """Runs of non-alphanumerics collapse to one underscore."""
        assert ScreenplayUtils.sanitize_filename_segment(text) == expected

    def test_normalize_newlines(self):
        """CRLF and bare CR become LF."""
        assert ScreenplayUtils.normalize_newlines("a\r\nb\rc") == "a\nb\nc"
