"""Screenplay-specific utility functions."""

from __future__ import annotations

import re

from scenewriter.models import LocationTag, TimeOfDay


class ScreenplayUtils:
    """Utility functions for screenplay processing."""

    NON_ALNUM_PATTERN = re.compile(r"[^A-Za-z0-9]+")
    UNTITLED = "UNTITLED"

    @staticmethod
    def normalize_newlines(text: str) -> str:
        """Convert CRLF and bare CR line endings to LF."""
        return text.replace("\r\n", "\n").replace("\r", "\n")

    @staticmethod
    def group_by_blank_lines(lines: list[str]) -> list[list[str]]:
        """Split lines into paragraph groups.

        A run of non-blank lines becomes one group. Every blank line, including
        each of several consecutive ones, becomes its own empty group so that
        vertical spacing from the source survives.

        Args:
            lines: Source lines without line terminators

        Returns:
            Groups in source order; empty lists mark blank lines
        """
        groups: list[list[str]] = []
        current: list[str] = []
        for line in lines:
            if line.strip():
                current.append(line)
                continue
            if current:
                groups.append(current)
                current = []
            groups.append([])
        if current:
            groups.append(current)
        return groups

    @staticmethod
    def is_parenthetical(line: str) -> bool:
        """Check whether a dialogue line is a parenthetical direction.

        Args:
            line: Dialogue line (surrounding whitespace is ignored)

        Returns:
            True when the trimmed line starts with "(" and ends with ")"
        """
        trimmed = line.strip()
        return trimmed.startswith("(") and trimmed.endswith(")")

    @staticmethod
    def format_scene_heading(
        loc: LocationTag | str | None,
        title: str | None,
        tod: TimeOfDay | str | None,
    ) -> str:
        """Build a slug line such as "INT. KITCHEN - DAY".

        Args:
            loc: Location tag, defaults to INT
            title: Scene title, "UNTITLED" when empty
            tod: Time-of-day tag, defaults to DAY

        Returns:
            Upper-cased scene heading
        """
        location = ScreenplayUtils._tag_value(loc, LocationTag.INT.value)
        time_of_day = ScreenplayUtils._tag_value(tod, TimeOfDay.DAY.value)
        heading_title = (title or "").strip().upper() or ScreenplayUtils.UNTITLED
        return f"{location}. {heading_title} - {time_of_day}"

    @staticmethod
    def sanitize_filename_segment(text: str) -> str:
        """Collapse every run of non-alphanumerics to "_" and trim underscores.

        Args:
            text: Free text such as a project title

        Returns:
            Filesystem-safe segment, possibly empty
        """
        return ScreenplayUtils.NON_ALNUM_PATTERN.sub("_", text).strip("_")

    @staticmethod
    def _tag_value(tag: LocationTag | TimeOfDay | str | None, default: str) -> str:
        if tag is None:
            return default
        value = tag.value if isinstance(tag, LocationTag | TimeOfDay) else tag
        return value.strip().upper() or default
