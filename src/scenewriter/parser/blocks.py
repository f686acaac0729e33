"""Typed narrative blocks produced by the scene parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Action:
    """Action or description text; internal line breaks are kept."""

    text: str


@dataclass(frozen=True)
class SceneHeading:
    """Slug line derived from the scene's tags and title."""

    text: str


@dataclass(frozen=True)
class Character:
    """Character cue introducing a dialogue block."""

    name: str


@dataclass(frozen=True)
class Dialogue:
    """Spoken text; internal line breaks are kept."""

    text: str


@dataclass(frozen=True)
class Parenthetical:
    """Stage direction inside a dialogue block, parentheses included."""

    text: str


@dataclass(frozen=True)
class Blank:
    """Explicit vertical space carried over from the source."""


Block: TypeAlias = Action | SceneHeading | Character | Dialogue | Parenthetical | Blank
