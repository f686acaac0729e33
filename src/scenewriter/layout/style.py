"""House style: every physical constant of the screenplay layout.

All lengths are twips (twentieths of a point, 1440 per inch), the unit Word
stores indents and margins in, so values survive serialization exactly.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from scenewriter.config import SceneWriterSettings

INCH = 1440
POINT = 20


def inches(value: float) -> int:
    """Convert inches to whole twips."""
    return round(value * INCH)


class StyleId(str, Enum):
    """Paragraph style identifiers, also used as Word style names."""

    COVER_TITLE = "CoverTitle"
    COVER_BY = "CoverBy"
    SCENE_SLUG = "SceneSlug"
    ACTION = "Action"
    CHARACTER = "Character"
    DIALOGUE = "Dialogue"
    PARENTHETICAL = "Parenthetical"


class Alignment(str, Enum):
    """Horizontal paragraph alignment."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class ParagraphStyleSpec(BaseModel):
    """Indents, alignment, and spacing of one paragraph style."""

    model_config = ConfigDict(frozen=True)

    left_indent: int = 0
    right_indent: int = 0
    alignment: Alignment = Alignment.LEFT
    space_before: int = 0
    space_after: int = 0


class PageGeometry(BaseModel):
    """Page size and margins."""

    model_config = ConfigDict(frozen=True)

    width: int = inches(8.5)
    height: int = inches(11)
    top_margin: int = INCH
    bottom_margin: int = INCH
    left_margin: int = inches(1.5)
    right_margin: int = INCH
    header_distance: int = inches(0.5)


def _default_paragraph_styles() -> dict[StyleId, ParagraphStyleSpec]:
    line = 12 * POINT
    return {
        StyleId.COVER_TITLE: ParagraphStyleSpec(
            alignment=Alignment.CENTER, space_after=line
        ),
        StyleId.COVER_BY: ParagraphStyleSpec(alignment=Alignment.CENTER),
        StyleId.SCENE_SLUG: ParagraphStyleSpec(space_after=line),
        StyleId.ACTION: ParagraphStyleSpec(),
        StyleId.CHARACTER: ParagraphStyleSpec(left_indent=inches(2.7)),
        StyleId.DIALOGUE: ParagraphStyleSpec(
            left_indent=inches(1.4), right_indent=inches(1.0)
        ),
        StyleId.PARENTHETICAL: ParagraphStyleSpec(
            left_indent=inches(2.1), right_indent=inches(1.0)
        ),
    }


class HouseStyle(BaseModel):
    """Immutable layout configuration handed to the layout engine and writer.

    Substitute a different instance to change the house style without
    touching parsing or assembly.
    """

    model_config = ConfigDict(frozen=True)

    font_name: str = "Courier New"
    font_size_pt: int = 12
    page: PageGeometry = Field(default_factory=PageGeometry)
    paragraphs: dict[StyleId, ParagraphStyleSpec] = Field(
        default_factory=_default_paragraph_styles
    )
    cover_top_blank_lines: int = 4
    page_number_suffix: str = "."

    def spec(self, style_id: StyleId) -> ParagraphStyleSpec:
        """Paragraph spec for a style, defaulting to flush left."""
        return self.paragraphs.get(style_id, ParagraphStyleSpec())

    @classmethod
    def from_settings(cls, settings: SceneWriterSettings) -> HouseStyle:
        """Default house style with the configured font."""
        return cls(font_name=settings.font_name, font_size_pt=settings.font_size_pt)


DEFAULT_HOUSE_STYLE = HouseStyle()
