"""Map assembled blocks to styled paragraphs and page sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import assert_never

from scenewriter.assembly import AssembledScript, CoverPage
from scenewriter.assembly.assembler import WRITTEN_BY
from scenewriter.layout.style import DEFAULT_HOUSE_STYLE, HouseStyle, StyleId
from scenewriter.parser import (
    Action,
    Blank,
    Block,
    Character,
    Dialogue,
    Parenthetical,
    SceneHeading,
)


@dataclass(frozen=True)
class LayoutParagraph:
    """One paragraph: a style and its lines, joined by hard line breaks."""

    style: StyleId
    lines: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Rendered text with line breaks as newlines."""
        return "\n".join(self.lines)

    @classmethod
    def from_text(cls, style: StyleId, text: str) -> LayoutParagraph:
        """Build a paragraph, splitting ``text`` on newlines."""
        return cls(style=style, lines=tuple(text.split("\n")) if text else ())


@dataclass(frozen=True)
class PageNumberHeader:
    """Running header: current page number plus a suffix, right-aligned."""

    suffix: str = "."


@dataclass
class LayoutSection:
    """A run of pages sharing numbering and header settings."""

    paragraphs: list[LayoutParagraph] = field(default_factory=list)
    numbered: bool = False
    page_number_start: int | None = None
    header: PageNumberHeader | None = None


@dataclass
class LayoutDocument:
    """Ordered sections plus the document metadata the writer stores."""

    title: str
    author: str | None
    style: HouseStyle
    export_date: date
    sections: list[LayoutSection] = field(default_factory=list)

    @property
    def cover(self) -> LayoutSection:
        """The cover page section."""
        return self.sections[0]

    @property
    def body(self) -> LayoutSection:
        """The numbered scene section."""
        return self.sections[1]


class LayoutEngine:
    """Turn an assembled script into a two-section paragraph layout."""

    def __init__(self, style: HouseStyle | None = None) -> None:
        """Initialize the engine.

        Args:
            style: House style; the default screenplay style when omitted
        """
        self.style = style or DEFAULT_HOUSE_STYLE

    def paragraph_for(self, block: Block) -> LayoutParagraph:
        """Map one block to its paragraph."""
        if isinstance(block, SceneHeading):
            return LayoutParagraph.from_text(StyleId.SCENE_SLUG, block.text)
        if isinstance(block, Action):
            return LayoutParagraph.from_text(StyleId.ACTION, block.text)
        if isinstance(block, Character):
            return LayoutParagraph.from_text(StyleId.CHARACTER, block.name)
        if isinstance(block, Dialogue):
            return LayoutParagraph.from_text(StyleId.DIALOGUE, block.text)
        if isinstance(block, Parenthetical):
            return LayoutParagraph.from_text(StyleId.PARENTHETICAL, block.text)
        if isinstance(block, Blank):
            return LayoutParagraph(StyleId.ACTION)
        assert_never(block)

    def cover_section(self, cover: CoverPage) -> LayoutSection:
        """Lay out the cover page."""
        blank = LayoutParagraph(StyleId.COVER_BY)
        paragraphs = [blank] * self.style.cover_top_blank_lines
        paragraphs.append(LayoutParagraph.from_text(StyleId.COVER_TITLE, cover.title))
        if cover.season_line:
            paragraphs.append(
                LayoutParagraph.from_text(StyleId.COVER_BY, cover.season_line)
            )
        if cover.episode_line:
            paragraphs.append(
                LayoutParagraph.from_text(StyleId.COVER_BY, cover.episode_line)
            )
        paragraphs.extend(
            [
                blank,
                LayoutParagraph.from_text(StyleId.COVER_BY, WRITTEN_BY),
                LayoutParagraph.from_text(StyleId.COVER_BY, cover.author),
                blank,
                LayoutParagraph.from_text(StyleId.COVER_BY, cover.date_line),
            ]
        )
        return LayoutSection(paragraphs=paragraphs)

    def body_section(self, blocks: list[Block]) -> LayoutSection:
        """Lay out the scene pages; numbering restarts at 1."""
        return LayoutSection(
            paragraphs=[self.paragraph_for(block) for block in blocks],
            numbered=True,
            page_number_start=1,
            header=PageNumberHeader(suffix=self.style.page_number_suffix),
        )

    def layout(self, script: AssembledScript) -> LayoutDocument:
        """Lay out a whole script.

        Args:
            script: Assembled cover and body blocks

        Returns:
            Document with the cover section followed by the scene section
        """
        return LayoutDocument(
            title=script.project_title,
            author=script.author_name,
            style=self.style,
            export_date=script.export_date,
            sections=[
                self.cover_section(script.cover),
                self.body_section(script.blocks),
            ],
        )
