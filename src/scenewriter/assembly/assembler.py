"""Assemble ordered scenes and a cover page into one screenplay."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from scenewriter.config import SceneWriterSettings, get_logger, get_settings
from scenewriter.models import EpisodeLike, ExportRequest, SceneLike, SeasonLike
from scenewriter.parser import Block, SceneContentParser, SceneHeading
from scenewriter.utils import ScreenplayUtils

logger = get_logger(__name__)

UNTITLED_SEASON = "(Untitled Season)"
UNTITLED_EPISODE = "(Untitled Episode)"
WRITTEN_BY = "Written by"


@dataclass
class CoverPage:
    """Text shown on the unnumbered cover page."""

    title: str
    author: str
    date_line: str
    season_line: str | None = None
    episode_line: str | None = None


@dataclass
class AssembledScript:
    """Cover page plus the body blocks of every scene, in order."""

    project_title: str
    author_name: str | None
    export_date: date
    cover: CoverPage
    blocks: list[Block] = field(default_factory=list)
    scene_count: int = 0


def order_scenes(scenes: list[SceneLike]) -> list[SceneLike]:
    """Sort scenes by ``order``; ties keep their input order."""
    return sorted(scenes, key=lambda scene: scene.order)


def season_label(season: SeasonLike) -> str:
    """Cover label such as "Season 2: Homecoming" (1-based)."""
    return f"Season {season.order + 1}: {season.title.strip() or UNTITLED_SEASON}"


def episode_label(episode: EpisodeLike) -> str:
    """Cover label such as "Episode 3: Pilot" (1-based)."""
    return f"Episode {episode.order + 1}: {episode.title.strip() or UNTITLED_EPISODE}"


class DocumentAssembler:
    """Order scenes, insert slug lines, and build the cover description.

    The assembler is grouping-agnostic: callers choose which scenes belong to
    an export (for example one season/episode pairing) and the assembler only
    orders and slugs what it receives.
    """

    def __init__(self, settings: SceneWriterSettings | None = None) -> None:
        """Initialize the assembler.

        Args:
            settings: Settings supplying cover placeholders and date format
        """
        self.settings = settings or get_settings()
        self.parser = SceneContentParser()

    def build_cover(self, request: ExportRequest, export_date: date) -> CoverPage:
        """Build the cover description for a request.

        Args:
            request: Export request
            export_date: Date printed on the cover

        Returns:
            Cover page text
        """
        author = (request.author_name or "").strip() or self.settings.author_placeholder
        return CoverPage(
            title=request.project_title.strip().upper() or ScreenplayUtils.UNTITLED,
            author=author,
            date_line=export_date.strftime(self.settings.cover_date_format),
            season_line=season_label(request.season) if request.season else None,
            episode_line=episode_label(request.episode) if request.episode else None,
        )

    def scene_blocks(self, scene: SceneLike) -> list[Block]:
        """Slug line followed by the scene's parsed content."""
        heading = ScreenplayUtils.format_scene_heading(scene.loc, scene.title, scene.tod)
        return [SceneHeading(text=heading), *self.parser.parse(scene.content)]

    def assemble(
        self, request: ExportRequest, export_date: date | None = None
    ) -> AssembledScript:
        """Assemble a request into a cover page and ordered body blocks.

        Args:
            request: Export request
            export_date: Overrides ``request.export_date``; defaults to today

        Returns:
            The assembled script
        """
        export_date = export_date or request.export_date or date.today()
        ordered = order_scenes(request.scenes)

        blocks: list[Block] = []
        for scene in ordered:
            blocks.extend(self.scene_blocks(scene))

        logger.debug(
            "Assembled screenplay",
            project_title=request.project_title,
            scenes=len(ordered),
            blocks=len(blocks),
        )

        return AssembledScript(
            project_title=request.project_title,
            author_name=request.author_name,
            export_date=export_date,
            cover=self.build_cover(request, export_date),
            blocks=blocks,
            scene_count=len(ordered),
        )
