"""Load project bundles and select the scenes of one export."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from scenewriter.config import get_logger
from scenewriter.exceptions import BundleError, ValidationError
from scenewriter.models import (
    BundleScene,
    Episode,
    ExportRequest,
    GroupingMode,
    Project,
    ProjectBundle,
    SceneLike,
    Season,
)

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME = "Project"


def parse_bundle(data: Any, default_name: str = DEFAULT_PROJECT_NAME) -> ProjectBundle:
    """Validate decoded bundle JSON.

    A bare list is treated as a scene list exported on its own and wrapped in
    an ungrouped project.

    Args:
        data: Decoded JSON
        default_name: Project name used for bare scene lists

    Returns:
        Validated bundle

    Raises:
        BundleError: If the data does not have a bundle shape
    """
    if isinstance(data, list):
        data = {
            "project": {"id": "scenes", "name": default_name},
            "scenes": data,
        }
    if not isinstance(data, dict):
        raise BundleError(
            message="Invalid bundle shape",
            hint="Expected a bundle object or a list of scenes",
            details={"type": type(data).__name__},
        )
    try:
        return ProjectBundle.model_validate(data)
    except PydanticValidationError as e:
        raise BundleError(
            message="Invalid bundle shape",
            hint="Check the project, seasons, episodes and scenes entries",
            details={"errors": e.error_count(), "first_error": str(e.errors()[0])},
        ) from e


def load_bundle(path: Path) -> ProjectBundle:
    """Read a bundle JSON file.

    Args:
        path: Bundle or scene-list JSON file

    Returns:
        Validated bundle

    Raises:
        BundleError: If the file cannot be read or is not a valid bundle
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BundleError(
            message=f"Cannot read bundle file: {path}",
            details={"file": str(path), "error": str(e)},
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BundleError(
            message="Invalid JSON",
            hint="The bundle file must be the JSON written by a bundle export",
            details={"file": str(path), "line": e.lineno, "column": e.colno},
        ) from e

    bundle = parse_bundle(data, default_name=path.stem)
    logger.debug(
        "Loaded bundle",
        file=str(path),
        project=bundle.project.name,
        scenes=len(bundle.scenes),
    )
    return bundle


class BundleSelector:
    """Pick the scenes of one export from a bundle according to its grouping."""

    def __init__(self, bundle: ProjectBundle) -> None:
        """Initialize the selector.

        Args:
            bundle: Project bundle to select from
        """
        self.bundle = bundle

    @property
    def project(self) -> Project:
        """The bundle's project header."""
        return self.bundle.project

    @property
    def grouping(self) -> GroupingMode:
        """The project's grouping mode."""
        return self.bundle.project.grouping

    def find_season(self, ref: str) -> Season:
        """Resolve a season by id or 1-based number."""
        return self._find(self.bundle.seasons, ref, "season")

    def find_episode(self, ref: str) -> Episode:
        """Resolve an episode by id or 1-based number."""
        return self._find(self.bundle.episodes, ref, "episode")

    def _find(self, items: list[Any], ref: str, kind: str) -> Any:
        for item in items:
            if item.id == ref:
                return item
        if ref.isdigit():
            for item in sorted(items, key=lambda i: i.order):
                if item.order + 1 == int(ref):
                    return item
        raise ValidationError(
            message=f"Unknown {kind}: {ref}",
            hint=f"Use the {kind} id or its 1-based number",
            details={"available": [f"{i.order + 1}: {i.title}" for i in items]},
        )

    def _check_refs(self, season_ref: str | None, episode_ref: str | None) -> None:
        uses_seasons = self.grouping in (
            GroupingMode.SEASONS,
            GroupingMode.SEASONS_EPISODES,
        )
        uses_episodes = self.grouping in (
            GroupingMode.EPISODES,
            GroupingMode.SEASONS_EPISODES,
        )
        if season_ref is not None and not uses_seasons:
            raise ValidationError(
                message="This project is not grouped by season",
                details={"grouping": self.grouping.value},
            )
        if episode_ref is not None and not uses_episodes:
            raise ValidationError(
                message="This project is not grouped by episode",
                details={"grouping": self.grouping.value},
            )

    def select_scenes(
        self, season: Season | None, episode: Episode | None
    ) -> list[BundleScene]:
        """Filter the bundle's scenes to a season and/or episode."""
        scenes = self.bundle.scenes
        if season is not None:
            scenes = [s for s in scenes if s.season_id == season.id]
        if episode is not None:
            scenes = [s for s in scenes if s.episode_id == episode.id]
        return scenes

    def build_request(
        self,
        season_ref: str | None = None,
        episode_ref: str | None = None,
        author_name: str | None = None,
        title: str | None = None,
    ) -> ExportRequest:
        """Build the export request for one season/episode pairing.

        Args:
            season_ref: Season id or 1-based number
            episode_ref: Episode id or 1-based number
            author_name: Byline for the cover page
            title: Overrides the project name

        Returns:
            Export request holding only the selected scenes

        Raises:
            ValidationError: If a reference is unknown, unused by the
                project's grouping, or the episode belongs to another season
        """
        self._check_refs(season_ref, episode_ref)

        season = self.find_season(season_ref) if season_ref is not None else None
        episode = self.find_episode(episode_ref) if episode_ref is not None else None

        if (
            season is not None
            and episode is not None
            and episode.season_id
            and episode.season_id != season.id
        ):
            raise ValidationError(
                message=f"Episode '{episode.title}' is not part of season "
                f"'{season.title}'",
                details={"episode": episode.id, "season": season.id},
            )

        scenes = self.select_scenes(season, episode)
        logger.info(
            "Selected scenes for export",
            project=self.project.name,
            grouping=self.grouping.value,
            season=season.id if season else None,
            episode=episode.id if episode else None,
            scenes=len(scenes),
        )

        return ExportRequest(
            project_title=title if title is not None else self.project.name,
            author_name=author_name,
            season=season,
            episode=episode,
            scenes=[SceneLike.model_validate(s.model_dump()) for s in scenes],
        )
