"""SceneWriter data models.

Input models describe what the surrounding application hands to the export
pipeline: scenes with their slug tags and timeline position, optional
season/episode context, and the project bundle those come from. Fields are
read from the camelCase JSON written by the scene board (``projectTitle``,
``seasonId``) or by their Python names, and unknown keys are ignored so whole
bundles can be validated as-is.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class LocationTag(str, Enum):
    """Interior or exterior slug prefix."""

    INT = "INT"
    EXT = "EXT"


class TimeOfDay(str, Enum):
    """Slug time-of-day suffix."""

    DAY = "DAY"
    NIGHT = "NIGHT"


class GroupingMode(str, Enum):
    """How a project's scenes are organised for sectioned exports."""

    NONE = "none"
    EPISODES = "episodes"
    SEASONS = "seasons"
    SEASONS_EPISODES = "seasons-episodes"


class _InputModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, extra="ignore", populate_by_name=True
    )

    @field_validator("id", mode="before", check_fields=False)
    @classmethod
    def id_to_str(cls, v: Any) -> Any:
        """Accept numeric identifiers from hand-written bundles."""
        return str(v) if isinstance(v, int) and not isinstance(v, bool) else v

    @field_validator("title", "content", "name", mode="before", check_fields=False)
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Treat null text fields as empty strings."""
        return "" if v is None else v


class SceneLike(_InputModel):
    """A scene as supplied by the caller."""

    id: str
    title: str = ""
    content: str = ""
    loc: LocationTag = LocationTag.INT
    tod: TimeOfDay = TimeOfDay.DAY
    order: int = 0

    @field_validator("loc", mode="before")
    @classmethod
    def normalize_loc(cls, v: Any) -> Any:
        """Upper-case the location tag, defaulting to INT."""
        if v is None:
            return LocationTag.INT
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("tod", mode="before")
    @classmethod
    def normalize_tod(cls, v: Any) -> Any:
        """Upper-case the time-of-day tag, defaulting to DAY."""
        if v is None:
            return TimeOfDay.DAY
        return v.strip().upper() if isinstance(v, str) else v


class SeasonLike(_InputModel):
    """Season context for cover labels and file names."""

    title: str = ""
    order: int = 0


class EpisodeLike(_InputModel):
    """Episode context for cover labels and file names."""

    title: str = ""
    order: int = 0


class ExportRequest(_InputModel):
    """Everything one screenplay export needs."""

    project_title: str = ""
    author_name: str | None = None
    season: SeasonLike | None = None
    episode: EpisodeLike | None = None
    scenes: list[SceneLike] = Field(default_factory=list)
    export_date: date | None = None


# Bundle models


class Project(_InputModel):
    """Project header of a bundle."""

    id: str
    name: str = ""
    grouping: GroupingMode = GroupingMode.NONE


class Season(SeasonLike):
    """A season stored in a bundle."""

    id: str


class Episode(EpisodeLike):
    """An episode stored in a bundle."""

    id: str
    season_id: str | None = None


class BundleScene(SceneLike):
    """A scene stored in a bundle, with its optional grouping references."""

    season_id: str | None = None
    episode_id: str | None = None


class ProjectBundle(_InputModel):
    """A project's persisted collection of seasons, episodes, and scenes."""

    project: Project
    seasons: list[Season] = Field(default_factory=list)
    episodes: list[Episode] = Field(default_factory=list)
    scenes: list[BundleScene] = Field(default_factory=list)


__all__ = [
    "BundleScene",
    "Episode",
    "EpisodeLike",
    "ExportRequest",
    "GroupingMode",
    "LocationTag",
    "Project",
    "ProjectBundle",
    "Season",
    "SeasonLike",
    "SceneLike",
    "TimeOfDay",
]
