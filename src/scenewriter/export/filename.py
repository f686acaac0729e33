"""Deterministic screenplay file names."""

from __future__ import annotations

from datetime import date

from scenewriter.models import EpisodeLike, SeasonLike
from scenewriter.utils import ScreenplayUtils

DEFAULT_EXTENSION = "docx"
FALLBACK_TITLE = "Project"


def build_filename(
    project_title: str,
    season: SeasonLike | None,
    episode: EpisodeLike | None,
    export_date: date,
    extension: str = DEFAULT_EXTENSION,
) -> str:
    """Build ``script_<title>[_S<NN>][_E<NN>]_<YYYY-MM-DD>.<ext>``.

    Args:
        project_title: Project title, sanitized into the name
        season: Season context; its 1-based number is zero-padded
        episode: Episode context; its 1-based number is zero-padded
        export_date: Date stamped into the name
        extension: File extension without the dot

    Returns:
        The file name
    """
    parts = [
        "script",
        ScreenplayUtils.sanitize_filename_segment(project_title or FALLBACK_TITLE),
        f"S{season.order + 1:02d}" if season else "",
        f"E{episode.order + 1:02d}" if episode else "",
        export_date.isoformat(),
    ]
    return "_".join(part for part in parts if part) + f".{extension}"
