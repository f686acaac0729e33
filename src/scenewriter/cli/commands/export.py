"""Export a project bundle as a screenplay document."""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scenewriter.assembly import BundleSelector, load_bundle
from scenewriter.cli.utils.cli_handler import CLIHandler
from scenewriter.config import get_logger, get_settings_for_cli
from scenewriter.export import ScriptExporter
from scenewriter.models import ExportRequest

logger = get_logger(__name__)
console = Console()

BundleArgument = Annotated[
    Path,
    typer.Argument(
        help="Bundle JSON (or scene list JSON) exported from the scene board",
        exists=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]
SeasonOption = Annotated[
    str | None,
    typer.Option("--season", "-s", help="Season id or 1-based number"),
]
EpisodeOption = Annotated[
    str | None,
    typer.Option("--episode", "-e", help="Episode id or 1-based number"),
]
AuthorOption = Annotated[
    str | None,
    typer.Option("--author", "-a", help="Author name for the cover page"),
]
TitleOption = Annotated[
    str | None,
    typer.Option("--title", "-t", help="Override the project title"),
]
DateOption = Annotated[
    datetime | None,
    typer.Option(
        "--date",
        formats=["%Y-%m-%d"],
        help="Export date printed on the cover and in the file name",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration file (YAML, TOML, or JSON)",
    ),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


def build_request(
    bundle_path: Path,
    season: str | None,
    episode: str | None,
    author: str | None,
    title: str | None,
    export_date: datetime | None,
) -> ExportRequest:
    """Load a bundle and build the export request for the selected scenes."""
    selector = BundleSelector(load_bundle(bundle_path))
    request = selector.build_request(
        season_ref=season,
        episode_ref=episode,
        author_name=author,
        title=title,
    )
    if export_date is not None:
        request.export_date = export_date.date()
    return request


def export_command(
    bundle: BundleArgument,
    season: SeasonOption = None,
    episode: EpisodeOption = None,
    author: AuthorOption = None,
    title: TitleOption = None,
    export_date: DateOption = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory to save the document in (default: settings output_dir)",
            file_okay=False,
        ),
    ] = None,
    config: ConfigOption = None,
    json_output: JsonOption = False,
) -> None:
    """Export scenes as a formatted screenplay (.docx).

    Scenes are ordered by their timeline position, each introduced by a slug
    line, and preceded by a cover page. For grouped projects pick one season
    and/or episode per export.
    """
    handler = CLIHandler(console)

    try:
        settings = get_settings_for_cli(
            config_file=config,
            cli_overrides={"output_dir": output_dir},
        )
        request = build_request(bundle, season, episode, author, title, export_date)
        result = asyncio.run(ScriptExporter(settings).export(request))
    except Exception as e:
        handler.handle_error(e, json_output)

    handler.handle_success(
        f"Exported {result.scene_count} scene"
        f"{'s' if result.scene_count != 1 else ''} to {result.path}",
        data={
            "filename": result.filename,
            "path": str(result.path),
            "size": result.size,
            "scenes": result.scene_count,
            "export_date": result.export_date.isoformat(),
        },
        json_output=json_output,
    )
