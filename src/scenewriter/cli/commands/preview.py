"""Preview the parsed screenplay blocks of a bundle."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from scenewriter.assembly import DocumentAssembler
from scenewriter.cli.commands.export import (
    AuthorOption,
    BundleArgument,
    ConfigOption,
    DateOption,
    EpisodeOption,
    JsonOption,
    SeasonOption,
    TitleOption,
    build_request,
)
from scenewriter.cli.formatters import BlockTableFormatter, JsonFormatter
from scenewriter.cli.utils.cli_handler import CLIHandler
from scenewriter.config import get_settings_for_cli

console = Console()


def preview_command(
    bundle: BundleArgument,
    season: SeasonOption = None,
    episode: EpisodeOption = None,
    author: AuthorOption = None,
    title: TitleOption = None,
    export_date: DateOption = None,
    scene_filter: Annotated[
        str | None,
        typer.Option("--scene", help="Only show the scene with this id"),
    ] = None,
    config: ConfigOption = None,
    json_output: JsonOption = False,
) -> None:
    """Show the cover page and block sequence an export would produce."""
    handler = CLIHandler(console)
    formatter = BlockTableFormatter()

    try:
        settings = get_settings_for_cli(config_file=config)
        request = build_request(bundle, season, episode, author, title, export_date)
        if scene_filter is not None:
            request.scenes = [s for s in request.scenes if s.id == scene_filter]
        script = DocumentAssembler(settings).assemble(request)
    except Exception as e:
        handler.handle_error(e, json_output)

    if json_output:
        print(JsonFormatter().format(formatter.to_dict(script)))
        return

    cover = script.cover
    console.print(cover.title, style="bold", markup=False)
    for line in (cover.season_line, cover.episode_line):
        if line:
            console.print(line, markup=False)
    console.print(f"Written by {cover.author} - {cover.date_line}\n", markup=False)
    if not script.blocks:
        console.print("[yellow]No scenes to export.[/yellow]")
        return
    console.print(formatter.table(script))
