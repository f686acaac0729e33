"""SceneWriter command-line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from scenewriter import __version__
from scenewriter.cli.commands import export_command, preview_command
from scenewriter.cli.formatters.json_formatter import JsonFormatter
from scenewriter.cli.utils.cli_handler import CLIHandler
from scenewriter.config import (
    SceneWriterSettings,
    configure_logging,
    get_logger,
    get_settings_for_cli,
    set_settings,
)

DESCRIPTION = "Turn marked-up scene drafts into formatted screenplays"

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="scenewriter",
    help=DESCRIPTION,
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="export")(export_command)
app.command(name="preview")(preview_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the SceneWriter version."""
    if json_output:
        info = {
            "name": "SceneWriter",
            "version": __version__,
            "description": DESCRIPTION,
        }
        print(JsonFormatter().format(info))
        return
    console.print(f"SceneWriter v{__version__}")


def _logging_overrides(verbose: bool, debug: bool) -> dict[str, Any]:
    if debug:
        return {"log_level": "DEBUG", "debug": True}
    if verbose:
        return {"log_level": "INFO"}
    return {}


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML, TOML, or JSON configuration file",
            envvar="SCENEWRITER_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log at INFO level")
    ] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log at DEBUG level")] = False,
) -> None:
    """Apply global options before running a command."""
    try:
        if config:
            set_settings(SceneWriterSettings.from_multiple_sources([config]))
            logger.debug("Loaded configuration", config_file=str(config))
    except Exception as e:
        CLIHandler(console).handle_error(e)

    overrides = _logging_overrides(verbose, debug)
    if overrides:
        settings = get_settings_for_cli(cli_overrides=overrides)
        set_settings(settings)
        configure_logging(settings)
        logger.debug("Logging level raised", level=settings.log_level)


def main() -> None:
    """Run the CLI."""
    app()


if __name__ == "__main__":
    main()
