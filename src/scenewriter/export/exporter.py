"""Screenplay export: render, name, and save the document."""

from __future__ import annotations

import asyncio
import os
import tempfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from scenewriter.assembly import AssembledScript, DocumentAssembler
from scenewriter.config import SceneWriterSettings, get_logger, get_settings
from scenewriter.exceptions import ExportError
from scenewriter.export.docx_writer import DocxWriter
from scenewriter.export.filename import build_filename
from scenewriter.layout import HouseStyle, LayoutEngine
from scenewriter.models import ExportRequest

logger = get_logger(__name__)


@dataclass
class RenderedScript:
    """A rendered document that has not been saved yet."""

    filename: str
    content: bytes
    script: AssembledScript


@dataclass
class ExportResult:
    """Outcome of a saved export."""

    filename: str
    path: Path
    size: int
    scene_count: int
    export_date: date


class ScriptExporter:
    """Run the full pipeline for one export request."""

    def __init__(
        self,
        settings: SceneWriterSettings | None = None,
        style: HouseStyle | None = None,
    ) -> None:
        """Initialize the exporter.

        Args:
            settings: Settings; the global settings when omitted
            style: House style; derived from settings when omitted
        """
        self.settings = settings or get_settings()
        self.style = style or HouseStyle.from_settings(self.settings)
        self.assembler = DocumentAssembler(self.settings)
        self.layout_engine = LayoutEngine(self.style)
        self.writer = DocxWriter(description=self.settings.document_description)

    def render(self, request: ExportRequest) -> RenderedScript:
        """Assemble, lay out, and serialize a request without saving it.

        Args:
            request: Export request

        Returns:
            The document bytes and its file name

        Raises:
            ExportError: If serialization fails
        """
        export_date = request.export_date or date.today()
        script = self.assembler.assemble(request, export_date)
        layout = self.layout_engine.layout(script)
        filename = build_filename(
            request.project_title, request.season, request.episode, export_date
        )
        try:
            content = self.writer.render(layout)
        except Exception as e:
            logger.error("Failed to serialize screenplay", filename=filename)
            raise ExportError(
                message="Failed to serialize screenplay",
                filename=filename,
                original_error=e,
            ) from e
        return RenderedScript(filename=filename, content=content, script=script)

    async def export(
        self, request: ExportRequest, output_dir: Path | None = None
    ) -> ExportResult:
        """Render a request and save it under ``output_dir``.

        Serialization and the file write run in a worker thread. The file is
        written to a temporary name and moved into place, so a failure never
        leaves a partial document behind. Failures are not retried.

        Args:
            request: Export request
            output_dir: Target directory; settings ``output_dir`` when omitted

        Returns:
            Details of the saved file

        Raises:
            ExportError: If serialization or saving fails
        """
        target_dir = Path(output_dir or self.settings.output_dir)
        rendered = await asyncio.to_thread(self.render, request)
        path = target_dir / rendered.filename

        try:
            await asyncio.to_thread(write_atomic, path, rendered.content)
        except OSError as e:
            logger.error("Failed to save screenplay", path=str(path))
            raise ExportError(
                message=f"Failed to save screenplay to {target_dir}",
                filename=rendered.filename,
                original_error=e,
                hint="Check that the output directory exists and is writable",
            ) from e

        logger.info(
            "Exported screenplay",
            path=str(path),
            scenes=rendered.script.scene_count,
            size=len(rendered.content),
        )
        return ExportResult(
            filename=rendered.filename,
            path=path,
            size=len(rendered.content),
            scene_count=rendered.script.scene_count,
            export_date=rendered.script.export_date,
        )


def write_atomic(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path`` through a temporary file in the same directory."""
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


async def create_script_docx(
    request: ExportRequest,
    output_dir: Path | None = None,
    settings: SceneWriterSettings | None = None,
) -> ExportResult:
    """Export a screenplay document for ``request``.

    Args:
        request: Project title, author, season/episode context, and scenes
        output_dir: Target directory; settings ``output_dir`` when omitted
        settings: Settings; the global settings when omitted

    Returns:
        Details of the saved file
    """
    return await ScriptExporter(settings).export(request, output_dir)
