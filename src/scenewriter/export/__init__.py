"""Screenplay export to Word documents."""

from __future__ import annotations

from .docx_writer import DocxWriter, pin_zip_timestamps, xml_safe
from .exporter import (
    ExportResult,
    RenderedScript,
    ScriptExporter,
    create_script_docx,
    write_atomic,
)
from .filename import build_filename

__all__ = [
    "DocxWriter",
    "ExportResult",
    "RenderedScript",
    "ScriptExporter",
    "build_filename",
    "create_script_docx",
    "pin_zip_timestamps",
    "write_atomic",
    "xml_safe",
]
