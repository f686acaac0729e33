"""Serialize a laid-out screenplay to a Word document with python-docx."""

from __future__ import annotations

import io
import re
import zipfile
from datetime import date, datetime

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.section import WD_SECTION
from docx.enum.style import WD_STYLE_TYPE
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.section import Section
from docx.shared import Pt, Twips
from docx.text.paragraph import Paragraph

from scenewriter.config import get_logger
from scenewriter.layout import (
    Alignment,
    HouseStyle,
    LayoutDocument,
    LayoutSection,
    PageNumberHeader,
    StyleId,
)

logger = get_logger(__name__)

_ALIGNMENTS = {
    Alignment.LEFT: WD_ALIGN_PARAGRAPH.LEFT,
    Alignment.CENTER: WD_ALIGN_PARAGRAPH.CENTER,
    Alignment.RIGHT: WD_ALIGN_PARAGRAPH.RIGHT,
}

# Characters XML 1.0 cannot carry; form feeds and vertical tabs become spaces
_XML_ILLEGAL = re.compile("[\x00-\x08\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
_XML_SPACES = re.compile("[\x0b\x0c]")


def xml_safe(text: str) -> str:
    """Drop characters a WordprocessingML part cannot hold."""
    return _XML_ILLEGAL.sub("", _XML_SPACES.sub(" ", text))


def pin_zip_timestamps(blob: bytes, stamp: date) -> bytes:
    """Rewrite a ZIP container with every entry dated ``stamp`` at midnight.

    python-docx stamps entries with the wall clock; pinning them makes the
    output a function of the document content and export date only.
    """
    date_time = (max(stamp.year, 1980), stamp.month, stamp.day, 0, 0, 0)
    out = io.BytesIO()
    with (
        zipfile.ZipFile(io.BytesIO(blob)) as source,
        zipfile.ZipFile(out, "w", compression=zipfile.ZIP_DEFLATED) as target,
    ):
        for info in source.infolist():
            pinned = zipfile.ZipInfo(info.filename, date_time=date_time)
            pinned.compress_type = zipfile.ZIP_DEFLATED
            pinned.external_attr = info.external_attr
            target.writestr(pinned, source.read(info.filename))
    return out.getvalue()


class DocxWriter:
    """Render a ``LayoutDocument`` into DOCX bytes."""

    def __init__(self, description: str = "") -> None:
        """Initialize the writer.

        Args:
            description: Text stored in the document's comments property
        """
        self.description = description

    def render(self, layout: LayoutDocument) -> bytes:
        """Build the Word document.

        Args:
            layout: Sections and paragraphs to write

        Returns:
            The .docx file content
        """
        doc = Document()
        self._apply_core_properties(doc, layout)
        self._define_styles(doc, layout.style)

        for index, section_layout in enumerate(layout.sections):
            if index == 0:
                section = doc.sections[0]
            else:
                section = doc.add_section(WD_SECTION.NEW_PAGE)
            self._apply_geometry(section, layout.style)
            if section_layout.page_number_start is not None:
                self._restart_page_numbers(section, section_layout.page_number_start)
            if section_layout.header is not None:
                self._add_page_number_header(section, section_layout.header)
            self._write_paragraphs(doc, section_layout)

        stream = io.BytesIO()
        doc.save(stream)
        blob = pin_zip_timestamps(stream.getvalue(), layout.export_date)
        logger.debug(
            "Rendered DOCX",
            sections=len(layout.sections),
            size=len(blob),
        )
        return blob

    def _apply_core_properties(self, doc: DocxDocument, layout: LayoutDocument) -> None:
        stamp = datetime(
            layout.export_date.year, layout.export_date.month, layout.export_date.day
        )
        props = doc.core_properties
        props.title = xml_safe(layout.title)
        props.author = xml_safe(layout.author or "")
        props.last_modified_by = xml_safe(layout.author or "")
        props.comments = xml_safe(self.description)
        props.created = stamp
        props.modified = stamp
        props.revision = 1

    def _define_styles(self, doc: DocxDocument, style: HouseStyle) -> None:
        normal = doc.styles["Normal"]
        normal.font.name = style.font_name
        normal.font.size = Pt(style.font_size_pt)
        # East Asian font slot, otherwise Word substitutes its own default
        normal.element.rPr.rFonts.set(qn("w:eastAsia"), style.font_name)
        normal.paragraph_format.space_before = Pt(0)
        normal.paragraph_format.space_after = Pt(0)
        normal.paragraph_format.line_spacing = 1.0

        for style_id in StyleId:
            spec = style.spec(style_id)
            paragraph_style = doc.styles.add_style(
                style_id.value, WD_STYLE_TYPE.PARAGRAPH
            )
            paragraph_style.base_style = normal
            paragraph_style.quick_style = True
            paragraph_style.font.name = style.font_name
            paragraph_style.font.size = Pt(style.font_size_pt)
            fmt = paragraph_style.paragraph_format
            fmt.left_indent = Twips(spec.left_indent)
            fmt.right_indent = Twips(spec.right_indent)
            fmt.alignment = _ALIGNMENTS[spec.alignment]
            fmt.space_before = Twips(spec.space_before)
            fmt.space_after = Twips(spec.space_after)

    def _apply_geometry(self, section: Section, style: HouseStyle) -> None:
        page = style.page
        section.page_width = Twips(page.width)
        section.page_height = Twips(page.height)
        section.top_margin = Twips(page.top_margin)
        section.bottom_margin = Twips(page.bottom_margin)
        section.left_margin = Twips(page.left_margin)
        section.right_margin = Twips(page.right_margin)
        section.header_distance = Twips(page.header_distance)

    def _restart_page_numbers(self, section: Section, start: int) -> None:
        sect_pr = section._sectPr
        for existing in sect_pr.findall(qn("w:pgNumType")):
            sect_pr.remove(existing)
        pg_num_type = OxmlElement("w:pgNumType")
        pg_num_type.set(qn("w:start"), str(start))
        # Schema order: pgNumType precedes cols
        cols = sect_pr.find(qn("w:cols"))
        if cols is not None:
            cols.addprevious(pg_num_type)
        else:
            sect_pr.append(pg_num_type)

    def _add_page_number_header(self, section: Section, header: PageNumberHeader) -> None:
        section.header.is_linked_to_previous = False
        paragraph = section.header.paragraphs[0]
        paragraph.alignment = WD_ALIGN_PARAGRAPH.RIGHT
        self._add_page_field(paragraph)
        paragraph.add_run(xml_safe(header.suffix))

    def _add_page_field(self, paragraph: Paragraph) -> None:
        def fld_char(kind: str) -> None:
            element = OxmlElement("w:fldChar")
            element.set(qn("w:fldCharType"), kind)
            paragraph.add_run()._r.append(element)

        fld_char("begin")
        instr = OxmlElement("w:instrText")
        instr.set(qn("xml:space"), "preserve")
        instr.text = " PAGE "
        paragraph.add_run()._r.append(instr)
        fld_char("separate")
        paragraph.add_run("1")
        fld_char("end")

    def _write_paragraphs(self, doc: DocxDocument, section: LayoutSection) -> None:
        for layout_paragraph in section.paragraphs:
            paragraph = doc.add_paragraph(style=layout_paragraph.style.value)
            last = len(layout_paragraph.lines) - 1
            for index, line in enumerate(layout_paragraph.lines):
                run = paragraph.add_run(xml_safe(line))
                if index < last:
                    run.add_break()
