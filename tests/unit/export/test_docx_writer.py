"""Unit tests for the DOCX writer, read back with python-docx."""

import io
import zipfile
from datetime import date

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml.ns import qn
from docx.shared import Pt, Twips

from scenewriter.assembly import DocumentAssembler
from scenewriter.export import DocxWriter, pin_zip_timestamps, xml_safe
from scenewriter.layout import LayoutEngine, StyleId, inches
from scenewriter.models import ExportRequest, SceneLike


class TestDocxWriter:
    """Test cases for DocxWriter."""

    @pytest.fixture
    def layout(self, settings, sample_request):
        """Layout of the sample request."""
        script = DocumentAssembler(settings).assemble(sample_request)
        return LayoutEngine().layout(script)

    @pytest.fixture
    def blob(self, layout):
        """Rendered document bytes."""
        return DocxWriter(description="Test export").render(layout)

    @pytest.fixture
    def doc(self, blob):
        """Rendered document opened with python-docx."""
        return Document(io.BytesIO(blob))

    def test_styles_defined(self, doc):
        """Every house style exists with its indents."""
        styles = doc.styles

        for style_id in StyleId:
            assert styles[style_id.value] is not None
        assert styles["Character"].paragraph_format.left_indent == Twips(inches(2.7))
        assert styles["Dialogue"].paragraph_format.left_indent == Twips(inches(1.4))
        assert styles["Dialogue"].paragraph_format.right_indent == Twips(inches(1.0))
        assert styles["Parenthetical"].paragraph_format.left_indent == Twips(
            inches(2.1)
        )
        assert styles["CoverTitle"].paragraph_format.alignment == (
            WD_ALIGN_PARAGRAPH.CENTER
        )

    def test_font(self, doc):
        """The base font is fixed-width 12pt."""
        normal = doc.styles["Normal"]

        assert normal.font.name == "Courier New"
        assert normal.font.size == Pt(12)

    def test_two_sections(self, doc):
        """Cover and body are separate sections on letter paper."""
        assert len(doc.sections) == 2
        for section in doc.sections:
            assert section.page_width == Twips(12240)
            assert section.page_height == Twips(15840)
            assert section.left_margin == Twips(2160)
            assert section.right_margin == Twips(1440)

    def test_body_numbering_restarts(self, doc):
        """Only the body section restarts page numbers at 1."""
        cover, body = doc.sections

        assert cover._sectPr.find(qn("w:pgNumType")) is None
        pg_num_type = body._sectPr.find(qn("w:pgNumType"))
        assert pg_num_type is not None
        assert pg_num_type.get(qn("w:start")) == "1"

    def test_body_header_has_page_field(self, doc):
        """The body header shows the page number followed by a period."""
        cover, body = doc.sections

        assert cover.header.is_linked_to_previous is True
        assert body.header.is_linked_to_previous is False
        paragraph = body.header.paragraphs[0]
        assert paragraph.alignment == WD_ALIGN_PARAGRAPH.RIGHT
        assert "PAGE" in paragraph._p.xml
        assert "fldChar" in paragraph._p.xml
        assert paragraph.text.endswith(".")

    def test_paragraph_content(self, doc):
        """Body paragraphs carry their styles and text in order."""
        body = [
            (p.style.name, p.text)
            for p in doc.paragraphs
            if p.style.name not in ("CoverTitle", "CoverBy", "Normal")
        ]

        assert body[:7] == [
            ("SceneSlug", "INT. KITCHEN - DAY"),
            ("Action", "He enters."),
            ("Action", ""),
            ("Character", "JOE"),
            ("Dialogue", "Hi."),
            ("Parenthetical", "(smiles)"),
            ("Dialogue", "Bye."),
        ]
        assert ("SceneSlug", "EXT. ROOFTOP - NIGHT") in body

    def test_cover_paragraphs(self, doc):
        """The cover shows title, byline, author, and date."""
        cover_text = [
            p.text
            for p in doc.paragraphs
            if p.style.name in ("CoverTitle", "CoverBy") and p.text
        ]

        assert cover_text == [
            "MY SHOW! #1",
            "Written by",
            "Dana Writer",
            "March 15, 2024",
        ]

    def test_line_breaks(self, settings):
        """Multi-line text becomes one paragraph with breaks."""
        engine = LayoutEngine()
        script = DocumentAssembler(settings).assemble(
            _request_with_content("Line one.\nLine two.")
        )
        rendered = Document(io.BytesIO(DocxWriter().render(engine.layout(script))))

        texts = [p.text for p in rendered.paragraphs if p.style.name == "Action"]
        assert "Line one.\nLine two." in texts

    def test_core_properties(self, doc):
        """Title, author, description, and dates are stored."""
        props = doc.core_properties

        assert props.title == "My Show! #1"
        assert props.author == "Dana Writer"
        assert props.comments == "Test export"
        assert props.created.date() == date(2024, 3, 15)

    def test_rendering_is_deterministic(self, layout, blob):
        """Rendering the same layout twice gives identical bytes."""
        assert DocxWriter(description="Test export").render(layout) == blob

    def test_zip_entries_pinned(self, blob):
        """Every archive entry carries the export date."""
        with zipfile.ZipFile(io.BytesIO(blob)) as archive:
            stamps = {info.date_time for info in archive.infolist()}

        assert stamps == {(2024, 3, 15, 0, 0, 0)}

    def test_control_characters(self, settings):
        """Pasted control characters are cleaned instead of failing the render."""
        script = DocumentAssembler(settings).assemble(
            _request_with_content("He\x0center.\x0b\x00\n@:JOE\nHi\x1b\x0c\n:@")
        )
        blob = DocxWriter().render(LayoutEngine().layout(script))
        rendered = Document(io.BytesIO(blob))

        texts = {p.style.name: p.text for p in rendered.paragraphs}
        assert texts["Action"] == "He enter. "
        assert texts["Character"] == "JOE"
        assert texts["Dialogue"] == "Hi"


def _request_with_content(content):
    return ExportRequest(
        project_title="Breaks",
        export_date=date(2024, 3, 15),
        scenes=[SceneLike(id="a", title="Room", content=content)],
    )


class TestPinZipTimestamps:
    """Test cases for pin_zip_timestamps."""

    def test_contents_preserved(self):
        """Entries keep their names and bytes."""
        source = io.BytesIO()
        with zipfile.ZipFile(source, "w") as archive:
            archive.writestr("a.xml", "<a/>")
            archive.writestr("b/c.xml", "<c/>")

        pinned = pin_zip_timestamps(source.getvalue(), date(2024, 1, 2))

        with zipfile.ZipFile(io.BytesIO(pinned)) as archive:
            assert archive.namelist() == ["a.xml", "b/c.xml"]
            assert archive.read("b/c.xml") == b"<c/>"
            assert archive.getinfo("a.xml").date_time == (2024, 1, 2, 0, 0, 0)

    def test_dates_before_zip_epoch(self):
        """Years before 1980 are clamped to the ZIP epoch."""
        source = io.BytesIO()
        with zipfile.ZipFile(source, "w") as archive:
            archive.writestr("a.xml", "<a/>")

        pinned = pin_zip_timestamps(source.getvalue(), date(1970, 5, 6))

        with zipfile.ZipFile(io.BytesIO(pinned)) as archive:
            assert archive.getinfo("a.xml").date_time == (1980, 5, 6, 0, 0, 0)


class TestXmlSafe:
    """Test cases for xml_safe."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("plain text", "plain text"),
            ("tab\tkept", "tab\tkept"),
            ("page\x0cbreak", "page break"),
            ("vertical\x0btab", "vertical tab"),
            ("nul\x00 and esc\x1b", "nul and esc"),
            ("bell\x07", "bell"),
            ("ünïcode ✓", "ünïcode ✓"),
        ],
    )
    def test_cleaning(self, text, expected):
        """Only characters outside XML 1.0 are touched."""
        assert xml_safe(text) == expected
