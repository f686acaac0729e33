"""Screenplay layout: house style and block-to-paragraph mapping."""

from __future__ import annotations

from .engine import (
    LayoutDocument,
    LayoutEngine,
    LayoutParagraph,
    LayoutSection,
    PageNumberHeader,
)
from .style import (
    DEFAULT_HOUSE_STYLE,
    INCH,
    Alignment,
    HouseStyle,
    PageGeometry,
    ParagraphStyleSpec,
    StyleId,
    inches,
)

__all__ = [
    "DEFAULT_HOUSE_STYLE",
    "INCH",
    "Alignment",
    "HouseStyle",
    "LayoutDocument",
    "LayoutEngine",
    "LayoutParagraph",
    "LayoutSection",
    "PageGeometry",
    "PageNumberHeader",
    "ParagraphStyleSpec",
    "StyleId",
    "inches",
]
