from __future__ import annotations

import math
from typing import List, Optional

from reportlab.pdfgen import canvas
from reportlab.pdfgen.textobject import PDFTextObject

from stamplayout.models.color import RGBColor
from stamplayout.models.config import ColorConfig, RandomPerLetterColor
from stamplayout.models.geometry import Point
from stamplayout.models.layout import WatermarkInstance
from stamplayout.services.colors import per_letter_colors

STANDARD_FONTS: List[str] = [
    "Helvetica",
    "Helvetica-Bold",
    "Helvetica-Oblique",
    "Helvetica-BoldOblique",
    "Times-Roman",
    "Times-Bold",
    "Times-Italic",
    "Times-BoldItalic",
    "Courier",
    "Courier-Bold",
    "Courier-Oblique",
    "Courier-BoldOblique",
]


def available_fonts() -> List[str]:
    return list(STANDARD_FONTS)


def resolve_font_name(name: str) -> str:
    """Match ``name`` case-insensitively against the standard fonts, defaulting to Helvetica."""
    lookup = {font.lower(): font for font in STANDARD_FONTS}
    return lookup.get(name.lower(), "Helvetica")


class ReportlabPageDrawer:
    """Draws text runs on a reportlab canvas through a small begin/show/end protocol."""

    def __init__(self, canvas_: canvas.Canvas) -> None:
        self.canvas = canvas_
        self._text: Optional[PDFTextObject] = None

    def _current(self) -> PDFTextObject:
        if self._text is None:
            raise RuntimeError("begin_text() must be called before drawing text")
        return self._text

    def begin_text(self) -> None:
        self._text = self.canvas.beginText()

    def set_font(self, name: str, size: float) -> None:
        self._current().setFont(name, size)

    def set_color(self, color: RGBColor) -> None:
        self._current().setFillColorRGB(*color.unit)

    def set_transform(self, translate: Point, rotate_degrees: float) -> None:
        radians = math.radians(rotate_degrees)
        cos, sin = math.cos(radians), math.sin(radians)
        self._current().setTextTransform(cos, sin, -sin, cos, translate.x, translate.y)

    def show_text(self, text: str) -> None:
        self._current().textOut(text)

    def end_text(self) -> None:
        self.canvas.drawText(self._current())
        self._text = None


def draw_instance(
    drawer: ReportlabPageDrawer,
    instance: WatermarkInstance,
    color_config: ColorConfig,
    seed: int,
    font_name: str = "Helvetica-Bold",
) -> None:
    """Render one resolved stamp.

    With per-letter coloring every character gets its own color, rebuilt from the
    instance seed so repeated draws of the same instance look the same.
    """
    drawer.begin_text()
    drawer.set_font(font_name, instance.font_size)
    drawer.set_transform(instance.position, instance.angle)

    if isinstance(color_config, RandomPerLetterColor):
        for char, color in zip(instance.text, per_letter_colors(instance.text, seed)):
            drawer.set_color(color)
            drawer.show_text(char)
    else:
        drawer.set_color(instance.color)
        drawer.show_text(instance.text)

    drawer.end_text()
