from io import BytesIO

import pytest
from reportlab.pdfgen import canvas

from stamplayout.models import BoundingBox, FixedColor, Point, RandomPerLetterColor, WatermarkInstance
from stamplayout.models.color import BLUE
from stamplayout.services.colors import per_letter_colors
from stamplayout.services.renderer import (
    ReportlabPageDrawer,
    available_fonts,
    draw_instance,
    resolve_font_name,
)


class RecordingDrawer:
    def __init__(self):
        self.calls = []

    def begin_text(self):
        self.calls.append(("begin",))

    def set_font(self, name, size):
        self.calls.append(("font", name, size))

    def set_color(self, color):
        self.calls.append(("color", color))

    def set_transform(self, translate, rotate_degrees):
        self.calls.append(("transform", translate, rotate_degrees))

    def show_text(self, text):
        self.calls.append(("show", text))

    def end_text(self):
        self.calls.append(("end",))


@pytest.fixture
def instance() -> WatermarkInstance:
    return WatermarkInstance(
        text="ABC",
        position=Point(100, 200),
        angle=30,
        font_size=18,
        color=BLUE,
        bounding_box=BoundingBox(Point(90, 190), Point(142.4, 231.6)),
    )


def test_single_color_draw_sequence(instance):
    drawer = RecordingDrawer()
    draw_instance(drawer, instance, FixedColor(BLUE), seed=1, font_name="Courier")

    assert drawer.calls == [
        ("begin",),
        ("font", "Courier", 18),
        ("transform", Point(100, 200), 30),
        ("color", BLUE),
        ("show", "ABC"),
        ("end",),
    ]


def test_per_letter_draw_colors_each_character(instance):
    drawer = RecordingDrawer()
    draw_instance(drawer, instance, RandomPerLetterColor(), seed=42)

    shown = [call[1] for call in drawer.calls if call[0] == "show"]
    colors_used = [call[1] for call in drawer.calls if call[0] == "color"]

    assert shown == ["A", "B", "C"]
    assert colors_used == per_letter_colors("ABC", 42)
    assert drawer.calls[0] == ("begin",)
    assert drawer.calls[-1] == ("end",)


def test_per_letter_redraw_is_identical(instance):
    first, second = RecordingDrawer(), RecordingDrawer()
    draw_instance(first, instance, RandomPerLetterColor(), seed=7)
    draw_instance(second, instance, RandomPerLetterColor(), seed=7)
    assert first.calls == second.calls


def test_reportlab_drawer_requires_begin_text():
    drawer = ReportlabPageDrawer(canvas.Canvas(BytesIO()))
    with pytest.raises(RuntimeError):
        drawer.show_text("nope")


def test_reportlab_drawer_renders_text(instance):
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=(612, 792))
    draw_instance(ReportlabPageDrawer(c), instance, FixedColor(BLUE), seed=1)
    c.save()

    assert buffer.getvalue().startswith(b"%PDF")


def test_font_lookup():
    assert "Helvetica-Bold" in available_fonts()
    assert resolve_font_name("times-bold") == "Times-Bold"
    assert resolve_font_name("Comic Sans") == "Helvetica"
