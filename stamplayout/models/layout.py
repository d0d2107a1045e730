from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from stamplayout.core.errors import InvalidConfiguration

from .color import RGBColor
from .geometry import BoundingBox, PageDimensions, Point


@dataclass(frozen=True)
class WatermarkInstance:
    """A fully resolved stamp, ready to be drawn."""

    text: str
    position: Point
    angle: float
    font_size: float
    color: RGBColor
    bounding_box: BoundingBox

    def to_card(self) -> dict:
        box = self.bounding_box
        return {
            "text": self.text,
            "position": {"x": self.position.x, "y": self.position.y},
            "angle": self.angle,
            "font_size": self.font_size,
            "color": self.color.hex,
            "bounding_box": {
                "x0": box.top_left.x,
                "y0": box.top_left.y,
                "x1": box.bottom_right.x,
                "y1": box.bottom_right.y,
            },
        }


@dataclass(frozen=True)
class PageWatermarkLayout:
    page_number: int
    page_dimensions: PageDimensions
    watermarks: Tuple[WatermarkInstance, ...]

    def to_card(self) -> dict:
        return {
            "page_number": self.page_number,
            "page": {"width": self.page_dimensions.width, "height": self.page_dimensions.height},
            "watermarks": [instance.to_card() for instance in self.watermarks],
        }


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    overlaps: List[Tuple[int, int]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise InvalidConfiguration(self.errors)

    def to_card(self) -> dict:
        return {
            "valid": self.is_valid,
            "errors": list(self.errors),
            "overlaps": [list(pair) for pair in self.overlaps],
            "warnings": list(self.warnings),
        }


@dataclass
class ConfigurationSummary:
    watermark_text: str
    position_summary: str
    orientation_summary: str
    font_size_summary: str
    color_summary: str
    quantity_summary: str
    estimated_processing_time: int
    warnings: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
