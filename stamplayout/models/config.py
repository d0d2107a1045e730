"""Declarative watermark configuration.

Each attribute of a stamp (position, orientation, font size, color) is described
by one of a closed set of variants. The generator dispatches on the variant type
and rejects anything outside the set.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

from .color import RGBColor

MAX_WATERMARK_QUANTITY = 100
MIN_FONT_SIZE = 8.0
MAX_FONT_SIZE = 144.0


def is_valid_angle(angle: float) -> bool:
    return 0.0 <= angle <= 360.0


def is_valid_font_size(size: float) -> bool:
    return MIN_FONT_SIZE <= size <= MAX_FONT_SIZE


def is_valid_quantity(quantity: int) -> bool:
    return 0 < quantity <= MAX_WATERMARK_QUANTITY


# ----------------------------------------------------------------------
# Position
# ----------------------------------------------------------------------
class PositionTemplate(str, Enum):
    center = "center"
    top_left = "top_left"
    top_right = "top_right"
    bottom_left = "bottom_left"
    bottom_right = "bottom_right"
    top_center = "top_center"
    bottom_center = "bottom_center"
    left_center = "left_center"
    right_center = "right_center"
    four_corners = "four_corners"
    diagonal = "diagonal"
    border = "border"


@dataclass(frozen=True)
class GridTemplate:
    rows: int
    cols: int


@dataclass(frozen=True)
class FixedPosition:
    x: float
    y: float


@dataclass(frozen=True)
class RandomPosition:
    pass


@dataclass(frozen=True)
class TemplatePosition:
    template: Union[PositionTemplate, GridTemplate]


PositionConfig = Union[FixedPosition, RandomPosition, TemplatePosition]


# ----------------------------------------------------------------------
# Orientation
# ----------------------------------------------------------------------
class OrientationPreset(str, Enum):
    horizontal = "horizontal"
    diagonal_up = "diagonal_up"
    vertical = "vertical"
    diagonal_down = "diagonal_down"
    upside_down = "upside_down"
    diagonal_up_reverse = "diagonal_up_reverse"
    vertical_reverse = "vertical_reverse"
    diagonal_down_reverse = "diagonal_down_reverse"

    @property
    def angle(self) -> float:
        return PRESET_ANGLES[self]


PRESET_ANGLES = {
    OrientationPreset.horizontal: 0.0,
    OrientationPreset.diagonal_up: 45.0,
    OrientationPreset.vertical: 90.0,
    OrientationPreset.diagonal_down: 135.0,
    OrientationPreset.upside_down: 180.0,
    OrientationPreset.diagonal_up_reverse: 225.0,
    OrientationPreset.vertical_reverse: 270.0,
    OrientationPreset.diagonal_down_reverse: 315.0,
}


@dataclass(frozen=True)
class FixedOrientation:
    angle: float


@dataclass(frozen=True)
class RandomOrientation:
    pass


@dataclass(frozen=True)
class PresetOrientation:
    preset: OrientationPreset


OrientationConfig = Union[FixedOrientation, RandomOrientation, PresetOrientation]


# ----------------------------------------------------------------------
# Font size
# ----------------------------------------------------------------------
class DocumentType(str, Enum):
    legal = "legal"
    academic = "academic"
    business = "business"
    certificate = "certificate"
    marketing = "marketing"
    technical = "technical"
    creative = "creative"


@dataclass(frozen=True)
class FixedFontSize:
    size: float


@dataclass(frozen=True)
class RandomFontSize:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min >= self.max:
            raise ValueError(f"Random font size range requires min < max, got {self.min} >= {self.max}")


@dataclass(frozen=True)
class DynamicScaleFontSize:
    base_size: float
    scale_factor: float


@dataclass(frozen=True)
class RecommendedFontSize:
    document_type: DocumentType


FontSizeConfig = Union[FixedFontSize, RandomFontSize, DynamicScaleFontSize, RecommendedFontSize]


# ----------------------------------------------------------------------
# Color
# ----------------------------------------------------------------------
class ColorPalette(str, Enum):
    professional = "professional"
    vibrant = "vibrant"
    pastel = "pastel"
    monochrome = "monochrome"
    warm = "warm"
    cool = "cool"
    earth = "earth"


@dataclass(frozen=True)
class CustomPalette:
    colors: Tuple[RGBColor, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but store a tuple so the palette stays hashable.
        object.__setattr__(self, "colors", tuple(self.colors))


@dataclass(frozen=True)
class FixedColor:
    color: RGBColor


@dataclass(frozen=True)
class RandomPerLetterColor:
    pass


@dataclass(frozen=True)
class PaletteColor:
    palette: Union[ColorPalette, CustomPalette]


ColorConfig = Union[FixedColor, RandomPerLetterColor, PaletteColor]


# ----------------------------------------------------------------------
# Full request
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class WatermarkConfig:
    """One declarative watermark request: ``quantity`` stamps of ``text``."""

    text: str
    position: PositionConfig = field(default_factory=RandomPosition)
    orientation: OrientationConfig = field(default_factory=lambda: FixedOrientation(45.0))
    font_size: FontSizeConfig = field(default_factory=lambda: FixedFontSize(24.0))
    color: ColorConfig = field(default_factory=lambda: FixedColor(RGBColor(128, 128, 128)))
    quantity: int = 1
