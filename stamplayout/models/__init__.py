from .color import RGBColor
from .config import (
    ColorPalette,
    CustomPalette,
    DocumentType,
    DynamicScaleFontSize,
    FixedColor,
    FixedFontSize,
    FixedOrientation,
    FixedPosition,
    GridTemplate,
    OrientationPreset,
    PaletteColor,
    PositionTemplate,
    PresetOrientation,
    RandomFontSize,
    RandomOrientation,
    RandomPerLetterColor,
    RandomPosition,
    RecommendedFontSize,
    TemplatePosition,
    WatermarkConfig,
)
from .geometry import BoundingBox, PageDimensions, Point
from .layout import ConfigurationSummary, PageWatermarkLayout, ValidationResult, WatermarkInstance
from .watermark import PageSize, WatermarkConfigPayload, WatermarkLayoutRequest

__all__ = [
    "BoundingBox",
    "ColorPalette",
    "ConfigurationSummary",
    "CustomPalette",
    "DocumentType",
    "DynamicScaleFontSize",
    "FixedColor",
    "FixedFontSize",
    "FixedOrientation",
    "FixedPosition",
    "GridTemplate",
    "OrientationPreset",
    "PageDimensions",
    "PageSize",
    "PageWatermarkLayout",
    "PaletteColor",
    "Point",
    "PositionTemplate",
    "PresetOrientation",
    "RGBColor",
    "RandomFontSize",
    "RandomOrientation",
    "RandomPerLetterColor",
    "RandomPosition",
    "RecommendedFontSize",
    "TemplatePosition",
    "ValidationResult",
    "WatermarkConfig",
    "WatermarkConfigPayload",
    "WatermarkInstance",
    "WatermarkLayoutRequest",
]
