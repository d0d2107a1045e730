from __future__ import annotations

from stamplayout.models.config import (
    CustomPalette,
    DynamicScaleFontSize,
    FixedColor,
    FixedFontSize,
    FixedOrientation,
    FixedPosition,
    GridTemplate,
    PaletteColor,
    PresetOrientation,
    RandomFontSize,
    RandomOrientation,
    RandomPerLetterColor,
    RandomPosition,
    RecommendedFontSize,
    TemplatePosition,
    WatermarkConfig,
)
from stamplayout.models.layout import ConfigurationSummary

HIGH_QUANTITY = 50
SMALL_FONT_SIZE = 12


def describe_position(config: WatermarkConfig) -> str:
    position = config.position
    if isinstance(position, FixedPosition):
        return f"Fixed position ({position.x}, {position.y})"
    if isinstance(position, RandomPosition):
        return "Random positioning"
    if isinstance(position, TemplatePosition):
        template = position.template
        if isinstance(template, GridTemplate):
            return f"Template: grid {template.rows}x{template.cols}"
        return f"Template: {template.value}"
    raise TypeError(f"Unsupported position config: {position!r}")


def describe_orientation(config: WatermarkConfig) -> str:
    orientation = config.orientation
    if isinstance(orientation, FixedOrientation):
        return f"Fixed angle: {orientation.angle}°"
    if isinstance(orientation, RandomOrientation):
        return "Random rotation"
    if isinstance(orientation, PresetOrientation):
        return f"Preset: {orientation.preset.value} ({orientation.preset.angle}°)"
    raise TypeError(f"Unsupported orientation config: {orientation!r}")


def describe_font_size(config: WatermarkConfig) -> str:
    font_size = config.font_size
    if isinstance(font_size, FixedFontSize):
        return f"Fixed size: {font_size.size}pt"
    if isinstance(font_size, RandomFontSize):
        return f"Random size: {font_size.min}pt - {font_size.max}pt"
    if isinstance(font_size, DynamicScaleFontSize):
        return f"Dynamic scaling: {font_size.base_size}pt × {font_size.scale_factor}"
    if isinstance(font_size, RecommendedFontSize):
        return f"Recommended for {font_size.document_type.value}"
    raise TypeError(f"Unsupported font size config: {font_size!r}")


def describe_color(config: WatermarkConfig) -> str:
    color = config.color
    if isinstance(color, FixedColor):
        c = color.color
        return f"Fixed color: RGB({c.red}, {c.green}, {c.blue})"
    if isinstance(color, RandomPerLetterColor):
        return "Random colors per letter"
    if isinstance(color, PaletteColor):
        if isinstance(color.palette, CustomPalette):
            return f"Color palette: custom ({len(color.palette.colors)} colors)"
        return f"Color palette: {color.palette.value}"
    raise TypeError(f"Unsupported color config: {color!r}")


def summarize_config(config: WatermarkConfig) -> ConfigurationSummary:
    quantity = config.quantity
    complexity = quantity * (2 if isinstance(config.color, RandomPerLetterColor) else 1)

    warnings = []
    if quantity > HIGH_QUANTITY:
        warnings.append("High watermark quantity may impact performance")
    if quantity > 1 and isinstance(config.position, FixedPosition):
        warnings.append(
            "Multiple watermarks with fixed position will overlap. "
            "Consider using random or template positioning."
        )

    recommendations = []
    if isinstance(config.font_size, FixedFontSize) and config.font_size.size < SMALL_FONT_SIZE:
        recommendations.append("Consider larger font size for better visibility")

    return ConfigurationSummary(
        watermark_text=config.text,
        position_summary=describe_position(config),
        orientation_summary=describe_orientation(config),
        font_size_summary=describe_font_size(config),
        color_summary=describe_color(config),
        quantity_summary=f"{quantity} watermark{'s' if quantity > 1 else ''}",
        estimated_processing_time=max(1, complexity // 10),
        warnings=warnings,
        recommendations=recommendations,
    )
