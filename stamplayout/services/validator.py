"""Configuration and layout checks.

Validation is a separate phase from generation: the generator assumes its input
has already passed ``validate_config``. All checks collect every problem instead
of stopping at the first one.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple, Union

from stamplayout.core.errors import InvalidConfiguration
from stamplayout.core.logging import configure_logging
from stamplayout.models.config import (
    MAX_FONT_SIZE,
    MAX_WATERMARK_QUANTITY,
    MIN_FONT_SIZE,
    CustomPalette,
    DynamicScaleFontSize,
    FixedFontSize,
    FixedOrientation,
    FixedPosition,
    GridTemplate,
    PaletteColor,
    RandomFontSize,
    TemplatePosition,
    WatermarkConfig,
    is_valid_angle,
    is_valid_font_size,
    is_valid_quantity,
)
from stamplayout.models.geometry import PageDimensions, Point
from stamplayout.models.layout import ValidationResult, WatermarkInstance
from stamplayout.services.generator import CHAR_WIDTH_RATIO, estimate_text_size, generate_instances

logger = configure_logging(__name__)

# Above this many overlapping pairs the layout gets an explicit warning.
OVERLAP_WARNING_THRESHOLD = 10


def _position_errors(point: Point, page: PageDimensions, font_size: float, text: str) -> List[str]:
    text_width, text_height = estimate_text_size(text, font_size)
    errors: List[str] = []

    if point.x < 0 or point.x > page.width:
        errors.append(f"X position {point.x} is outside page width (0-{page.width})")
    if point.y < 0 or point.y > page.height:
        errors.append(f"Y position {point.y} is outside page height (0-{page.height})")
    if point.x + text_width > page.width:
        errors.append("Watermark text extends beyond page width")
    if point.y + text_height > page.height:
        errors.append("Watermark text extends beyond page height")

    return errors


def validate_position(point: Point, page_dimensions: PageDimensions, font_size: float, text: str) -> None:
    """Raise ``InvalidConfiguration`` listing every way the stamp leaves the page."""
    errors = _position_errors(point, page_dimensions, font_size, text)
    if errors:
        raise InvalidConfiguration(errors)


def detect_overlaps(instances: Sequence[WatermarkInstance]) -> List[Tuple[int, int]]:
    overlaps: List[Tuple[int, int]] = []
    for i in range(len(instances)):
        for j in range(i + 1, len(instances)):
            if instances[i].bounding_box.overlaps(instances[j].bounding_box):
                overlaps.append((i, j))
    return overlaps


def calculate_optimal_font_size(
    page_dimensions: PageDimensions,
    text: str,
    max_width_ratio: float = 0.8,
) -> float:
    """Largest font size at which ``text`` spans at most ``max_width_ratio`` of the page width."""
    if not text:
        return MAX_FONT_SIZE
    max_width = page_dimensions.width * max_width_ratio
    optimal = max_width / (len(text) * CHAR_WIDTH_RATIO)
    return max(MIN_FONT_SIZE, min(MAX_FONT_SIZE, optimal))


def validate_config(config: WatermarkConfig, page_dimensions: PageDimensions) -> List[str]:
    errors: List[str] = []

    if not config.text or not config.text.strip():
        errors.append("Watermark text must not be empty")

    if not is_valid_quantity(config.quantity):
        errors.append(f"Watermark quantity must be between 1 and {MAX_WATERMARK_QUANTITY}")

    position = config.position
    if isinstance(position, FixedPosition):
        if not (0 <= position.x <= page_dimensions.width and 0 <= position.y <= page_dimensions.height):
            errors.append(
                f"Fixed position ({position.x}, {position.y}) is outside page dimensions "
                f"({page_dimensions.width} x {page_dimensions.height})"
            )
    elif isinstance(position, TemplatePosition) and isinstance(position.template, GridTemplate):
        if position.template.rows < 1 or position.template.cols < 1:
            errors.append("Grid template requires at least one row and one column")

    orientation = config.orientation
    if isinstance(orientation, FixedOrientation) and not is_valid_angle(orientation.angle):
        errors.append(f"Angle must be between 0 and 360 degrees, got {orientation.angle}")

    font_size = config.font_size
    if isinstance(font_size, FixedFontSize):
        if not is_valid_font_size(font_size.size):
            errors.append(f"Font size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}")
    elif isinstance(font_size, RandomFontSize):
        if not is_valid_font_size(font_size.min) or not is_valid_font_size(font_size.max):
            errors.append(f"Font size range must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}")
        if font_size.min >= font_size.max:
            errors.append("Minimum font size must be less than maximum font size")
    elif isinstance(font_size, DynamicScaleFontSize):
        if not is_valid_font_size(font_size.base_size):
            errors.append(f"Base font size must be between {MIN_FONT_SIZE} and {MAX_FONT_SIZE}")
        if font_size.scale_factor <= 0:
            errors.append("Scale factor must be positive")

    color = config.color
    if isinstance(color, PaletteColor) and isinstance(color.palette, CustomPalette):
        if not color.palette.colors:
            errors.append("Custom palette must contain at least one color")

    return errors


def _overlap_warnings(overlaps: List[Tuple[int, int]]) -> List[str]:
    if len(overlaps) > OVERLAP_WARNING_THRESHOLD:
        return [f"{len(overlaps)} overlapping watermark pairs; consider fewer or smaller watermarks"]
    return []


def validate_layout(
    page_dimensions: PageDimensions,
    config_or_instances: Union[WatermarkConfig, Sequence[WatermarkInstance]],
    rng: Optional[random.Random] = None,
) -> ValidationResult:
    """Check a configuration or an already generated list of instances.

    Overlaps are reported as warnings and never make the result invalid. ``rng``
    is only used to generate a layout from a configuration.
    """
    result = ValidationResult()

    if isinstance(config_or_instances, WatermarkConfig):
        result.errors.extend(validate_config(config_or_instances, page_dimensions))
        if result.errors:
            logger.warning("Rejected watermark configuration: %s", result.errors)
            return result
        instances = generate_instances(page_dimensions, config_or_instances, rng)
    else:
        instances = list(config_or_instances)
        for number, instance in enumerate(instances, start=1):
            for error in _position_errors(instance.position, page_dimensions, instance.font_size, instance.text):
                result.errors.append(f"Watermark {number}: {error}")

    result.overlaps.extend(detect_overlaps(instances))
    result.warnings.extend(_overlap_warnings(result.overlaps))
    if result.overlaps:
        logger.warning("Watermark layout has %d overlapping pairs", len(result.overlaps))
    return result
