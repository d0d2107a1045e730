"""Resolve a ``WatermarkConfig`` into concrete ``WatermarkInstance`` values.

Every instance draws one 64-bit seed from the base random source, in instance
order. Each randomized attribute then gets its own generator seeded with
``seed + offset``; the offsets below are part of the reproducible output and
must not change without versioning.
"""
from __future__ import annotations

import random
from typing import List, Optional, Tuple

from stamplayout.core.logging import configure_logging
from stamplayout.models.color import RGBColor
from stamplayout.models.config import (
    DynamicScaleFontSize,
    FixedColor,
    FixedFontSize,
    FixedOrientation,
    FixedPosition,
    GridTemplate,
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
from stamplayout.models.geometry import BoundingBox, PageDimensions, Point
from stamplayout.models.layout import PageWatermarkLayout, WatermarkInstance
from stamplayout.services import colors, font_scaling

logger = configure_logging(__name__)

POSITION_SEED_OFFSET = 1000
ORIENTATION_SEED_OFFSET = 2000
FONT_SIZE_SEED_OFFSET = 3000
COLOR_SEED_OFFSET = 4000
PER_LETTER_SEED_OFFSET = colors.PER_LETTER_SEED_OFFSET

POSITION_MARGIN = 50.0
BOX_MARGIN = 10.0
CHAR_WIDTH_RATIO = 0.6
LINE_HEIGHT_RATIO = 1.2

DIAGONAL_MAX_POINTS = 10
BORDER_SPACING = 100.0


def _substream(seed: int, offset: int) -> random.Random:
    return random.Random(seed + offset)


def estimate_text_size(text: str, font_size: float) -> Tuple[float, float]:
    """Approximate rendered (width, height) of ``text`` without font metrics."""
    return len(text) * font_size * CHAR_WIDTH_RATIO, font_size * LINE_HEIGHT_RATIO


def calculate_bounding_box(
    position: Point,
    text: str,
    font_size: float,
    page_dimensions: PageDimensions,
) -> BoundingBox:
    width, height = (max(0.0, extent) for extent in estimate_text_size(text, font_size))

    def clamp(value: float, upper: float) -> float:
        return max(0.0, min(upper, value))

    return BoundingBox(
        top_left=Point(
            clamp(position.x - BOX_MARGIN, page_dimensions.width),
            clamp(position.y - BOX_MARGIN, page_dimensions.height),
        ),
        bottom_right=Point(
            clamp(position.x + width + BOX_MARGIN, page_dimensions.width),
            clamp(position.y + height + BOX_MARGIN, page_dimensions.height),
        ),
    )


# ----------------------------------------------------------------------
# Position
# ----------------------------------------------------------------------
def _spread(index: int, count: int, extent: float) -> float:
    """Coordinate of point ``index`` of ``count`` evenly spaced between the margins."""
    if count <= 1:
        return extent / 2
    step = (extent - 2 * POSITION_MARGIN) / (count - 1)
    return POSITION_MARGIN + index * step


def _border_points(page: PageDimensions) -> List[Point]:
    m = POSITION_MARGIN
    width, height = page.width, page.height
    across = int((width - 2 * m) / BORDER_SPACING)
    down = int((height - 2 * m - BORDER_SPACING) / BORDER_SPACING)

    top = [Point(m + i * BORDER_SPACING, height - m) for i in range(across + 1)]
    bottom = [Point(m + i * BORDER_SPACING, m) for i in range(across + 1)]
    left = [Point(m, height - m - i * BORDER_SPACING) for i in range(1, down + 1)]
    right = [Point(width - m, height - m - i * BORDER_SPACING) for i in range(1, down + 1)]
    return top + bottom + left + right


def template_position(template, index: int, quantity: int, page: PageDimensions) -> Point:
    m = POSITION_MARGIN
    width, height = page.width, page.height

    if isinstance(template, GridTemplate):
        rows, cols = max(1, template.rows), max(1, template.cols)
        col = index % cols
        row = (index // cols) % rows
        # Row 0 is the top row of the page.
        return Point(_spread(col, cols, width), height - _spread(row, rows, height))

    anchors = {
        PositionTemplate.center: Point(width / 2, height / 2),
        PositionTemplate.top_left: Point(m, height - m),
        PositionTemplate.top_right: Point(width - m, height - m),
        PositionTemplate.bottom_left: Point(m, m),
        PositionTemplate.bottom_right: Point(width - m, m),
        PositionTemplate.top_center: Point(width / 2, height - m),
        PositionTemplate.bottom_center: Point(width / 2, m),
        PositionTemplate.left_center: Point(m, height / 2),
        PositionTemplate.right_center: Point(width - m, height / 2),
    }
    if template in anchors:
        return anchors[template]

    if template == PositionTemplate.four_corners:
        corners = (
            anchors[PositionTemplate.top_left],
            anchors[PositionTemplate.top_right],
            anchors[PositionTemplate.bottom_left],
            anchors[PositionTemplate.bottom_right],
        )
        return corners[index % len(corners)]

    if template == PositionTemplate.diagonal:
        count = max(1, min(quantity, DIAGONAL_MAX_POINTS))
        step = index % count
        return Point(_spread(step, count, width), _spread(step, count, height))

    if template == PositionTemplate.border:
        points = _border_points(page)
        if not points:
            return anchors[PositionTemplate.center]
        return points[index % len(points)]

    raise TypeError(f"Unsupported position template: {template!r}")


def resolve_position(config: WatermarkConfig, page: PageDimensions, index: int, seed: int) -> Point:
    position = config.position
    if isinstance(position, FixedPosition):
        return Point(position.x, position.y)
    if isinstance(position, RandomPosition):
        rng = _substream(seed, POSITION_SEED_OFFSET)
        return Point(
            POSITION_MARGIN + rng.random() * (page.width - 2 * POSITION_MARGIN),
            POSITION_MARGIN + rng.random() * (page.height - 2 * POSITION_MARGIN),
        )
    if isinstance(position, TemplatePosition):
        return template_position(position.template, index, config.quantity, page)
    raise TypeError(f"Unsupported position config: {position!r}")


# ----------------------------------------------------------------------
# Orientation, font size, color
# ----------------------------------------------------------------------
def resolve_angle(config: WatermarkConfig, seed: int) -> float:
    orientation = config.orientation
    if isinstance(orientation, FixedOrientation):
        return orientation.angle
    if isinstance(orientation, RandomOrientation):
        return _substream(seed, ORIENTATION_SEED_OFFSET).random() * 360.0
    if isinstance(orientation, PresetOrientation):
        return orientation.preset.angle
    raise TypeError(f"Unsupported orientation config: {orientation!r}")


def resolve_font_size(config: WatermarkConfig, page: PageDimensions, seed: int) -> float:
    font_size = config.font_size
    if isinstance(font_size, FixedFontSize):
        return font_size.size
    if isinstance(font_size, RandomFontSize):
        rng = _substream(seed, FONT_SIZE_SEED_OFFSET)
        return font_size.min + rng.random() * (font_size.max - font_size.min)
    if isinstance(font_size, DynamicScaleFontSize):
        return font_scaling.apply_dynamic_scaling(font_size.base_size, font_size.scale_factor, page)
    if isinstance(font_size, RecommendedFontSize):
        return font_scaling.get_recommended_size(page, font_size.document_type)
    raise TypeError(f"Unsupported font size config: {font_size!r}")


def resolve_color(config: WatermarkConfig, index: int, seed: int) -> RGBColor:
    color = config.color
    if isinstance(color, FixedColor):
        return color.color
    if isinstance(color, PaletteColor):
        return colors.palette_color(color.palette, index)
    if isinstance(color, RandomPerLetterColor):
        # Representative color only; the drawer re-derives one color per character.
        return colors.random_color(_substream(seed, COLOR_SEED_OFFSET))
    raise TypeError(f"Unsupported color config: {color!r}")


# ----------------------------------------------------------------------
# Entry points
# ----------------------------------------------------------------------
def generate_instances_with_seeds(
    page_dimensions: PageDimensions,
    config: WatermarkConfig,
    rng: Optional[random.Random] = None,
) -> List[Tuple[WatermarkInstance, int]]:
    """Resolve ``config`` into ``(instance, seed)`` pairs.

    The seed is returned alongside each instance so a drawer can rebuild the
    per-letter color stream for it.

    Args:
        page_dimensions: Size of the page the stamps are laid out on.
        config: The declarative watermark request.
        rng: Base random source. Pass a seeded ``random.Random`` for reproducible
            output; never share one instance between concurrent calls.
    """
    rng = rng or random.Random()
    results: List[Tuple[WatermarkInstance, int]] = []

    for index in range(max(0, config.quantity)):
        seed = rng.getrandbits(64)

        position = resolve_position(config, page_dimensions, index, seed)
        angle = resolve_angle(config, seed)
        font_size = resolve_font_size(config, page_dimensions, seed)
        color = resolve_color(config, index, seed)

        instance = WatermarkInstance(
            text=config.text,
            position=position,
            angle=angle,
            font_size=font_size,
            color=color,
            bounding_box=calculate_bounding_box(position, config.text, font_size, page_dimensions),
        )
        results.append((instance, seed))

    logger.debug(
        "Generated %d watermark instances for a %.1f x %.1f page",
        len(results),
        page_dimensions.width,
        page_dimensions.height,
    )
    return results


def generate_instances(
    page_dimensions: PageDimensions,
    config: WatermarkConfig,
    rng: Optional[random.Random] = None,
) -> List[WatermarkInstance]:
    return [instance for instance, _ in generate_instances_with_seeds(page_dimensions, config, rng)]


def preview_layout(
    page_dimensions: PageDimensions,
    config: WatermarkConfig,
    page_number: int = 1,
    rng: Optional[random.Random] = None,
) -> PageWatermarkLayout:
    return PageWatermarkLayout(
        page_number=page_number,
        page_dimensions=page_dimensions,
        watermarks=tuple(generate_instances(page_dimensions, config, rng)),
    )
