"""Palettes, random colors and WCAG contrast helpers."""
from __future__ import annotations

import random
from typing import Dict, List, Sequence, Tuple, Union

from stamplayout.models.color import BLACK, RGBColor
from stamplayout.models.config import ColorPalette, CustomPalette

# Added to a watermark seed to build the per-character color stream.
PER_LETTER_SEED_OFFSET = 5000

WCAG_AA_RATIO = 4.5
ACCESSIBLE_SHIFT = 100

PALETTES: Dict[ColorPalette, Tuple[RGBColor, ...]] = {
    ColorPalette.professional: (
        RGBColor(47, 79, 79),     # dark slate gray
        RGBColor(25, 25, 112),    # midnight blue
        RGBColor(105, 105, 105),  # dim gray
        RGBColor(72, 61, 139),    # dark slate blue
        RGBColor(47, 79, 79),
    ),
    ColorPalette.vibrant: (
        RGBColor(255, 69, 0),
        RGBColor(50, 205, 50),
        RGBColor(30, 144, 255),
        RGBColor(255, 20, 147),
        RGBColor(255, 215, 0),
    ),
    ColorPalette.pastel: (
        RGBColor(255, 182, 193),
        RGBColor(173, 216, 230),
        RGBColor(144, 238, 144),
        RGBColor(255, 218, 185),
        RGBColor(221, 160, 221),
    ),
    ColorPalette.monochrome: (
        RGBColor(0, 0, 0),
        RGBColor(64, 64, 64),
        RGBColor(128, 128, 128),
        RGBColor(192, 192, 192),
        RGBColor(255, 255, 255),
    ),
    ColorPalette.warm: (
        RGBColor(220, 20, 60),
        RGBColor(255, 140, 0),
        RGBColor(255, 215, 0),
        RGBColor(255, 69, 0),
        RGBColor(255, 99, 71),
    ),
    ColorPalette.cool: (
        RGBColor(70, 130, 180),
        RGBColor(32, 178, 170),
        RGBColor(123, 104, 238),
        RGBColor(0, 191, 255),
        RGBColor(72, 209, 204),
    ),
    ColorPalette.earth: (
        RGBColor(139, 69, 19),
        RGBColor(34, 139, 34),
        RGBColor(160, 82, 45),
        RGBColor(107, 142, 35),
        RGBColor(210, 180, 140),
    ),
}


def palette_colors(palette: Union[ColorPalette, CustomPalette]) -> Sequence[RGBColor]:
    if isinstance(palette, CustomPalette):
        return palette.colors
    return PALETTES[palette]


def palette_color(palette: Union[ColorPalette, CustomPalette], index: int) -> RGBColor:
    """Pick the color for the zero-based instance ``index``, cycling through the palette."""
    colors = palette_colors(palette)
    if not colors:
        return BLACK
    return colors[index % len(colors)]


def random_color(rng: random.Random) -> RGBColor:
    return RGBColor.from_unit(rng.random(), rng.random(), rng.random())


def per_letter_colors(text: str, seed: int) -> List[RGBColor]:
    """One color per character of ``text``, stable for a given watermark seed."""
    rng = random.Random(seed + PER_LETTER_SEED_OFFSET)
    return [random_color(rng) for _ in text]


# ----------------------------------------------------------------------
# WCAG contrast
# ----------------------------------------------------------------------
def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: RGBColor) -> float:
    return (
        0.2126 * _linearize(color.red)
        + 0.7152 * _linearize(color.green)
        + 0.0722 * _linearize(color.blue)
    )


def contrast_ratio(first: RGBColor, second: RGBColor) -> float:
    l1 = relative_luminance(first)
    l2 = relative_luminance(second)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def meets_accessibility_standard(text: RGBColor, background: RGBColor) -> bool:
    return contrast_ratio(text, background) >= WCAG_AA_RATIO


def suggest_accessible_color(text: RGBColor, background: RGBColor) -> RGBColor:
    """Nudge ``text`` away from ``background`` when their contrast is too low.

    This is a single fixed shift of every channel (darker on light backgrounds,
    lighter on dark ones), not a search for the closest accessible color, so the
    result is not guaranteed to reach the 4.5 ratio.
    """
    if meets_accessibility_standard(text, background):
        return text
    if relative_luminance(background) > 0.5:
        return text.shifted(-ACCESSIBLE_SHIFT)
    return text.shifted(ACCESSIBLE_SHIFT)
