import random

import pytest

from stamplayout.core.errors import InvalidConfiguration
from stamplayout.models import (
    CustomPalette,
    DynamicScaleFontSize,
    FixedFontSize,
    FixedOrientation,
    FixedPosition,
    GridTemplate,
    PaletteColor,
    Point,
    PositionTemplate,
    RandomFontSize,
    RandomPosition,
    TemplatePosition,
    WatermarkConfig,
)
from stamplayout.services.generator import generate_instances
from stamplayout.services.validator import (
    calculate_optimal_font_size,
    detect_overlaps,
    validate_config,
    validate_layout,
    validate_position,
)


def test_identical_instances_overlap(letter_page):
    config = WatermarkConfig(
        text="CONFIDENTIAL",
        position=FixedPosition(100, 400),
        font_size=FixedFontSize(24),
        quantity=2,
    )
    assert detect_overlaps(generate_instances(letter_page, config)) == [(0, 1)]


def test_separated_instances_do_not_overlap(letter_page):
    config = WatermarkConfig(
        text="A",
        position=TemplatePosition(PositionTemplate.four_corners),
        font_size=FixedFontSize(12),
        quantity=4,
    )
    assert detect_overlaps(generate_instances(letter_page, config)) == []


def test_valid_position_passes(letter_page):
    validate_position(Point(100, 400), letter_page, 24, "CONFIDENTIAL")


def test_position_errors_are_all_collected(letter_page):
    with pytest.raises(InvalidConfiguration) as excinfo:
        validate_position(Point(700, 900), letter_page, 24, "CONFIDENTIAL")

    errors = excinfo.value.errors
    assert len(errors) == 4
    assert errors[0].startswith("X position 700")
    assert errors[1].startswith("Y position 900")
    assert "beyond page width" in errors[2]
    assert "beyond page height" in errors[3]


def test_text_overflow_only(letter_page):
    with pytest.raises(InvalidConfiguration) as excinfo:
        validate_position(Point(500, 100), letter_page, 24, "CONFIDENTIAL")
    assert excinfo.value.errors == ["Watermark text extends beyond page width"]


def test_optimal_font_size(letter_page):
    assert calculate_optimal_font_size(letter_page, "CONFIDENTIAL") == pytest.approx(68.0)
    assert calculate_optimal_font_size(letter_page, "X") == 144
    assert calculate_optimal_font_size(letter_page, "X" * 200) == 8
    assert calculate_optimal_font_size(letter_page, "CONFIDENTIAL", max_width_ratio=0.4) == pytest.approx(34.0)


def test_valid_config_has_no_errors(letter_page):
    config = WatermarkConfig(text="DRAFT", position=RandomPosition(), font_size=RandomFontSize(18, 36), quantity=5)
    assert validate_config(config, letter_page) == []


def test_config_errors_accumulate(letter_page):
    config = WatermarkConfig(
        text="DRAFT",
        position=FixedPosition(-10, 400),
        orientation=FixedOrientation(400),
        font_size=FixedFontSize(200),
        quantity=0,
    )
    errors = validate_config(config, letter_page)

    assert len(errors) == 4
    assert any("quantity" in e for e in errors)
    assert any("outside page dimensions" in e for e in errors)
    assert any("Angle" in e for e in errors)
    assert any("Font size" in e for e in errors)


def test_other_config_errors(letter_page):
    config = WatermarkConfig(
        text="   ",
        position=TemplatePosition(GridTemplate(0, 3)),
        font_size=DynamicScaleFontSize(4, 0),
        color=PaletteColor(CustomPalette(())),
        quantity=101,
    )
    errors = validate_config(config, letter_page)

    assert errors == [
        "Watermark text must not be empty",
        "Watermark quantity must be between 1 and 100",
        "Grid template requires at least one row and one column",
        "Base font size must be between 8.0 and 144.0",
        "Scale factor must be positive",
        "Custom palette must contain at least one color",
    ]


def test_random_font_range_bounds(letter_page):
    config = WatermarkConfig(text="DRAFT", font_size=RandomFontSize(4, 200))
    assert validate_config(config, letter_page) == ["Font size range must be between 8.0 and 144.0"]


def test_validate_layout_reports_overlaps_as_warnings(letter_page):
    config = WatermarkConfig(text="DRAFT", position=FixedPosition(100, 100), quantity=3)
    result = validate_layout(letter_page, config)

    assert result.is_valid
    assert result.overlaps == [(0, 1), (0, 2), (1, 2)]
    assert result.warnings == []


def test_many_overlaps_add_a_warning(letter_page):
    config = WatermarkConfig(text="DRAFT", position=FixedPosition(100, 100), quantity=6)
    result = validate_layout(letter_page, config)

    assert len(result.overlaps) == 15
    assert len(result.warnings) == 1


def test_validate_layout_rejects_bad_config(letter_page):
    config = WatermarkConfig(text="DRAFT", quantity=500)
    result = validate_layout(letter_page, config)

    assert not result.is_valid
    assert result.overlaps == []
    with pytest.raises(InvalidConfiguration):
        result.raise_for_errors()


def test_validate_layout_for_instances(letter_page):
    inside = WatermarkConfig(text="OK", position=FixedPosition(100, 100))
    outside = WatermarkConfig(text="CONFIDENTIAL", position=FixedPosition(560, 100))
    instances = generate_instances(letter_page, inside) + generate_instances(letter_page, outside)

    result = validate_layout(letter_page, instances)

    assert result.errors == ["Watermark 2: Watermark text extends beyond page width"]
    assert result.overlaps == []


def test_validate_layout_is_reproducible_with_rng(letter_page):
    config = WatermarkConfig(text="DRAFT", position=RandomPosition(), quantity=30)
    first = validate_layout(letter_page, config, rng=random.Random(5))
    second = validate_layout(letter_page, config, rng=random.Random(5))
    assert first.overlaps == second.overlaps
