from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator

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
from .geometry import PageDimensions

HEX_COLOR_PATTERN = r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"


# ----------------------------------------------------------------------
# Position
# ----------------------------------------------------------------------
class FixedPositionPayload(BaseModel):
    type: Literal["fixed"]
    x: float
    y: float

    def to_config(self) -> FixedPosition:
        return FixedPosition(self.x, self.y)


class RandomPositionPayload(BaseModel):
    type: Literal["random"]

    def to_config(self) -> RandomPosition:
        return RandomPosition()


class TemplatePositionPayload(BaseModel):
    type: Literal["template"]
    template: Union[PositionTemplate, Literal["grid"]]
    rows: int = Field(3, description="Grid rows, only used by the grid template.")
    cols: int = Field(3, description="Grid columns, only used by the grid template.")

    def to_config(self) -> TemplatePosition:
        if self.template == "grid":
            return TemplatePosition(GridTemplate(self.rows, self.cols))
        return TemplatePosition(PositionTemplate(self.template))


PositionPayload = Annotated[
    Union[FixedPositionPayload, RandomPositionPayload, TemplatePositionPayload],
    Field(discriminator="type"),
]


# ----------------------------------------------------------------------
# Orientation
# ----------------------------------------------------------------------
class FixedOrientationPayload(BaseModel):
    type: Literal["fixed"]
    angle: float

    def to_config(self) -> FixedOrientation:
        return FixedOrientation(self.angle)


class RandomOrientationPayload(BaseModel):
    type: Literal["random"]

    def to_config(self) -> RandomOrientation:
        return RandomOrientation()


class PresetOrientationPayload(BaseModel):
    type: Literal["preset"]
    preset: OrientationPreset

    def to_config(self) -> PresetOrientation:
        return PresetOrientation(self.preset)


OrientationPayload = Annotated[
    Union[FixedOrientationPayload, RandomOrientationPayload, PresetOrientationPayload],
    Field(discriminator="type"),
]


# ----------------------------------------------------------------------
# Font size
# ----------------------------------------------------------------------
class FixedFontSizePayload(BaseModel):
    type: Literal["fixed"]
    size: float

    def to_config(self) -> FixedFontSize:
        return FixedFontSize(self.size)


class RandomFontSizePayload(BaseModel):
    type: Literal["random"]
    min: float
    max: float

    @field_validator("max")
    @classmethod
    def validate_range(cls, value: float, info: ValidationInfo) -> float:
        minimum = info.data.get("min")
        if minimum is not None and value <= minimum:
            raise ValueError("Maximum font size must be greater than the minimum.")
        return value

    def to_config(self) -> RandomFontSize:
        return RandomFontSize(self.min, self.max)


class DynamicScaleFontSizePayload(BaseModel):
    type: Literal["dynamic"]
    base_size: float
    scale_factor: float

    def to_config(self) -> DynamicScaleFontSize:
        return DynamicScaleFontSize(self.base_size, self.scale_factor)


class RecommendedFontSizePayload(BaseModel):
    type: Literal["recommended"]
    document_type: DocumentType

    def to_config(self) -> RecommendedFontSize:
        return RecommendedFontSize(self.document_type)


FontSizePayload = Annotated[
    Union[
        FixedFontSizePayload,
        RandomFontSizePayload,
        DynamicScaleFontSizePayload,
        RecommendedFontSizePayload,
    ],
    Field(discriminator="type"),
]


# ----------------------------------------------------------------------
# Color
# ----------------------------------------------------------------------
class FixedColorPayload(BaseModel):
    type: Literal["fixed"]
    color: str = Field(..., pattern=HEX_COLOR_PATTERN, description="Hex color such as #ff0000.")

    def to_config(self) -> FixedColor:
        return FixedColor(RGBColor.from_hex(self.color))


class RandomPerLetterColorPayload(BaseModel):
    type: Literal["random_per_letter"]

    def to_config(self) -> RandomPerLetterColor:
        return RandomPerLetterColor()


class PaletteColorPayload(BaseModel):
    type: Literal["palette"]
    palette: Union[ColorPalette, Literal["custom"]]
    colors: List[Annotated[str, Field(pattern=HEX_COLOR_PATTERN)]] = Field(
        default_factory=list, description="Colors of a custom palette."
    )

    def to_config(self) -> PaletteColor:
        if self.palette == "custom":
            return PaletteColor(CustomPalette(tuple(RGBColor.from_hex(c) for c in self.colors)))
        return PaletteColor(ColorPalette(self.palette))


ColorPayload = Annotated[
    Union[FixedColorPayload, RandomPerLetterColorPayload, PaletteColorPayload],
    Field(discriminator="type"),
]


# ----------------------------------------------------------------------
# Requests
# ----------------------------------------------------------------------
class PageSize(BaseModel):
    width: float = Field(612.0, gt=0, description="Page width in points.")
    height: float = Field(792.0, gt=0, description="Page height in points.")

    def to_dimensions(self) -> PageDimensions:
        return PageDimensions(self.width, self.height)


class WatermarkConfigPayload(BaseModel):
    text: str = Field(..., min_length=1, description="Watermark text.")
    position: PositionPayload = Field(default_factory=lambda: RandomPositionPayload(type="random"))
    orientation: OrientationPayload = Field(
        default_factory=lambda: FixedOrientationPayload(type="fixed", angle=45.0)
    )
    font_size: FontSizePayload = Field(default_factory=lambda: FixedFontSizePayload(type="fixed", size=24.0))
    color: ColorPayload = Field(default_factory=lambda: FixedColorPayload(type="fixed", color="#808080"))
    quantity: int = Field(1, description="Number of stamps per page (1-100).")

    def to_config(self) -> WatermarkConfig:
        return WatermarkConfig(
            text=self.text,
            position=self.position.to_config(),
            orientation=self.orientation.to_config(),
            font_size=self.font_size.to_config(),
            color=self.color.to_config(),
            quantity=self.quantity,
        )


class WatermarkLayoutRequest(BaseModel):
    page: PageSize = Field(default_factory=PageSize)
    config: WatermarkConfigPayload
    seed: Optional[int] = Field(None, description="Seed for a reproducible layout.")
