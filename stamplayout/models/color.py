from __future__ import annotations

from dataclasses import dataclass


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class RGBColor:
    """An opaque sRGB color with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel must be between 0 and 255, got {value}")

    @classmethod
    def from_unit(cls, red: float, green: float, blue: float) -> RGBColor:
        """Build a color from channel fractions in [0, 1]."""
        return cls(*(_clamp_channel(round(c * 255)) for c in (red, green, blue)))

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        value = value.strip().lstrip("#")
        if len(value) == 3:
            value = "".join(ch * 2 for ch in value)
        if len(value) != 6:
            raise ValueError(f"Expected a #rrggbb color, got {value!r}")
        return cls(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def shifted(self, delta: int) -> RGBColor:
        """Return a copy with every channel moved by ``delta`` and clamped to [0, 255]."""
        return RGBColor(
            _clamp_channel(self.red + delta),
            _clamp_channel(self.green + delta),
            _clamp_channel(self.blue + delta),
        )

    @property
    def unit(self) -> tuple[float, float, float]:
        """Channels as fractions in [0, 1], the form reportlab expects."""
        return self.red / 255, self.green / 255, self.blue / 255


BLACK = RGBColor(0, 0, 0)
WHITE = RGBColor(255, 255, 255)
RED = RGBColor(255, 0, 0)
GREEN = RGBColor(0, 255, 0)
BLUE = RGBColor(0, 0, 255)
GRAY = RGBColor(128, 128, 128)
LIGHT_GRAY = RGBColor(192, 192, 192)
DARK_GRAY = RGBColor(64, 64, 64)
