from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A coordinate in PDF points (1/72 inch), origin at the bottom-left of the page."""

    x: float
    y: float


@dataclass(frozen=True)
class PageDimensions:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Page dimensions must be positive, got {self.width} x {self.height}")

    @property
    def area(self) -> float:
        return self.width * self.height

    @classmethod
    def from_mediabox(cls, page) -> PageDimensions:
        """Read the physical page size of a pypdf ``PageObject``."""
        return cls(abs(float(page.mediabox.width)), abs(float(page.mediabox.height)))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle approximating the area a rendered stamp covers.

    ``top_left`` holds the smaller coordinates and ``bottom_right`` the larger
    ones on both axes.
    """

    top_left: Point
    bottom_right: Point

    def __post_init__(self) -> None:
        if self.bottom_right.x < self.top_left.x or self.bottom_right.y < self.top_left.y:
            raise ValueError(f"Invalid bounding box: {self.top_left} -> {self.bottom_right}")

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y

    def contains(self, point: Point) -> bool:
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )

    def overlaps(self, other: BoundingBox) -> bool:
        # Open intervals: boxes that only share an edge do not overlap.
        return (
            self.top_left.x < other.bottom_right.x
            and other.top_left.x < self.bottom_right.x
            and self.top_left.y < other.bottom_right.y
            and other.top_left.y < self.bottom_right.y
        )
