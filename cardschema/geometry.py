"""Integer rectangles and numeric clamping helpers used when drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
U32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Rect:
    """A non-empty rectangle of pixels; `right` and `bottom` are inclusive."""

    left: int
    top: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"rectangle must have a positive size, got {self.width}x{self.height}"
            )

    @classmethod
    def at(cls, left: int, top: int, width: int, height: int) -> Rect:
        """Create a rectangle with its top left corner at (`left`, `top`)."""
        return cls(left=left, top=top, width=width, height=height)

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies inside the rectangle.

        Coordinates outside the 32-bit signed range are never contained.
        """
        if not (I32_MIN <= x <= I32_MAX and I32_MIN <= y <= I32_MAX):
            return False
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class FinalRect:
    """The final position and size of a laid out element."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_rect(cls, rect: Rect) -> FinalRect:
        """Take the position and size of a `Rect`."""
        return cls(x=rect.left, y=rect.top, width=rect.width, height=rect.height)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready form of the rectangle."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def clamp_to_u32(value: float) -> int:
    """Clamp a number into the unsigned 32-bit range, truncating fractions."""
    if isinstance(value, float) and math.isnan(value):
        return U32_MAX
    if value < 0:
        return 0
    if value > U32_MAX:
        return U32_MAX
    return int(value)


def clamp_to_i32(value: int) -> int:
    """Clamp a non-negative integer to the largest signed 32-bit value."""
    return min(value, I32_MAX)


def _saturating_cast(value: float, low: int, high: int) -> int:
    if math.isnan(value):
        return 0
    if value <= low:
        return low
    if value >= high:
        return high
    return int(value)


def absolute_rect(origin_x: float, origin_y: float, width: float, height: float) -> Rect:
    """The absolute rectangle of an element at the given origin.

    Width and height are at least one pixel.
    """
    width = 1.0 if math.isnan(width) or width < 1.0 else width
    height = 1.0 if math.isnan(height) or height < 1.0 else height
    return Rect.at(
        _saturating_cast(origin_x, I32_MIN, I32_MAX),
        _saturating_cast(origin_y, I32_MIN, I32_MAX),
        _saturating_cast(width, 0, U32_MAX),
        _saturating_cast(height, 0, U32_MAX),
    )