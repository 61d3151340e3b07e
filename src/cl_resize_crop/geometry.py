"""Aspect-fill geometry.

Computes where the whole source image has to be drawn inside a canvas so that
it covers the canvas without distortion. The returned rectangle is generally
larger than the canvas; the rendering surface crops it by clipping.

Coordinates use a bottom-left origin with y growing upward, so ``top`` gravity
places the rectangle at the larger y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from .errors import DomainError


class Gravity(StrEnum):
    """Which part of the overflowing image stays visible."""

    CENTER = "center"
    LEFT = "left"
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, value: "Gravity | str") -> "Gravity":
        try:
            return cls(value)
        except ValueError as exc:
            raise DomainError(
                f"Unsupported gravity '{value}'. Supported values are: {[g.value for g in cls]}"
            ) from exc


def _check_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise DomainError(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def __post_init__(self):
        for name in ("width", "height"):
            value = _check_finite(name, getattr(self, name))
            if value < 0:
                raise DomainError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_pixels(cls, size: tuple[int, int]) -> Size:
        width, height = size
        return cls(float(width), float(height))

    def scaled(self, factor: float) -> Size:
        return Size(self.width * factor, self.height * factor)

    def to_pixels(self) -> tuple[int, int]:
        """Integer pixel dimensions, truncating any fractional part."""
        return int(self.width), int(self.height)


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        _ = _check_finite("x", self.x)
        _ = _check_finite("y", self.y)
        # Reuse Size validation for the extent.
        _ = Size(self.width, self.height)

    @property
    def origin(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


def ratio_of(width: float, height: float) -> float:
    """Width / height, raising DomainError when the ratio is undefined."""
    if height == 0:
        raise DomainError(f"Aspect ratio is undefined for zero height (width={width})")
    return width / height


def ratio(size: Size) -> float:
    return ratio_of(size.width, size.height)


def resolve_draw_rect(source_ratio: float, canvas: Size, gravity: Gravity | str) -> Rect:
    """
    Resolve the rectangle the whole source image is drawn into.

    Args:
        source_ratio: Width / height of the source image, > 0
        canvas: Target canvas size, both dimensions > 0
        gravity: Side of the overflow that is kept visible

    Returns:
        Draw rectangle in canvas coordinates (bottom-left origin). It always
        covers the canvas: width >= canvas.width and height >= canvas.height.

    Raises:
        DomainError: On a non-positive ratio, an empty canvas or an unknown gravity
    """
    gravity = Gravity.parse(gravity)

    if not math.isfinite(source_ratio) or source_ratio <= 0:
        raise DomainError(f"Source ratio must be a positive number, got {source_ratio}")
    if canvas.width <= 0 or canvas.height <= 0:
        raise DomainError(
            f"Canvas dimensions must be positive, got {canvas.width}x{canvas.height}"
        )

    target_ratio = ratio(canvas)
    if source_ratio == target_ratio:
        return Rect(0.0, 0.0, canvas.width, canvas.height)

    # max() absorbs a last-ulp rounding shortfall so the rect still covers the canvas.
    if source_ratio > target_ratio:
        draw_width, draw_height = max(canvas.height * source_ratio, canvas.width), canvas.height
    else:
        draw_width, draw_height = canvas.width, max(canvas.width / source_ratio, canvas.height)

    center_x = (canvas.width - draw_width) / 2
    center_y = (canvas.height - draw_height) / 2

    match gravity:
        case Gravity.CENTER:
            x, y = center_x, center_y
        case Gravity.LEFT:
            x, y = 0.0, center_y
        case Gravity.RIGHT:
            x, y = canvas.width - draw_width, center_y
        case Gravity.TOP:
            x, y = center_x, canvas.height - draw_height
        case Gravity.BOTTOM:
            x, y = center_x, 0.0

    return Rect(x, y, draw_width, draw_height)
