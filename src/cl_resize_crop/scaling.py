"""Point-size convenience wrappers around resize_crop."""

from __future__ import annotations

import math
from dataclasses import dataclass

from PIL import Image

from .canvas import CanvasFactory, InterpolationQuality, PillowCanvas
from .errors import DomainError
from .geometry import Gravity, Size
from .resampler import resize_crop


@dataclass(frozen=True)
class ScaledImage:
    """A bitmap together with the scale factor its pixels were rendered at."""

    image: Image.Image
    scale_factor: float

    @property
    def point_size(self) -> Size:
        width, height = self.image.size
        return Size(width / self.scale_factor, height / self.scale_factor)


def pixel_size_for(size: Size, scale_factor: float) -> Size:
    if not math.isfinite(scale_factor) or scale_factor <= 0:
        raise DomainError(f"Scale factor must be a positive number, got {scale_factor}")
    return size.scaled(scale_factor)


def resize_to_size(
    image: Image.Image,
    size: Size,
    scale_factor: float = 1.0,
    gravity: Gravity | str = Gravity.CENTER,
    quality: InterpolationQuality = InterpolationQuality.HIGH,
    canvas_factory: CanvasFactory = PillowCanvas,
) -> ScaledImage:
    """Aspect-fill ``image`` into ``size`` points rendered at ``scale_factor`` pixels per point."""
    pixel_size = pixel_size_for(size, scale_factor)
    resized = resize_crop(image, pixel_size, gravity, quality, canvas_factory)
    return ScaledImage(image=resized, scale_factor=scale_factor)
