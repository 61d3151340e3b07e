"""cl_resize_crop - Aspect-fill resize with gravity-controlled cropping."""

from .canvas import CanvasFactory, InterpolationQuality, PillowCanvas, RenderCanvas
from .errors import DomainError, ResizeCropError, ResourceError
from .geometry import Gravity, Rect, Size, ratio, ratio_of, resolve_draw_rect
from .resampler import resample, resize_crop
from .scaling import ScaledImage, pixel_size_for, resize_to_size

__version__ = "0.1.0"

__all__ = [
    "CanvasFactory",
    "DomainError",
    "Gravity",
    "InterpolationQuality",
    "PillowCanvas",
    "Rect",
    "RenderCanvas",
    "ResizeCropError",
    "ResourceError",
    "ScaledImage",
    "Size",
    "__version__",
    "pixel_size_for",
    "ratio",
    "ratio_of",
    "resample",
    "resize_crop",
    "resize_to_size",
    "resolve_draw_rect",
]
