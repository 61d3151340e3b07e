"""
Rendering capability used by the resampler.

The resampler never samples pixels itself; it hands a draw rectangle to a
RenderCanvas. PillowCanvas is the default implementation. Callers can inject
any object satisfying the CanvasFactory / RenderCanvas protocols.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Protocol, runtime_checkable

from typing_extensions import override

from PIL import Image

from .errors import ResourceError
from .geometry import Rect


class InterpolationQuality(StrEnum):
    """Resampling filter strength, forwarded verbatim to the canvas."""

    DEFAULT = "default"
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@runtime_checkable
class RenderCanvas(Protocol):
    """A 2D drawing surface with image blit support."""

    @property
    def size(self) -> tuple[int, int]: ...

    def set_interpolation_quality(self, quality: InterpolationQuality) -> None: ...

    def draw_image(self, image: Image.Image, rect: Rect) -> None:
        """Draw the whole image scaled into rect (bottom-left origin), clipped to the surface."""
        ...

    def make_image(self) -> Image.Image:
        """Snapshot the surface contents as a new image."""
        ...

    def close(self) -> None: ...


class CanvasFactory(Protocol):
    def __call__(self, width: int, height: int, like: Image.Image) -> RenderCanvas: ...


class PillowCanvas(RenderCanvas):
    """
    RenderCanvas backed by a Pillow image.

    The surface matches the pixel layout (mode and palette) of ``like``.
    Pillow addresses pixels from the top-left, so draw rectangles are flipped
    vertically on the way in.
    """

    FILTERS: ClassVar[dict[InterpolationQuality, Image.Resampling]] = {
        InterpolationQuality.NONE: Image.Resampling.NEAREST,
        InterpolationQuality.LOW: Image.Resampling.BILINEAR,
        InterpolationQuality.MEDIUM: Image.Resampling.BICUBIC,
        InterpolationQuality.DEFAULT: Image.Resampling.BICUBIC,
        InterpolationQuality.HIGH: Image.Resampling.LANCZOS,
    }
    INDEXED_MODES: ClassVar[tuple[str, ...]] = ("1", "P", "PA")

    def __init__(self, width: int, height: int, like: Image.Image):
        if width <= 0 or height <= 0:
            raise ResourceError(f"Cannot create a zero-area canvas ({width}x{height})")

        palette = None
        if like.mode in ("P", "PA"):
            palette = like.getpalette()
            if palette is None:
                raise ResourceError(
                    f"Source image in mode '{like.mode}' has no accessible color palette"
                )

        try:
            surface = Image.new(like.mode, (width, height))
        except (ValueError, KeyError, MemoryError) as exc:
            raise ResourceError(
                f"Cannot create a {width}x{height} canvas in mode '{like.mode}': {exc}"
            ) from exc

        if palette is not None:
            surface.putpalette(palette)

        self._surface: Image.Image | None = surface
        self._filter: Image.Resampling = self.FILTERS[InterpolationQuality.HIGH]

    def _require_surface(self) -> Image.Image:
        if self._surface is None:
            raise ResourceError("Canvas has already been closed")
        return self._surface

    @property
    @override
    def size(self) -> tuple[int, int]:
        return self._require_surface().size

    @override
    def set_interpolation_quality(self, quality: InterpolationQuality) -> None:
        self._filter = self.FILTERS[InterpolationQuality(quality)]

    def _filter_for(self, image: Image.Image) -> Image.Resampling:
        # Palette indices and bilevel pixels cannot be blended.
        if image.mode in self.INDEXED_MODES:
            return Image.Resampling.NEAREST
        return self._filter

    @override
    def draw_image(self, image: Image.Image, rect: Rect) -> None:
        surface = self._require_surface()
        canvas_width, canvas_height = self.size
        source_width, source_height = image.size
        if rect.width == 0 or rect.height == 0 or source_width == 0 or source_height == 0:
            return

        # Flip into top-left pixel space.
        left = rect.x
        top = canvas_height - rect.max_y

        # Visible part of the draw area, snapped to whole pixels.
        dest_left = max(round(left), 0)
        dest_top = max(round(top), 0)
        dest_right = min(round(left + rect.width), canvas_width)
        dest_bottom = min(round(top + rect.height), canvas_height)
        if dest_right <= dest_left or dest_bottom <= dest_top:
            return

        scale_x = source_width / rect.width
        scale_y = source_height / rect.height
        box = (
            min(max((dest_left - left) * scale_x, 0.0), source_width),
            min(max((dest_top - top) * scale_y, 0.0), source_height),
            min(max((dest_right - left) * scale_x, 0.0), source_width),
            min(max((dest_bottom - top) * scale_y, 0.0), source_height),
        )

        try:
            patch = image.resize(
                (dest_right - dest_left, dest_bottom - dest_top),
                self._filter_for(image),
                box=box,
            )
            surface.paste(patch, (dest_left, dest_top))
        except (ValueError, OSError, MemoryError) as exc:
            raise ResourceError(f"Failed to draw image into canvas: {exc}") from exc

    @override
    def make_image(self) -> Image.Image:
        return self._require_surface().copy()

    @override
    def close(self) -> None:
        if self._surface is not None:
            self._surface.close()
            self._surface = None
