"""Render a source image into a fresh canvas using a resolved draw rectangle."""

from contextlib import closing

from PIL import Image

from .canvas import CanvasFactory, InterpolationQuality, PillowCanvas
from .errors import ResourceError
from .geometry import Gravity, Rect, Size, ratio, resolve_draw_rect


def resample(
    source: Image.Image,
    canvas_size: Size,
    draw_rect: Rect,
    quality: InterpolationQuality = InterpolationQuality.HIGH,
    canvas_factory: CanvasFactory = PillowCanvas,
) -> Image.Image:
    """
    Draw ``source`` into ``draw_rect`` on a new canvas of ``canvas_size`` pixels.

    Everything outside the canvas is clipped, which is where the crop happens.
    The canvas is closed exactly once, whether drawing succeeds or not.

    Args:
        source: Image to draw, left untouched
        canvas_size: Destination size; fractional pixels are truncated
        draw_rect: Placement of the whole source, bottom-left origin
        quality: Interpolation quality passed to the canvas
        canvas_factory: Creates the rendering surface

    Returns:
        New image of exactly ``canvas_size.to_pixels()``

    Raises:
        ResourceError: If the canvas cannot be created or snapshotted
    """
    width, height = canvas_size.to_pixels()
    if width <= 0 or height <= 0:
        raise ResourceError(f"Cannot render into a zero-area canvas ({width}x{height})")

    with closing(canvas_factory(width, height, source)) as canvas:
        canvas.set_interpolation_quality(quality)
        canvas.draw_image(source, draw_rect)
        result = canvas.make_image()

    if result.size != (width, height):
        raise ResourceError(
            f"Canvas snapshot has size {result.size[0]}x{result.size[1]}, expected {width}x{height}"
        )
    if result.mode != source.mode:
        raise ResourceError(
            f"Canvas snapshot has mode '{result.mode}', expected '{source.mode}'"
        )
    return result


def resize_crop(
    source: Image.Image,
    pixel_size: Size,
    gravity: Gravity | str = Gravity.CENTER,
    quality: InterpolationQuality = InterpolationQuality.HIGH,
    canvas_factory: CanvasFactory = PillowCanvas,
) -> Image.Image:
    """Aspect-fill ``source`` into ``pixel_size``, cropping the overflow per ``gravity``."""
    source_ratio = ratio(Size.from_pixels(source.size))
    draw_rect = resolve_draw_rect(source_ratio, pixel_size, gravity)
    return resample(source, pixel_size, draw_rect, quality, canvas_factory)
