"""Pure resize-crop computation logic (single file)."""

from pathlib import Path

from loguru import logger
from PIL import Image

from ....canvas import InterpolationQuality
from ....geometry import Gravity, Size, ratio, resolve_draw_rect
from ....resampler import resample
from ....scaling import pixel_size_for
from ....utils.profiling import timed
from ..schema import DrawRectModel, ResizeCropOutput


@timed
def image_resize_crop(
    *,
    input_path: str | Path,
    output_path: str | Path,
    width: float,
    height: float,
    gravity: Gravity | str = Gravity.CENTER,
    quality: InterpolationQuality = InterpolationQuality.HIGH,
    scale_factor: float = 1.0,
) -> ResizeCropOutput:
    """
    Aspect-fill a single image to a fixed size and write output.

    Framework-agnostic, single-responsibility function.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        width: Target width in points
        height: Target height in points
        gravity: Side of the overflow kept visible
        quality: Interpolation quality
        scale_factor: Pixels per point

    Returns:
        Output pixel size and the draw rectangle used

    Raises:
        FileNotFoundError: If input image does not exist
        DomainError: If the source or target size is degenerate
        ResourceError: If the canvas cannot be rendered
        OSError: If Pillow fails to read/write the image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    pixel_size = pixel_size_for(Size(width, height), scale_factor)

    with Image.open(input_path) as img:
        img.load()
        draw_rect = resolve_draw_rect(ratio(Size.from_pixels(img.size)), pixel_size, gravity)
        logger.debug(
            f"Resize-crop {input_path.name} {img.size[0]}x{img.size[1]} -> "
            f"{pixel_size.width}x{pixel_size.height} (gravity={gravity}), draw rect {draw_rect}"
        )
        resized = resample(img, pixel_size, draw_rect, quality)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    resized.save(output_path)

    out_width, out_height = resized.size
    return ResizeCropOutput(
        width=out_width,
        height=out_height,
        draw_rect=DrawRectModel.from_rect(draw_rect),
    )
