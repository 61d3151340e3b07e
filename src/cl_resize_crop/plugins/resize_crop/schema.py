"""Resize-crop parameters and output schema."""

from pydantic import Field

from ...canvas import InterpolationQuality
from ...common.schemas import BaseJobParams, TaskOutput
from ...geometry import Gravity, Rect


class ResizeCropParams(BaseJobParams):
    """Parameters for the resize-crop task.

    Attributes:
        input_path: Path to the input image
        output_path: Path for the aspect-filled output image
        width: Target width in points (pixels when scale_factor is 1)
        height: Target height in points (pixels when scale_factor is 1)
        scale_factor: Pixels per point (default: 1.0)
        gravity: Edge kept visible when overflow is cropped (default: center)
        quality: Interpolation quality (default: high)
    """

    width: float = Field(gt=0, description="Target width in points")
    height: float = Field(gt=0, description="Target height in points")
    scale_factor: float = Field(default=1.0, gt=0, description="Pixels per point")
    gravity: Gravity = Field(default=Gravity.CENTER, description="Side kept visible")
    quality: InterpolationQuality = Field(
        default=InterpolationQuality.HIGH, description="Interpolation quality"
    )


class DrawRectModel(TaskOutput):
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_rect(cls, rect: Rect) -> "DrawRectModel":
        return cls(x=rect.x, y=rect.y, width=rect.width, height=rect.height)


class ResizeCropOutput(TaskOutput):
    width: int = Field(description="Output width in pixels")
    height: int = Field(description="Output height in pixels")
    draw_rect: DrawRectModel = Field(description="Placement of the source before clipping")
