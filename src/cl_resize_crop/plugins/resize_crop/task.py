"""Resize-crop task implementation."""

from pathlib import Path
from typing import Callable

from typing_extensions import override

from loguru import logger

from ...common.compute_module import ComputeModule
from .algo.resize_crop import image_resize_crop
from .schema import ResizeCropOutput, ResizeCropParams


class ResizeCropTask(ComputeModule[ResizeCropParams, ResizeCropOutput]):
    """Compute module that aspect-fills an image to a fixed size."""

    schema: type[ResizeCropParams] = ResizeCropParams

    @property
    @override
    def task_type(self) -> str:
        return "resize_crop"

    @override
    async def run(
        self,
        job_id: str,
        params: ResizeCropParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ResizeCropOutput:
        if not Path(params.input_path).exists():
            raise FileNotFoundError(f"Input file not found: {params.input_path}")

        logger.info(
            f"Job {job_id}: resize-crop {params.input_path} -> {params.output_path} "
            f"({params.width}x{params.height} @{params.scale_factor}x, gravity={params.gravity})"
        )

        output = image_resize_crop(
            input_path=params.input_path,
            output_path=params.output_path,
            width=params.width,
            height=params.height,
            gravity=params.gravity,
            quality=params.quality,
            scale_factor=params.scale_factor,
        )

        if progress_callback:
            progress_callback(100)

        return output
