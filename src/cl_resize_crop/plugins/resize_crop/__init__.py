"""Resize-crop plugin."""

from .schema import DrawRectModel, ResizeCropOutput, ResizeCropParams
from .task import ResizeCropTask

__all__ = ["DrawRectModel", "ResizeCropOutput", "ResizeCropParams", "ResizeCropTask"]
