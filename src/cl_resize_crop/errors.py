"""Exceptions raised by the resize-crop pipeline."""

from typing_extensions import override


class ResizeCropError(Exception):
    """Base class for every error raised by cl_resize_crop."""

    def __init__(self, message: str = "An unknown resize-crop error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class DomainError(ResizeCropError):
    """Invalid geometric input.

    Raised for zero or negative dimensions, a zero height (undefined ratio),
    a non-positive aspect ratio or scale factor, and unknown gravity values.
    """


class ResourceError(ResizeCropError):
    """The rendering surface could not be created or could not be snapshotted."""
