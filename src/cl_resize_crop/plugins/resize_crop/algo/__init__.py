"""Resize-crop algorithms."""

from .resize_crop import image_resize_crop

__all__ = ["image_resize_crop"]
