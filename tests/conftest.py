"""Test configuration and fixtures for cl_resize_crop.

This module provides:
- Pytest configuration (markers)
- Synthetic image fixtures built with PIL (no test media on disk required)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

RED = (255, 0, 0)
BLUE = (0, 0, 255)

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: full task tests (params -> file on disk)",
    )


# ============================================================================
# Synthetic Image Fixtures
# ============================================================================


def split_image(width: int, height: int, horizontal: bool) -> Image.Image:
    """Two-colour RGB image.

    horizontal=True: left half red, right half blue.
    horizontal=False: top half red, bottom half blue.
    """
    img = Image.new("RGB", (width, height), color=BLUE)
    if horizontal:
        img.paste(RED, (0, 0, width // 2, height))
    else:
        img.paste(RED, (0, 0, width, height // 2))
    return img


@pytest.fixture
def wide_image() -> Image.Image:
    """400x200 (ratio 2.0), left half red, right half blue."""
    return split_image(400, 200, horizontal=True)


@pytest.fixture
def tall_image() -> Image.Image:
    """200x400 (ratio 0.5), top half red, bottom half blue."""
    return split_image(200, 400, horizontal=False)


@pytest.fixture
def save_image(tmp_path: Path) -> Callable[[Image.Image, str], Path]:
    """Write an image into tmp_path and return its path."""

    def _save(img: Image.Image, name: str) -> Path:
        path = tmp_path / name
        img.save(path)
        return path

    return _save
