from __future__ import annotations

from typing import List

from PIL import Image

from ..protocol.types import Raster


def image_to_intensities(img: Image.Image) -> List[int]:
    """Return row-major 8-bit samples; bilevel pixels read as 0 or 255."""
    return list(img.convert("L").tobytes())


def image_to_raster(img: Image.Image) -> Raster:
    return Raster(image_to_intensities(img), img.width)
