from .encoding import classify, classify_line, pack_line, pack_pixels, pack_raster
from .types import Bit, Raster

__all__ = [
    "Bit",
    "classify",
    "classify_line",
    "pack_line",
    "pack_pixels",
    "pack_raster",
    "Raster",
]
