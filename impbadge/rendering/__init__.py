from .converters import SUPPORTED_EXTENSIONS, ImageLoader, load_image
from .renderer import image_to_intensities, image_to_raster

__all__ = [
    "ImageLoader",
    "SUPPORTED_EXTENSIONS",
    "image_to_intensities",
    "image_to_raster",
    "load_image",
]
