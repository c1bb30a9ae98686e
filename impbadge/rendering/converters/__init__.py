from __future__ import annotations

import os
from typing import Dict, Optional, Set

from PIL import Image

from ...config import DisplayConfig
from .base import ImageSourceConverter
from .image import ImageConverter

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


class ImageLoader:
    def __init__(self, converters: Optional[Dict[str, ImageSourceConverter]] = None) -> None:
        if converters is None:
            image_converter = ImageConverter()
            converters = {ext: image_converter for ext in SUPPORTED_EXTENSIONS}
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str, config: DisplayConfig) -> Image.Image:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        return converter.load(path, config)


def load_image(path: str, config: Optional[DisplayConfig] = None) -> Image.Image:
    return ImageLoader().load(path, config or DisplayConfig())


__all__ = ["ImageLoader", "ImageSourceConverter", "SUPPORTED_EXTENSIONS", "load_image"]
