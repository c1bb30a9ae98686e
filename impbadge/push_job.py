from __future__ import annotations

import logging
import os
from typing import Optional

from PIL import Image

from .config import DisplayConfig
from .protocol import pack_raster
from .rendering import ImageLoader, image_to_raster

logger = logging.getLogger(__name__)


class PushJobBuilder:
    """Turns an image file into the packed buffer the badge agent expects."""

    def __init__(self, config: Optional[DisplayConfig] = None, loader: Optional[ImageLoader] = None) -> None:
        self.config = config or DisplayConfig()
        self.loader = loader or ImageLoader()

    def load(self, path: str) -> Image.Image:
        self.config.validate()
        self._validate_input_path(path)
        return self.loader.load(path, self.config)

    def build_from_file(self, path: str) -> bytes:
        return self.build_from_image(self.load(path))

    def build_from_image(self, img: Image.Image) -> bytes:
        self.config.validate()
        if img.size != self.config.canvas_size:
            raise ValueError(
                f"Image is {img.width}x{img.height}, expected {self.config.width}x{self.config.height}"
            )
        raster = image_to_raster(img)
        payload = pack_raster(raster, invert=self.config.invert)
        logger.debug("packed %d rows into %d bytes", raster.height, len(payload))
        return payload

    def _validate_input_path(self, path: str) -> None:
        supported = self.loader.supported_extensions
        ext = os.path.splitext(path)[1].lower()
        if ext not in supported:
            raise ValueError("Supported formats: " + ", ".join(sorted(supported)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
