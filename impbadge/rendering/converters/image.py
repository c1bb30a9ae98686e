from __future__ import annotations

import logging

from PIL import Image

from ...config import DisplayConfig
from .base import RasterConverter

logger = logging.getLogger(__name__)


class ImageConverter(RasterConverter):
    def load(self, path: str, config: DisplayConfig) -> Image.Image:
        img = self._to_bilevel(self._load_image(path))
        logger.debug("decoded %s as %dx%d bilevel", path, img.width, img.height)
        if img.size != config.canvas_size:
            if not config.fit_to_canvas:
                raise ValueError(
                    f"Image is {img.width}x{img.height} but the canvas is "
                    f"{config.width}x{config.height}; use --fit to scale it"
                )
            img = self._fit_to_canvas(img, config.canvas_size)
            logger.debug("fitted to %dx%d", config.width, config.height)
        if config.rotate:
            img = self._rotate_180(img)
        return img
