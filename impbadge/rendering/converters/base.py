from __future__ import annotations

from typing import Tuple

from PIL import Image, ImageOps, UnidentifiedImageError

from ...config import DisplayConfig

WHITE = 255


class ImageSourceConverter:
    def load(self, path: str, config: DisplayConfig) -> Image.Image:
        raise NotImplementedError


class RasterConverter(ImageSourceConverter):
    @staticmethod
    def _load_image(path: str) -> Image.Image:
        try:
            with Image.open(path) as img:
                img = ImageOps.exif_transpose(img)
                return img.copy()
        except (UnidentifiedImageError, OSError) as exc:
            raise RuntimeError(f"Cannot decode image {path}: {exc}") from exc

    @staticmethod
    def _flatten_alpha(img: Image.Image) -> Image.Image:
        if "A" not in img.getbands() and "transparency" not in img.info:
            return img
        img = img.convert("RGBA")
        white = Image.new("RGBA", img.size, (255, 255, 255, 255))
        return Image.alpha_composite(white, img)

    @classmethod
    def _to_bilevel(cls, img: Image.Image) -> Image.Image:
        # Pillow thresholds at 128 when dithering is off
        img = cls._flatten_alpha(img)
        return img.convert("L").convert("1", dither=Image.Dither.NONE)

    @staticmethod
    def _fit_to_canvas(img: Image.Image, size: Tuple[int, int]) -> Image.Image:
        if img.size == size:
            return img
        ratio = min(size[0] / float(img.width), size[1] / float(img.height))
        width = max(1, min(size[0], int(round(img.width * ratio))))
        height = max(1, min(size[1], int(round(img.height * ratio))))
        # Mode "1" always resizes with nearest neighbour, so edges stay hard
        resized = img.resize((width, height), Image.Resampling.NEAREST)
        out = Image.new(img.mode, size, WHITE)
        out.paste(resized, (int(round((size[0] - width) * 0.5)), int(round((size[1] - height) * 0.5))))
        return out

    @staticmethod
    def _rotate_180(img: Image.Image) -> Image.Image:
        return img.transpose(Image.Transpose.ROTATE_180)
