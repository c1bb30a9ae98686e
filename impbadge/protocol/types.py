from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List


class Bit(IntEnum):
    """Panel bit values: a set bit drives the pixel black."""

    UNLIT = 0
    LIT = 1


@dataclass(frozen=True)
class Raster:
    """Row-major intensity samples used by the bit packer."""

    pixels: List[int]
    width: int

    def validate(self) -> None:
        """Validate dimensions for packing."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if len(self.pixels) % self.width != 0:
            raise ValueError(
                f"Pixels length {len(self.pixels)} must be a multiple of width {self.width}"
            )

    @property
    def height(self) -> int:
        """Return raster height computed from width and pixel count."""
        self.validate()
        return len(self.pixels) // self.width

    def rows(self) -> List[List[int]]:
        height = self.height
        return [self.pixels[row * self.width : (row + 1) * self.width] for row in range(height)]
