from __future__ import annotations

from typing import Iterable, List, Sequence

from .types import Bit, Raster


def classify(sample: int, invert: bool = False) -> Bit:
    """Map an intensity sample to a panel bit (white is UNLIT, black is LIT)."""
    bit = Bit.UNLIT if sample > 0 else Bit.LIT
    if invert:
        return Bit.LIT if bit is Bit.UNLIT else Bit.UNLIT
    return bit


def pack_line(bits: Sequence[int]) -> bytes:
    """Pack a line of bits MSB first, padding the last byte with UNLIT."""
    out = bytearray()
    for i in range(0, len(bits), 8):
        chunk = list(bits[i : i + 8])
        if len(chunk) < 8:
            chunk = chunk + [Bit.UNLIT] * (8 - len(chunk))
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def classify_line(line: Iterable[int], invert: bool = False) -> List[Bit]:
    return [classify(sample, invert) for sample in line]


def pack_raster(raster: Raster, invert: bool = False) -> bytes:
    """Pack every row of a raster and concatenate them in row order."""
    raster.validate()
    out = bytearray()
    for line in raster.rows():
        out += pack_line(classify_line(line, invert))
    return bytes(out)


def pack_pixels(pixels: List[int], width: int, invert: bool = False) -> bytes:
    """Pack a row-major intensity sequence into a 1 bpp row-aligned buffer."""
    return pack_raster(Raster(list(pixels), width), invert)
