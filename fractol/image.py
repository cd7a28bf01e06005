"""An in-memory pixel buffer and colour conversion for shallow visuals."""

from __future__ import annotations

from dataclasses import dataclass, field

_BITMAP_PAD = 32


@dataclass
class Image:
    """A packed-pixel image whose rows are padded to 32 bits.

    ``endian`` is 0 for little-endian pixel storage and 1 for big-endian.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    endian: int = 0
    line_length: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported depth {self.bits_per_pixel}")
        if self.endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, not {self.endian}")
        bits = self.width * self.bits_per_pixel
        self.line_length = (bits + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
        self.data = bytearray(self.line_length * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.line_length + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``, keeping only the bits that fit."""
        offset = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << self.bits_per_pixel) - 1)
        self.data[offset : offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored value at ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + self.bytes_per_pixel], self._byteorder)

    def clear(self) -> None:
        """Set every byte of the buffer to zero."""
        self.data[:] = bytes(len(self.data))


def _mask_layout(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, not {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, width) for red, green and blue, flattened to six values."""
    return (*_mask_layout(red_mask), *_mask_layout(green_mask), *_mask_layout(blue_mask))


def color_value(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB to a pixel value for a visual of the given depth.

    At depth 24 and above the colour is used unchanged; below that each
    channel is reduced to the widths described by ``shifts``.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )