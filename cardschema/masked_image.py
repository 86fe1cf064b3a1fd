"""RGBA images and nested drawing masks."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Union

from cardschema.geometry import Rect

Pixel = tuple[int, int, int, int]

_TRANSPARENT_MASK_PIXEL: Pixel = (200, 200, 200, 255)


@dataclass(frozen=True)
class DebugMode:
    """Debug drawing options."""

    transparent_masks: bool = False

    @classmethod
    def none(cls) -> DebugMode:
        """No debug drawing."""
        return cls()

    @classmethod
    def with_transparent_masks(cls) -> DebugMode:
        """Draw a faint pixel wherever a mask hides drawing."""
        return cls(transparent_masks=True)


def _check_pixel(pixel: Pixel) -> Pixel:
    pixel = tuple(pixel)
    if len(pixel) != 4 or any(not 0 <= c <= 255 for c in pixel):
        raise ValueError(f"pixel must be four channels in 0..255, got {pixel!r}")
    return pixel  # type: ignore[return-value]


class RgbaImage:
    """An image of 8-bit RGBA pixels, initially transparent black."""

    __slots__ = ("width", "height", "_data")

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 4)

    @classmethod
    def filled(cls, width: int, height: int, color: Pixel) -> RgbaImage:
        """Create an image with every pixel set to `color`."""
        image = cls(width, height)
        image._data = bytearray(bytes(_check_pixel(color)) * (width * height))
        return image

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )
        return (y * self.width + x) * 4

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y)."""
        offset = self._offset(x, y)
        return tuple(self._data[offset : offset + 4])  # type: ignore[return-value]

    def put_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Overwrite the pixel at (x, y)."""
        offset = self._offset(x, y)
        self._data[offset : offset + 4] = bytes(_check_pixel(pixel))

    def blend_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Alpha-blend `pixel` over the pixel at (x, y); points outside are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        fg = _check_pixel(pixel)
        if fg[3] == 0:
            return
        if fg[3] == 255:
            self.put_pixel(x, y, fg)
            return

        bg = self.get_pixel(x, y)
        bg_r, bg_g, bg_b, bg_a = (c / 255.0 for c in bg)
        fg_r, fg_g, fg_b, fg_a = (c / 255.0 for c in fg)

        alpha = bg_a + fg_a - bg_a * fg_a
        if alpha == 0.0:
            return

        def channel(fg_c: float, bg_c: float) -> int:
            out = (fg_c * fg_a + bg_c * bg_a * (1.0 - fg_a)) / alpha
            return int(255.0 * out)

        self.put_pixel(
            x,
            y,
            (
                channel(fg_r, bg_r),
                channel(fg_g, bg_g),
                channel(fg_b, bg_b),
                int(255.0 * alpha),
            ),
        )

    def to_bytes(self) -> bytes:
        """The raw pixel data, row by row."""
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RgbaImage):
            return NotImplemented
        return self.dimensions == other.dimensions and self._data == other._data

    def __repr__(self) -> str:
        return f"RgbaImage(width={self.width}, height={self.height})"


class MaskedImage:
    """A drawing target that only lets pixels through inside its mask.

    A masked image wraps either an `RgbaImage` or another masked image, so
    masks can be nested; a pixel reaches the image only if every mask in the
    chain contains it.
    """

    __slots__ = ("_inner", "_debug_mode", "_mask", "_children", "__weakref__")

    def __init__(
        self,
        inner: Union[RgbaImage, MaskedImage],
        mask: Rect,
        debug_mode: DebugMode | None = None,
    ) -> None:
        self._inner = inner
        self._mask = mask
        self._debug_mode = debug_mode
        self._children: weakref.WeakSet[MaskedImage] = weakref.WeakSet()
        if isinstance(inner, MaskedImage):
            inner._children.add(self)

    @classmethod
    def from_image(
        cls, image: RgbaImage, debug_mode: DebugMode | None = None
    ) -> MaskedImage:
        """Wrap an image with a mask covering all of it."""
        mode = debug_mode if debug_mode is not None else DebugMode.none()
        return cls(image, Rect.at(0, 0, image.width, image.height), mode)

    def mask(self, rect: Rect) -> MaskedImage:
        """Return a new masked image applying `rect` on top of this one's masks."""
        return MaskedImage(self, rect)

    @property
    def mask_rect(self) -> Rect:
        return self._mask

    @property
    def debug_mode(self) -> DebugMode:
        target: MaskedImage = self
        while isinstance(target._inner, MaskedImage):
            target = target._inner
        assert target._debug_mode is not None
        return target._debug_mode

    def draw_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Draw a pixel, subject to this mask and every mask beneath it."""
        if self._mask.contains(x, y):
            final = pixel
        elif self.debug_mode.transparent_masks:
            final = _TRANSPARENT_MASK_PIXEL
        else:
            return

        if isinstance(self._inner, MaskedImage):
            self._inner.draw_pixel(x, y, final)
        else:
            self._inner.blend_pixel(x, y, final)

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the underlying pixel, whether or not the mask contains it."""
        return self._inner.get_pixel(x, y)

    def dimensions(self) -> tuple[int, int]:
        """The size of the underlying image."""
        if isinstance(self._inner, MaskedImage):
            return self._inner.dimensions()
        return self._inner.dimensions

    def eject(self) -> RgbaImage:
        """Return the underlying image.

        Raises RuntimeError if any other mask still refers to this one or to
        a mask beneath it.
        """
        if len(self._children):
            raise RuntimeError("Image reference count was not one")
        target: MaskedImage = self
        while isinstance(target._inner, MaskedImage):
            parent = target._inner
            if any(child is not target for child in parent._children):
                raise RuntimeError("Image reference count was not one")
            target = parent
        return target._inner