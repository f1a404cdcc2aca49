"""A single raster layer of the canvas: a fixed-size grid of RGBA pixels."""

from __future__ import annotations

from typing import NamedTuple, Sequence, Union

Color = tuple[int, int, int, int]
ColorLike = Union[str, Sequence[int]]

TRANSPARENT: Color = (0, 0, 0, 0)
BLACK: Color = (0, 0, 0, 255)

# Each stroke marks this many pixels (from the drawn point) as needing a repaint.
_DIRTY_EXTENT = 5


class Rect(NamedTuple):
    """An axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float


def _to_rgba(color: ColorLike) -> Color:
    """Normalise an RGB/RGBA tuple or a ``#rrggbb[aa]`` string to an RGBA tuple."""
    if isinstance(color, str):
        text = color[1:] if color.startswith("#") else ""
        if len(text) not in (6, 8):
            raise ValueError(f"invalid colour string: {color!r}")
        try:
            channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError:
            raise ValueError(f"invalid colour string: {color!r}") from None
    else:
        channels = list(color)
    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"colour needs 3 or 4 channels, got {len(channels)}")
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in channels):
        raise ValueError(f"colour channels must be integers in 0..255: {color!r}")
    return tuple(channels)  # type: ignore[return-value]


def _blend(src: Color, dst: Color) -> Color:
    """Composite ``src`` over ``dst`` (source-over)."""
    src_alpha = src[3]
    if src_alpha == 255:
        return src
    if src_alpha == 0:
        return dst
    dst_weight = dst[3] * (255 - src_alpha) / 255
    out_alpha = src_alpha + dst_weight
    channels = tuple(
        round((s * src_alpha + d * dst_weight) / out_alpha)
        for s, d in zip(src[:3], dst[:3])
    )
    return (*channels, round(out_alpha))  # type: ignore[return-value]


class CanvasLayer:
    """A transparent pixel layer that can be painted one point at a time."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"layer size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[TRANSPARENT] * width for _ in range(height)]
        self._dirty: list[Rect] = []

    def bounding_rect(self) -> Rect:
        """The area the layer occupies in the scene."""
        return Rect(0.0, 0.0, float(self.width), float(self.height))

    def draw_pixel(self, x: int, y: int, color: ColorLike) -> None:
        """Paint one pixel; points outside the layer are clipped away."""
        rgba = _to_rgba(color)
        if 0 <= x < self.width and 0 <= y < self.height:
            self._rows[y][x] = _blend(rgba, self._rows[y][x])
        self._dirty.append(Rect(float(x), float(y), float(_DIRTY_EXTENT), float(_DIRTY_EXTENT)))

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the RGBA value stored at ``(x, y)``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} layer")
        return self._rows[y][x]

    def take_dirty(self) -> list[Rect]:
        """Return the regions that changed since the last call, and forget them."""
        dirty, self._dirty = self._dirty, []
        return dirty