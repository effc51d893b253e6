"""
Repeat a mark tile across the whole image.

The tile is laid out in a staggered (brick) grid on a square canvas big enough
to cover the image at any angle. The whole canvas is rotated once, centered
over the image and composited on top. Rotating the canvas instead of each tile
keeps tile edges free of resampling seams.
"""

import math
from typing import Optional

from PIL import Image

from .compositing import composite_clipped, same_rgb
from .config import RepeatConfig
from .diagnostics import Warn, resolve_warn
from .errors import EmptyContentError
from .fonts import load_font
from .mark import build_mark


def tile_canvas(mark: Image.Image, side: int, space: int) -> Image.Image:
    tw, th = mark.size
    sx = max(1, tw + space)
    sy = max(1, th + space)
    canvas = Image.new("RGBA", (side, side), (0, 0, 0, 0))

    y = 0
    row_shift = 0
    while y < side:
        x = -int(sx * 0.5 * row_shift)
        row_shift ^= 1
        while x < side:
            composite_clipped(canvas, mark, x, y)
            x += sx
        y += sy
    return canvas


def rotate_canvas(canvas: Image.Image, angle: float) -> Image.Image:
    return canvas.rotate(angle, resample=Image.BICUBIC, expand=True, fillcolor=(0, 0, 0, 0))


def tile_mark(
    base: Image.Image,
    mark: Image.Image,
    space: int,
    angle: float,
    warn: Optional[Warn] = None,
) -> Image.Image:
    warn = resolve_warn(warn)
    base_rgba = base.convert("RGBA")
    bw, bh = base_rgba.size
    mw, mh = mark.size

    side = math.ceil(math.hypot(bw, bh)) + 2 * max(mw, mh)
    rotated = rotate_canvas(tile_canvas(mark, side, space), angle)

    overlay = Image.new("RGBA", base_rgba.size, (0, 0, 0, 0))
    off_x = int((bw - rotated.width) / 2)
    off_y = int((bh - rotated.height) / 2)
    composite_clipped(overlay, rotated, off_x, off_y)

    result = Image.alpha_composite(base_rgba, overlay)
    if same_rgb(base_rgba, result):
        warn("result identical to source; watermark not visible (increase opacity or verify font)")
    return result


class Watermarker:
    """Builds the mark tile once for a RepeatConfig and applies it to any number of images."""

    def __init__(self, config: RepeatConfig, warn: Optional[Warn] = None, font=None):
        self.config = config
        self.warn = resolve_warn(warn)
        if font is None:
            font = load_font(config.font_path, config.font_size)
        self.mark = build_mark(
            config.text,
            config.rgba,
            font,
            config.font_size,
            font_height_crop=config.font_height_crop,
            opacity=config.opacity,
        )
        if self.mark is None:
            self.warn("generated mark image is empty; check mark text and font path")

    def apply(self, image: Image.Image) -> Image.Image:
        if self.mark is None:
            raise EmptyContentError("mark image not generated")
        return tile_mark(image, self.mark, self.config.space, self.config.angle, warn=self.warn)
