"""Alpha compositing helpers shared by both watermark modes."""

import math
from typing import Sequence

from PIL import Image, ImageChops


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def composite_clipped(base_rgba: Image.Image, layer: Image.Image, x: int, y: int) -> None:
    """
    Composite ``layer`` over ``base_rgba`` at (x,y) in place, clipping whatever
    falls outside the base.
    """
    W, H = base_rgba.size
    lw, lh = layer.size
    x0, y0 = max(x, 0), max(y, 0)
    x1, y1 = min(x + lw, W), min(y + lh, H)
    if x0 >= x1 or y0 >= y1:
        return
    base_rgba.alpha_composite(layer, dest=(x0, y0), source=(x0 - x, y0 - y, x1 - x, y1 - y))


def flatten(image: Image.Image, background: Sequence[int]) -> Image.Image:
    """Composite ``image`` over an opaque ``background`` and drop the alpha channel."""
    r, g, b = background[:3]
    canvas = Image.new("RGBA", image.size, (r, g, b, 255))
    canvas.alpha_composite(image.convert("RGBA"))
    return canvas.convert("RGB")


def same_rgb(a: Image.Image, b: Image.Image) -> bool:
    if a.size != b.size:
        return False
    diff = ImageChops.difference(a.convert("RGB"), b.convert("RGB"))
    return diff.getbbox() is None
