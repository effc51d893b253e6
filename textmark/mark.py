"""
Turn watermark text into a reusable mark tile.

The text is drawn onto a roomy transparent canvas, cropped to the pixels that
actually carry ink, optionally stretched to a fixed height and finally has its
alpha scaled by the requested opacity. The tile is built once and reused for
every repetition.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw

from .compositing import round_half_up
from .config import check_opacity


def tight_alpha_bounds(image: Image.Image) -> Optional[Tuple[int, int, int, int]]:
    """Bounding box of all pixels with non-zero alpha, or None if there are none."""
    return image.getchannel("A").getbbox()


def set_opacity(image: Image.Image, opacity: float) -> Image.Image:
    check_opacity(opacity)
    out = image.convert("RGBA")
    alpha = out.getchannel("A").point(lambda a: round_half_up(a * opacity))
    out.putalpha(alpha)
    return out


def build_mark(
    text: str,
    color: Tuple[int, int, int, int],
    font,
    font_size: int,
    font_height_crop: float = 1.0,
    opacity: float = 1.0,
) -> Optional[Image.Image]:
    """
    Render ``text`` and return the cropped, opacity-scaled tile.

    Returns None when nothing visible was drawn (blank text, or a font with no
    glyphs for it); callers treat that as "no watermark", not as a crash.
    """
    check_opacity(opacity)

    pad = max(8, font_size // 2)
    tmp_w = max(200, font_size * max(4, len(text))) + 2 * pad
    tmp_h = max(64, int(font_size * 2.5)) + 2 * pad
    canvas = Image.new("RGBA", (tmp_w, tmp_h), (0, 0, 0, 0))
    ImageDraw.Draw(canvas).text((pad, pad), text, font=font, fill=tuple(color))

    bbox = tight_alpha_bounds(canvas)
    if bbox is None:
        return None
    mark = canvas.crop(bbox)

    if font_height_crop and font_height_crop > 0 and font_height_crop != 1.0:
        new_h = max(1, round_half_up(font_size * font_height_crop))
        mark = mark.resize((mark.width, new_h), Image.LANCZOS)

    return set_opacity(mark, opacity)
