"""
Place a single legible watermark at a corner or the center.

Font size follows the image size, and fill/outline colors are picked from the
brightness behind the middle of the image so the text stays readable.
"""

from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageStat

from .compositing import composite_clipped, round_half_up
from .config import BOTTOM_LEFT, BOTTOM_RIGHT, CENTER, TOP_LEFT, TOP_RIGHT, PositionConfig
from .diagnostics import Warn
from .errors import EmptyContentError
from .fonts import load_font_with_fallback

Rect = Tuple[int, int, int, int]
Color = Tuple[int, int, int, int]

MIN_FONT_SIZE = 16
OUTLINE_ALPHA_FACTOR = 0.6
OUTLINE_RADIUS = 2


def position_font_size(width: int, height: int) -> int:
    return max(min(width, height) // 25, MIN_FONT_SIZE)


def text_size(font, text: str) -> Tuple[int, int]:
    left, top, right, bottom = font.getbbox(text)
    w, h = right - left, bottom - top
    if w <= 0 or h <= 0:
        raise EmptyContentError("text bounds are empty")
    return w, h


def sample_rect(width: int, height: int, text_w: int, text_h: int) -> Rect:
    """Text-sized box centered on the image, clipped to it; the whole image if that is empty."""
    x0 = max(width // 2 - text_w // 2, 0)
    y0 = max(height // 2 - text_h // 2, 0)
    x1 = min(width // 2 + text_w // 2, width)
    y1 = min(height // 2 + text_h // 2, height)
    if x0 >= x1 or y0 >= y1:
        return (0, 0, width, height)
    return (x0, y0, x1, y1)


def mean_red(image: Image.Image, rect: Rect) -> float:
    return ImageStat.Stat(image.crop(rect)).mean[0]


def _clamp(x: int, lo: int = 0, hi: int = 255) -> int:
    return max(lo, min(hi, x))


def pick_colors(brightness: float, opacity: float) -> Tuple[Color, Color]:
    """Return (fill, outline): dark text on bright backgrounds, light text otherwise."""
    alpha = _clamp(round_half_up(255 * opacity))
    outline_alpha = _clamp(round_half_up(255 * opacity * OUTLINE_ALPHA_FACTOR))
    if brightness > 128:
        return (0, 0, 0, alpha), (255, 255, 255, outline_alpha)
    return (255, 255, 255, alpha), (0, 0, 0, outline_alpha)


def anchor_origin(
    position: str, width: int, height: int, text_w: int, text_h: int, margin_ratio: float
) -> Tuple[int, int]:
    margin_w = round_half_up(width * margin_ratio)
    margin_h = round_half_up(height * margin_ratio)
    choices = {
        BOTTOM_RIGHT: (width - text_w - margin_w, height - text_h - margin_h),
        BOTTOM_LEFT: (margin_w, height - text_h - margin_h),
        TOP_RIGHT: (width - text_w - margin_w, margin_h),
        TOP_LEFT: (margin_w, margin_h),
        CENTER: ((width - text_w) // 2, (height - text_h) // 2),
    }
    key = (position or "").strip().lower()
    return choices.get(key, choices[BOTTOM_RIGHT])


def draw_text_over(image: Image.Image, font, xy: Tuple[int, int], text: str, color: Color) -> None:
    """Draw ``text`` with its ink box at ``xy`` and alpha-composite it onto ``image``."""
    left, top, right, bottom = font.getbbox(text)
    if right <= left or bottom <= top:
        return
    layer = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
    ImageDraw.Draw(layer).text((-left, -top), text, font=font, fill=color)
    composite_clipped(image, layer, xy[0] + left, xy[1] + top)


def draw_text_outlined(
    image: Image.Image,
    font,
    xy: Tuple[int, int],
    text: str,
    fill: Color,
    outline: Color,
    radius: int = OUTLINE_RADIUS,
) -> None:
    x, y = xy
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx == 0 and dy == 0:
                continue
            draw_text_over(image, font, (x + dx, y + dy), text, outline)
    draw_text_over(image, font, (x, y), text, fill)


def apply_position(base: Image.Image, config: PositionConfig, warn: Optional[Warn] = None) -> Image.Image:
    img = base.convert("RGBA")
    width, height = img.size

    font = load_font_with_fallback(config.font_path, position_font_size(width, height), warn=warn)
    text_w, text_h = text_size(font, config.text)

    brightness = mean_red(img, sample_rect(width, height, text_w, text_h))
    fill, outline = pick_colors(brightness, config.opacity)
    xy = anchor_origin(config.position, width, height, text_w, text_h, config.margin_ratio)

    draw_text_outlined(img, font, xy, config.text, fill, outline)
    return img
