"""One-shot helpers: read an image, watermark it, write the result."""

from typing import Optional, Sequence

from PIL import Image

from .config import WHITE, PositionConfig, RepeatConfig
from .diagnostics import Warn
from .persist import PathLike, open_image, save_image
from .position import apply_position
from .tiling import Watermarker


def add_repeat_watermark(
    input_path: PathLike,
    output_path: PathLike,
    text: str,
    *,
    color: Optional[str] = None,
    space: Optional[int] = None,
    angle: Optional[int] = None,
    opacity: Optional[float] = None,
    font_path: Optional[str] = None,
    font_size: Optional[int] = None,
    font_height_crop: Optional[float] = None,
    warn: Optional[Warn] = None,
) -> Image.Image:
    config = RepeatConfig.from_options(
        text,
        color=color,
        space=space,
        angle=angle,
        opacity=opacity,
        font_path=font_path,
        font_size=font_size,
        font_height_crop=font_height_crop,
    )
    marked = Watermarker(config, warn=warn).apply(open_image(input_path))
    save_image(marked, output_path, WHITE)
    return marked


def add_position_watermark(
    input_path: PathLike,
    output_path: PathLike,
    text: str,
    *,
    opacity: Optional[float] = None,
    position: Optional[str] = None,
    font_path: Optional[str] = None,
    margin_ratio: Optional[float] = None,
    jpg_background: Optional[Sequence[int]] = None,
    warn: Optional[Warn] = None,
) -> Image.Image:
    config = PositionConfig.from_options(
        text,
        opacity=opacity,
        position=position,
        font_path=font_path,
        margin_ratio=margin_ratio,
        jpg_background=tuple(jpg_background) if jpg_background is not None else None,
    )
    marked = apply_position(open_image(input_path), config, warn=warn)
    save_image(marked, output_path, config.jpg_background)
    return marked
