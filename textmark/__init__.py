"""Tiled and single-position text watermarks for raster images."""

from .api import add_position_watermark, add_repeat_watermark
from .compositing import flatten
from .config import POSITIONS, PositionConfig, RepeatConfig
from .errors import ConfigurationError, EmptyContentError, FontLoadError, WatermarkError
from .mark import build_mark
from .persist import open_image, save_image
from .position import apply_position
from .tiling import Watermarker, tile_mark

__version__ = "0.1.0"

__all__ = [
    "POSITIONS",
    "ConfigurationError",
    "EmptyContentError",
    "FontLoadError",
    "PositionConfig",
    "RepeatConfig",
    "WatermarkError",
    "Watermarker",
    "add_position_watermark",
    "add_repeat_watermark",
    "apply_position",
    "build_mark",
    "flatten",
    "open_image",
    "save_image",
    "tile_mark",
]
