"""Settings for the two watermark modes.

Each config is a dataclass with the defaults the CLI exposes. ``from_options``
accepts overrides where ``None`` means "keep the default", so unset command line
flags can be forwarded as-is.
"""

from dataclasses import dataclass, fields
from typing import Optional, Tuple

from .colors import parse_hex_color
from .errors import ConfigurationError

BOTTOM_RIGHT = "bottom-right"
BOTTOM_LEFT = "bottom-left"
TOP_RIGHT = "top-right"
TOP_LEFT = "top-left"
CENTER = "center"

POSITIONS = (BOTTOM_RIGHT, BOTTOM_LEFT, TOP_RIGHT, TOP_LEFT, CENTER)

WHITE = (255, 255, 255)


def check_opacity(opacity: float) -> float:
    if not 0.0 <= opacity <= 1.0:
        raise ConfigurationError(f"opacity must be between 0 and 1, got {opacity}")
    return opacity


def _check_text(text: str) -> None:
    if not text or not text.strip():
        raise ConfigurationError("mark text must not be empty")


class _Options:
    @classmethod
    def from_options(cls, text: str, **overrides):
        names = {f.name for f in fields(cls)}
        unknown = set(overrides) - names
        if unknown:
            raise TypeError(f"unknown option(s): {', '.join(sorted(unknown))}")
        given = {k: v for k, v in overrides.items() if v is not None}
        return cls(text=text, **given)


@dataclass(frozen=True)
class RepeatConfig(_Options):
    text: str
    color: str = "#4db6ac"
    space: int = 75
    angle: int = 30
    opacity: float = 0.5
    font_path: Optional[str] = None
    font_size: int = 48
    font_height_crop: float = 1.0

    def __post_init__(self):
        _check_text(self.text)
        if not self.font_path or not str(self.font_path).strip():
            raise ConfigurationError("repeat mode requires a font path")
        check_opacity(self.opacity)
        if self.font_size <= 0:
            raise ConfigurationError("font size must be positive")
        if not self.font_height_crop > 0:
            raise ConfigurationError("font height crop must be > 0")
        parse_hex_color(self.color)

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return parse_hex_color(self.color)


@dataclass(frozen=True)
class PositionConfig(_Options):
    text: str
    opacity: float = 0.5
    position: str = BOTTOM_RIGHT
    font_path: Optional[str] = None
    margin_ratio: float = 0.04
    jpg_background: Tuple[int, ...] = WHITE

    def __post_init__(self):
        _check_text(self.text)
        check_opacity(self.opacity)
