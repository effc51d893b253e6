from pathlib import Path
from typing import Iterable, Optional

from PIL import ImageFont

from .diagnostics import Warn, resolve_warn
from .errors import ConfigurationError, FontLoadError

SYSTEM_FONT_CANDIDATES = (
    "arial.ttf",
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    r"C:\Windows\Fonts\arial.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/arial.ttf",
)


def find_default_font(candidates: Iterable[str] = SYSTEM_FONT_CANDIDATES) -> Optional[str]:
    for p in candidates:
        if p and Path(p).exists():
            return p
    return None


def load_font(font_path: Optional[str], font_size: int) -> ImageFont.FreeTypeFont:
    """Load a TrueType/OpenType font, with no fallback."""
    if not font_path or not str(font_path).strip():
        raise ConfigurationError("font path is required")
    try:
        return ImageFont.truetype(str(font_path), font_size)
    except OSError as e:
        raise FontLoadError(f"could not load font {str(font_path)!r}: {e}") from e


def load_font_with_fallback(
    font_path: Optional[str],
    font_size: int,
    warn: Optional[Warn] = None,
    candidates: Iterable[str] = SYSTEM_FONT_CANDIDATES,
):
    """Explicit font, then the first system Arial found, then Pillow's bundled font."""
    warn = resolve_warn(warn)
    if font_path:
        try:
            return load_font(font_path, font_size)
        except (ConfigurationError, FontLoadError) as e:
            warn(f"{e}. Falling back.")
    default = find_default_font(candidates)
    if default:
        try:
            return load_font(default, font_size)
        except FontLoadError as e:
            warn(f"failed to load fallback font: {e}")
    warn("Falling back to Pillow's bundled default font.")
    try:
        return ImageFont.load_default(size=font_size)
    except (OSError, ValueError, ImportError) as e:
        raise FontLoadError(f"bundled default font unavailable: {e}") from e
