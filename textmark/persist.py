from pathlib import Path
from typing import Sequence, Union

from PIL import Image, ImageOps

from .compositing import flatten

PathLike = Union[str, Path]

JPEG_QUALITY = 100


def open_image(path: PathLike) -> Image.Image:
    with Image.open(path) as im0:
        im = ImageOps.exif_transpose(im0)
        return im.convert("RGBA")


def encoder_for(ext: str) -> str:
    """Pillow format that can write ``ext``, or JPEG when Pillow only reads it (or not at all)."""
    fmt = Image.registered_extensions().get(ext)
    return fmt if fmt in Image.SAVE else "JPEG"


def save_image(image: Image.Image, path: PathLike, jpg_background: Sequence[int] = (255, 255, 255)) -> Path:
    """
    Save by extension. PNG keeps alpha; JPEG and anything else is flattened onto
    ``jpg_background`` first so translucent edges are not blended against black.
    """
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    ext = out_path.suffix.lower()

    if ext == ".png":
        image.save(out_path, format="PNG")
    elif ext in (".jpg", ".jpeg"):
        flatten(image, jpg_background).save(out_path, format="JPEG", quality=JPEG_QUALITY)
    else:
        fmt = encoder_for(ext)
        save_kwargs = {"quality": JPEG_QUALITY} if fmt in {"JPEG", "WEBP"} else {}
        flatten(image, jpg_background).save(out_path, format=fmt, **save_kwargs)
    return out_path
