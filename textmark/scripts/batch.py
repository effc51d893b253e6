#!/usr/bin/env python3
"""
Watermark one image, or every image in a folder, with a text string.

Modes:
- repeat: the text is tiled across the whole image in a staggered grid and
  rotated (requires --font)
- position: one outlined copy of the text at a corner or the center, colored
  for contrast against the image

Folder runs:
- --suffix appended to each output name
- --recursive and --keep-tree to mirror an input tree
"""

import argparse
import sys
from pathlib import Path
from typing import Callable

import humanize
from PIL import Image

from textmark.colors import parse_rgb
from textmark.config import POSITIONS, PositionConfig, RepeatConfig
from textmark.diagnostics import print_warning
from textmark.errors import ConfigurationError
from textmark.persist import open_image, save_image
from textmark.position import apply_position
from textmark.tiling import Watermarker

SUPPORTED_EXTS = {".jpg", ".jpeg", ".png", ".webp", ".tif", ".tiff", ".bmp"}


def iter_images(input_dir: Path, recursive: bool):
    if recursive:
        yield from sorted(p for p in input_dir.rglob("*") if p.is_file() and p.suffix.lower() in SUPPORTED_EXTS)
    else:
        yield from sorted(p for p in input_dir.iterdir() if p.is_file() and p.suffix.lower() in SUPPORTED_EXTS)


def build_output_path(out_dir: Path, src_path: Path, suffix: str, keep_tree: bool, base_input_dir: Path) -> Path:
    if keep_tree:
        rel = src_path.relative_to(base_input_dir)
        return out_dir / rel.with_stem(rel.stem + suffix)
    else:
        return out_dir / src_path.with_stem(src_path.stem + suffix).name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add a text watermark to an image or a folder of images.")
    parser.add_argument("--mode", default="repeat", help="Watermark mode: repeat or position (default: repeat).")
    parser.add_argument("-i", "--input", required=True, type=Path, help="Input image or folder of images.")
    parser.add_argument("-o", "--output", required=True, type=Path, help="Output image (file input) or folder.")
    parser.add_argument("-t", "--text", required=True, help="Watermark text.")

    # Shared
    parser.add_argument("--opacity", type=float, default=None, help="Opacity 0..1 (default: 0.5).")
    parser.add_argument("--font", type=Path, default=None, help="Path to a TTF/OTF font file (required for repeat).")

    # Repeat
    parser.add_argument("--color", default=None, help="repeat: watermark color hex (default: #4db6ac).")
    parser.add_argument("--space", type=int, default=None, help="repeat: pixels between tiles (default: 75).")
    parser.add_argument("--angle", type=int, default=None, help="repeat: rotation angle in degrees (default: 30).")
    parser.add_argument("--font-size", type=int, default=None, help="repeat: font size in pixels (default: 48).")
    parser.add_argument("--font-height-crop", type=float, default=None,
                        help="repeat: resize the mark height to font size * N (default: 1.0, no resize).")

    # Position
    parser.add_argument("--pos", "--position", dest="position", default=None,
                        help=f"position: one of {', '.join(POSITIONS)} (default: bottom-right).")
    parser.add_argument("--margin-ratio", type=float, default=None,
                        help="position: margin as a fraction of the image size (default: 0.04).")
    parser.add_argument("--jpg-bg", default="255,255,255", help="JPEG background RGB, e.g. 255,255,255.")

    # Folder runs
    parser.add_argument("--suffix", default="_wm", help="Suffix to append to file name in folder mode (default: _wm).")
    parser.add_argument("--recursive", action="store_true", help="Process subfolders recursively.")
    parser.add_argument("--keep-tree", action="store_true", help="Recreate input subfolder structure in output (use with --recursive).")
    return parser


def make_processor(args, jpg_bg) -> Callable[[Path, Path], Image.Image]:
    """Resolve the mode's config once and return a function that watermarks one file."""
    mode = args.mode.strip().lower()
    font_path = str(args.font) if args.font else None

    if mode == "repeat":
        if not font_path:
            raise ConfigurationError("repeat mode requires --font to be set")
        config = RepeatConfig.from_options(
            args.text,
            color=args.color,
            space=args.space,
            angle=args.angle,
            opacity=args.opacity,
            font_path=font_path,
            font_size=args.font_size,
            font_height_crop=args.font_height_crop,
        )
        watermarker = Watermarker(config, warn=print_warning)

        def process(src: Path, dst: Path) -> Image.Image:
            marked = watermarker.apply(open_image(src))
            save_image(marked, dst, jpg_bg)
            return marked

        return process

    if mode == "position":
        config = PositionConfig.from_options(
            args.text,
            opacity=args.opacity,
            position=args.position,
            font_path=font_path,
            margin_ratio=args.margin_ratio,
            jpg_background=jpg_bg,
        )

        def process(src: Path, dst: Path) -> Image.Image:
            marked = apply_position(open_image(src), config, warn=print_warning)
            save_image(marked, dst, config.jpg_background)
            return marked

        return process

    raise ConfigurationError(f"unsupported mode: {args.mode}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.text.strip():
        print("[error] Watermark text must not be empty.", file=sys.stderr)
        return 2

    try:
        jpg_bg = parse_rgb(args.jpg_bg)
    except ConfigurationError as e:
        print(f"[error] Invalid --jpg-bg '{args.jpg_bg}': {e}", file=sys.stderr)
        return 2

    try:
        process = make_processor(args, jpg_bg)
    except ConfigurationError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    input_path: Path = args.input
    output_path: Path = args.output

    if input_path.is_file():
        try:
            process(input_path, output_path)
        except Exception as ex:
            print(f"[fail] {input_path}: {ex}", file=sys.stderr)
            return 1
        print(f"[ok] {input_path} -> {output_path} ({humanize.naturalsize(output_path.stat().st_size)})")
        return 0

    if not input_path.is_dir():
        print(f"[error] Input does not exist: {input_path}", file=sys.stderr)
        return 1

    processed = 0
    failed = 0
    for src in iter_images(input_path, args.recursive):
        dst = build_output_path(output_path, src, args.suffix, args.keep_tree, input_path)
        try:
            process(src, dst)
        except Exception as ex:
            failed += 1
            print(f"[fail] {src}: {ex}", file=sys.stderr)
            continue
        processed += 1
        print(f"[ok] {src} -> {dst} ({humanize.naturalsize(dst.stat().st_size)})")

    if processed == 0:
        print("[warn] No images processed. Check your input folder and file extensions.", file=sys.stderr)
        return 1 if failed else 0
    print(f"[done] Processed {processed} image(s).")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
