#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Resize screenshots to the App Store Connect iPad dimensions.

- For every .png/.jpg/.jpeg/.tiff/.bmp file directly inside the input folder:
  * Fit it into each supported size ("contain": whole image visible, aspect kept)
  * Fill the rest of the canvas with solid purple (143, 44, 235)
  * Write <name>_<w>x<h><ext> into the output folder (created if missing)
- Other files and subfolders are ignored.
- A file that fails to decode/resize/write is reported and skipped; the rest of
  the batch carries on. Outputs are overwritten on re-runs.

Usage:
  pip install -e .
  python3 -m tools.resize_for_app_store [input_folder] [output_folder]
  resize-for-app-store [input_folder] [output_folder]

Defaults: ./source-images -> ./resized-images-ipad

Note: the code lives in the repo's tools/ folder (no __init__.py), so `pip install`
puts a top-level namespace package called `tools` into site-packages. That name
is generic and can collide with other distributions shipping `tools`; install
into a dedicated virtualenv, or run from a checkout with `python3 -m`.
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence, Tuple

from tools.app_store_sizes import SUPPORTED_SIZES, TargetDimension
from tools.image_codec import Color, ImageCodec, PillowCodec

INPUT_DIR = Path("source-images")
OUTPUT_DIR = Path("resized-images-ipad")

BACKGROUND: Color = (143, 44, 235, 255)  # purple
IMAGE_EXTS = frozenset({".png", ".jpg", ".jpeg", ".tiff", ".bmp"})

SUCCESS = "success"
SKIPPED = "skipped"
FAILED = "failed"

@dataclass(frozen=True)
class ResizeConfig:
    sizes: Sequence[Optional[TargetDimension]] = SUPPORTED_SIZES
    background: Color = BACKGROUND
    extensions: FrozenSet[str] = IMAGE_EXTS

@dataclass(frozen=True)
class FileResult:
    name: str
    status: str
    outputs: Tuple[Path, ...] = ()
    reason: str = ""
    error: Optional[BaseException] = field(default=None, compare=False)

DEFAULT_CONFIG = ResizeConfig()

def output_name(stem: str, size: TargetDimension, ext: str) -> str:
    """'photo', 2064x2752, '.png' -> 'photo_2064x2752.png'"""
    return f"{stem}_{size.width}x{size.height}{ext}"

def resize_file(path: Path, output_folder: Path, config: ResizeConfig, codec: ImageCodec) -> FileResult:
    name = path.name
    written: List[Path] = []
    try:
        with codec.probe(path) as img:
            for size in config.sizes:
                if size is None:
                    continue
                print(f"Processing {name} for {size}")
                out = output_folder / output_name(path.stem, size, path.suffix)
                resized = codec.resize(img, size.box, config.background)
                codec.encode(resized, out)
                written.append(out)
                print(f"Resized {name} to {size}")
    except Exception as exc:
        print(f"Error processing {name}: {exc}", file=sys.stderr)
        return FileResult(name, FAILED, tuple(written), reason=str(exc), error=exc)
    return FileResult(name, SUCCESS, tuple(written))

def resize_images(
    input_folder: Path,
    output_folder: Path,
    config: ResizeConfig = DEFAULT_CONFIG,
    codec: Optional[ImageCodec] = None,
) -> List[FileResult]:
    """
    Resize every recognised image in input_folder (non-recursive) to each size
    in config.sizes. Returns one FileResult per directory entry, in name order.
    OSError from creating output_folder or listing input_folder propagates.
    """
    input_folder = Path(input_folder)
    output_folder = Path(output_folder)
    codec = codec or PillowCodec()
    exts = {e.lower() for e in config.extensions}

    output_folder.mkdir(parents=True, exist_ok=True)

    results: List[FileResult] = []
    for p in sorted(input_folder.iterdir(), key=lambda p: p.name):
        if p.suffix.lower() not in exts:
            # silent: not an image (or a folder)
            results.append(FileResult(p.name, SKIPPED, reason=f"unsupported extension {p.suffix!r}"))
            continue
        results.append(resize_file(p, output_folder, config, codec))
    return results

def main(argv: Optional[Sequence[str]] = None):
    ap = argparse.ArgumentParser(description="Resize images to App Store Connect iPad screenshot sizes.")
    ap.add_argument("input", nargs="?", default=str(INPUT_DIR), help=f"Folder with source images (default: {INPUT_DIR})")
    ap.add_argument("output", nargs="?", default=str(OUTPUT_DIR), help=f"Folder for resized images (default: {OUTPUT_DIR})")
    args = ap.parse_args(argv)

    src = Path(args.input)
    dst = Path(args.output)
    if not src.is_dir():
        raise SystemExit(f"Error in image resizing: input folder not found: {src}")

    try:
        results = resize_images(src, dst)
    except OSError as exc:
        raise SystemExit(f"Error in image resizing: {exc}")

    print("Image resizing complete!")
    done = sum(1 for r in results if r.status == SUCCESS)
    failed = sum(1 for r in results if r.status == FAILED)
    print(f"\nDone. Files resized: {done}, failed: {failed}")
    if failed:
        raise SystemExit(1)

if __name__ == "__main__":
    main()
