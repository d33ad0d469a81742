#!/usr/bin/env python3
# pip install pillow
"""
Pillow binding for the resizer: open an image, fit it into a box on a solid
background ("contain"), write it back out by file extension.
"""

from pathlib import Path
from typing import Protocol, Tuple

from PIL import Image

Color = Tuple[int, int, int, int]

JPEG_SUFFIXES = {".jpg", ".jpeg"}

class ImageCodec(Protocol):
    def probe(self, path: Path) -> Image.Image: ...

    def resize(self, image: Image.Image, size: Tuple[int, int], background: Color) -> Image.Image: ...

    def encode(self, image: Image.Image, path: Path) -> None: ...

def has_alpha(img: Image.Image) -> bool:
    return img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info

def contain_box(src: Tuple[int, int], box: Tuple[int, int]) -> Tuple[int, int]:
    """
    Largest (w, h) with the source aspect ratio that fits inside box.
    Scales up as well as down.
    """
    w, h = src
    bw, bh = box
    scale = min(bw / w, bh / h)
    return max(1, round(w * scale)), max(1, round(h * scale))

class PillowCodec:
    resample = Image.LANCZOS

    def probe(self, path: Path) -> Image.Image:
        # Image.open only reads the header; pixels load on first resize
        img = Image.open(path)
        if img.width == 0 or img.height == 0:
            raise ValueError(f"empty image: {img.width}x{img.height}")
        return img

    def resize(self, image: Image.Image, size: Tuple[int, int], background: Color) -> Image.Image:
        mode = "RGBA" if has_alpha(image) else "RGB"
        src = image if image.mode == mode else image.convert(mode)
        new_w, new_h = contain_box(src.size, size)
        scaled = src.resize((new_w, new_h), self.resample)

        fill = background if mode == "RGBA" else background[:3]
        canvas = Image.new(mode, size, fill)
        off_x = (size[0] - new_w) // 2
        off_y = (size[1] - new_h) // 2
        canvas.paste(scaled, (off_x, off_y))
        return canvas

    def encode(self, image: Image.Image, path: Path) -> None:
        if path.suffix.lower() in JPEG_SUFFIXES and image.mode != "RGB":
            image = image.convert("RGB")
        image.save(path)
