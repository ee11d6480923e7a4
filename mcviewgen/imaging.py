"""Image reading, cropping, scaling and compositing."""

from __future__ import annotations

import io

from PIL import Image


def read_image(file_path: str) -> Image.Image:
    """Open and fully load an image file."""
    with Image.open(file_path) as img:
        img.load()
        return img.copy()


def cut(img: Image.Image, x0: int, y0: int, x1: int, y1: int) -> Image.Image:
    """Crop the rectangle (x0, y0)-(x1, y1) into a new RGBA image."""
    return img.convert("RGBA").crop((x0, y0, x1, y1))


def resize(img: Image.Image, width: int, height: int) -> Image.Image:
    """Scale to the given size with bicubic filtering."""
    return img.resize((width, height), Image.Resampling.BICUBIC)


def cover(
    top: Image.Image, bg: Image.Image, x0: int, y0: int, offset_x: int, offset_y: int
) -> Image.Image:
    """Composite ``top`` over a copy of ``bg`` at (x0+offset_x, y0+offset_y)."""
    result = bg.convert("RGBA").copy()
    layer = top.convert("RGBA")
    x, y = x0 + offset_x, y0 + offset_y
    left, upper = max(0, -x), max(0, -y)
    right = min(layer.width, result.width - x)
    lower = min(layer.height, result.height - y)
    if right > left and lower > upper:
        result.alpha_composite(layer.crop((left, upper, right, lower)), dest=(x + left, y + upper))
    return result


def bytes_to_image(data: bytes) -> tuple[Image.Image, str]:
    """Decode image bytes, returning the image and its lower-case format name."""
    with Image.open(io.BytesIO(data)) as img:
        img.load()
        fmt = (img.format or "").lower()
        return img.copy(), fmt