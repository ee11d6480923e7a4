"""Drawing primitives: fonts, canvases, styled text and the inventory view."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from mcviewgen.component import DARK_GRAY, CharType, Component
from mcviewgen.imaging import cover, resize

INV_WIDTH, INV_HEIGHT = 352, 332
PLAYER_WIDTH, PLAYER_HEIGHT = 100, 140
PLAYER_START_X, PLAYER_START_Y = 52, 16
BACKGROUND_COLOR = (184, 184, 184, 255)
_NAME_FONT_SIZE = 8

_font_data: bytes | None = None


@dataclass
class FontOptions:
    shadow_offset: float
    bold_offset: float
    offset_y: float


def default_font_options(font_size: int, offset_y: float) -> FontOptions:
    """Shadow and bold offsets scaled to the font size."""
    shadow = math.ceil(font_size / 16) + 1
    return FontOptions(shadow_offset=float(shadow), bold_offset=float(shadow + 1), offset_y=offset_y)


def load_font(path: str) -> None:
    """Load the TrueType font used by :func:`get_font_face`."""
    global _font_data
    with open(path, "rb") as fh:
        data = fh.read()
    ImageFont.truetype(io.BytesIO(data), 12)
    _font_data = data


def get_font_face(font_size: float, dpi: float) -> ImageFont.FreeTypeFont:
    """A face of the loaded font at ``font_size`` points and ``dpi``."""
    if _font_data is None:
        raise RuntimeError("no font loaded")
    pixels = max(1, round(font_size * dpi / 72))
    return ImageFont.truetype(io.BytesIO(_font_data), pixels)


class Canvas:
    """An RGBA image with a current font."""

    def __init__(self, image: Image.Image, font=None) -> None:
        self.image = image if image.mode == "RGBA" else image.convert("RGBA")
        self.font = font if font is not None else ImageFont.load_default()

    def measure(self, text: str) -> tuple[float, float]:
        """Advance width and line height of ``text``."""
        width = float(self.font.getlength(text))
        try:
            ascent, descent = self.font.getmetrics()
            height = float(ascent + descent)
        except AttributeError:
            height = float(self.font.getbbox(text)[3])
        return width, height

    def draw_string(self, text: str, x: float, y: float, color) -> None:
        """Draw ``text`` with its baseline at ``y``."""
        drawer = ImageDraw.Draw(self.image)
        try:
            drawer.text((x, y), text, fill=tuple(color), font=self.font, anchor="ls")
        except (ValueError, TypeError):
            drawer.text((x, y - self.measure(text)[1]), text, fill=tuple(color), font=self.font)

    def draw_image(self, img: Image.Image, x: int, y: int) -> None:
        """Composite ``img`` over the canvas at (x, y)."""
        self.image = cover(img, self.image, x, y, 0, 0)


def new_image_with_background(width: float, height: float, color, font=None) -> Canvas:
    """A canvas of the rounded-up size filled with ``color``."""
    img = Image.new("RGBA", (math.ceil(width), math.ceil(height)), tuple(color))
    return Canvas(img, font)


def covey_image(img: Image.Image, start_x: float, start_y: float, height: float, canvas: Canvas) -> None:
    """Scale ``img`` to ``height`` keeping its aspect and draw it at the start point."""
    scale = height / img.height
    scaled = resize(img, max(1, int(img.width * scale)), max(1, int(height)))
    canvas.draw_image(scaled, int(start_x), int(start_y))


def print_char(
    start_x: float, start_y: float, component: Component, canvas: Canvas, options: FontOptions
) -> tuple[float, float]:
    """Draw the component's characters with shadows; return the end position."""
    for char in component.parse():
        content = char.content
        width = 0.0
        if char.type is CharType.DEFAULT:
            canvas.draw_string(
                content,
                start_x + options.shadow_offset,
                start_y + options.offset_y + options.shadow_offset,
                DARK_GRAY,
            )
            canvas.draw_string(content, start_x, start_y + options.offset_y, char.color)
            width = canvas.measure(content)[0]
        elif char.type is CharType.BOLD:
            for dx in (0.0, 1.0):
                for dy in (0.0, 1.0):
                    canvas.draw_string(
                        content,
                        start_x + dx + options.shadow_offset,
                        start_y + options.offset_y + options.shadow_offset + dy,
                        DARK_GRAY,
                    )
                    canvas.draw_string(content, start_x + dx, start_y + options.offset_y + dy, char.color)
            width = canvas.measure(content)[0] + options.bold_offset
        start_x += width
    return start_x, start_y


def inventory(name: str, inv: Image.Image, skin: Image.Image) -> Image.Image:
    """Place a rendered skin into the inventory image, with an optional name tag."""
    sharpened = skin.convert("RGBA").filter(ImageFilter.UnsharpMask(radius=0.5, percent=100, threshold=0))
    canvas = Canvas(cover(sharpened, inv, PLAYER_START_X, PLAYER_START_Y, -10, 3))
    if name:
        options = default_font_options(_NAME_FONT_SIZE, float(_NAME_FONT_SIZE) - 1)
        options.shadow_offset -= 1
        component = Component(name)
        canvas.font = get_font_face(float(_NAME_FONT_SIZE), 72)
        width, _ = component.compute(canvas.measure, options.bold_offset)
        start_x = PLAYER_START_X + (PLAYER_WIDTH - width) / 2 - 2
        start_y = PLAYER_START_Y + 2.0
        print_char(start_x, start_y, component, canvas, options)
    return canvas.image